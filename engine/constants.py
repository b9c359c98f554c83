"""
engine/constants.py
────────────────────────────────────────────────────────────────────────
Fixed, evidence-referenced lookup tables shared by the calculator, the
modifier pipeline, the rule batteries and the alternative generator.

Everything here is read-only for the life of the process.
"""

from __future__ import annotations

from types import MappingProxyType

# ──────────────────────────────────────────────────────────────────────
#  Energy
# ──────────────────────────────────────────────────────────────────────
KCAL_PER_KG_TISSUE = 7700
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARB = 4
KCAL_PER_G_FAT = 9

# Mifflin–St Jeor sex offsets; "other" is the mean of the two
BMR_SEX_OFFSET = MappingProxyType({
    "male": 5.0,
    "female": -161.0,
    "other": -78.0,
})

# NEAT from occupation only (no separate "activity level" multiplier)
OCCUPATION_MULTIPLIERS = MappingProxyType({
    "desk_job": 1.25,
    "light_active": 1.35,
    "moderate_active": 1.45,
    "heavy_labor": 1.60,
    "very_active": 1.70,
})

# MET values by (intensity, workout type)
MET_TABLE = MappingProxyType({
    "beginner": MappingProxyType({
        "strength": 3.5, "cardio": 5.0, "sports": 4.5, "yoga": 2.5, "hiit": 6.0,
        "pilates": 3.0, "flexibility": 2.5, "functional": 4.0, "mixed": 4.0,
    }),
    "intermediate": MappingProxyType({
        "strength": 5.0, "cardio": 7.0, "sports": 6.5, "yoga": 3.5, "hiit": 8.0,
        "pilates": 4.5, "flexibility": 3.0, "functional": 6.0, "mixed": 6.0,
    }),
    "advanced": MappingProxyType({
        "strength": 6.5, "cardio": 9.0, "sports": 8.5, "yoga": 4.5, "hiit": 10.0,
        "pilates": 6.0, "flexibility": 4.0, "functional": 7.5, "mixed": 7.5,
    }),
})
DEFAULT_WORKOUT_TYPE = "mixed"

# ──────────────────────────────────────────────────────────────────────
#  Weekly rate thresholds (fraction of body weight per week)
# ──────────────────────────────────────────────────────────────────────
OPTIMAL_RATE_PCT = 0.0075
BALANCED_RATE_PCT = 0.0085
SAFE_MAX_RATE_PCT = 0.01
EXTREME_RATE_PCT = 0.015
OPTIMAL_GAIN_RATE_PCT = 0.005

# ──────────────────────────────────────────────────────────────────────
#  Body composition
# ──────────────────────────────────────────────────────────────────────
ESTIMATE_CONFIDENCE_THRESHOLD = 70
DEFAULT_BODY_FAT = MappingProxyType({"male": 20.0, "female": 28.0, "other": 28.0})
ESSENTIAL_BODY_FAT = MappingProxyType({"male": 5.0, "female": 12.0, "other": 8.5})
UNDERWEIGHT_BMI = 17.5
HEALTHY_MIN_BMI = 18.5
OBESITY_CLASS_II_BMI = 35.0

# ──────────────────────────────────────────────────────────────────────
#  Calories
# ──────────────────────────────────────────────────────────────────────
ABSOLUTE_MIN_KCAL = MappingProxyType({"male": 1500.0, "female": 1200.0, "other": 1350.0})
DEFICIT_CAP_RECOMMENDED = 0.20
DEFICIT_CAP_CONSERVATIVE = 0.15

PREGNANCY_TRIMESTER_KCAL = MappingProxyType({1: 0.0, 2: 340.0, 3: 450.0})
LACTATION_KCAL = 500.0

# ──────────────────────────────────────────────────────────────────────
#  Macros / hydration
# ──────────────────────────────────────────────────────────────────────
PROTEIN_G_PER_KG = MappingProxyType({
    "cutting": 2.2,
    "recomp": 2.4,
    "bulking": 1.8,
    "weight_gain": 1.6,
    "maintenance": 1.6,
})
ELDERLY_PROTEIN_MIN_G_PER_KG = 2.0
OLDER_ADULT_PROTEIN_BONUS = 0.2

WATER_ML_PER_KG = 35
FIBER_G_PER_1000_KCAL = 14

# ──────────────────────────────────────────────────────────────────────
#  Age / sleep modifiers
# ──────────────────────────────────────────────────────────────────────
# lower bound of each band, factor for that band
AGE_BAND_EDGES = (30, 40, 50, 60)
AGE_BAND_FACTORS = (1.0, 0.98, 0.95, 0.90, 0.85)
MENOPAUSE_AGE_RANGE = (45, 55)
MENOPAUSE_FACTOR = 0.95

OPTIMAL_SLEEP_HOURS = 7.0
SLEEP_PENALTY_PER_HOUR = 0.20
SEVERE_SLEEP_HOURS = 5.0
LOW_SLEEP_HOURS = 6.0

# ──────────────────────────────────────────────────────────────────────
#  Diet readiness (14 habit flags; coffee and supplements are neutral)
# ──────────────────────────────────────────────────────────────────────
READINESS_WEIGHTS = MappingProxyType({
    "drinks_enough_water": 10,
    "limits_sugary_drinks": 15,
    "eats_regular_meals": 25,
    "avoids_late_night_eating": 10,
    "controls_portion_sizes": 30,
    "reads_nutrition_labels": 20,
    "eats_5_servings_fruits_veggies": 20,
    "limits_refined_sugar": 15,
    "includes_healthy_fats": 10,
    "eats_processed_foods": -20,
    "drinks_alcohol": -10,
    "smokes_tobacco": -15,
    "drinks_coffee": 0,
    "takes_supplements": 0,
})
READINESS_RAW_RANGE = (-45.0, 155.0)
LOW_READINESS_SCORE = 40

# ──────────────────────────────────────────────────────────────────────
#  Training volume
# ──────────────────────────────────────────────────────────────────────
MAX_WEEKLY_TRAINING_HOURS = 15.0
MAX_WEEKLY_TRAINING_HOURS_VERY_ACTIVE = 20.0
HIGH_WEEKLY_TRAINING_HOURS = 12.0
MAX_SESSIONS_PER_WEEK = 7
MIN_SESSIONS_FOR_DEFICIT = 2

# ──────────────────────────────────────────────────────────────────────
#  Medical condition catalogue
#  condition → (category, tdee_pct, carb_reduction_pct)
# ──────────────────────────────────────────────────────────────────────
THYROID = "thyroid"
INSULIN_RESISTANCE = "insulin_resistance"
CARDIOVASCULAR = "cardiovascular"

CONDITION_CATALOG = MappingProxyType({
    "hypothyroid": (THYROID, -0.10, 0.0),
    "hypothyroidism": (THYROID, -0.10, 0.0),
    "thyroid": (THYROID, -0.10, 0.0),
    "hyperthyroid": (THYROID, 0.15, 0.0),
    "hyperthyroidism": (THYROID, 0.15, 0.0),
    "graves-disease": (THYROID, 0.15, 0.0),
    "pcos": (INSULIN_RESISTANCE, 0.0, 0.25),
    "diabetes-type1": (INSULIN_RESISTANCE, 0.0, 0.25),
    "diabetes-type2": (INSULIN_RESISTANCE, 0.0, 0.25),
    "hypertension": (CARDIOVASCULAR, 0.0, 0.0),
    "heart-disease": (CARDIOVASCULAR, 0.0, 0.0),
})
DEFAULT_CONDITION_PRIORITY = (THYROID, INSULIN_RESISTANCE, CARDIOVASCULAR)

MAX_TDEE_ADJUSTMENT = 0.15
MAX_CARB_REDUCTION = 0.30

HIGH_RISK_CONDITIONS = frozenset({"diabetes-type1", "diabetes-type2", "heart-disease", "hypertension"})
METABOLISM_MEDICATIONS = (
    "levothyroxine", "synthroid", "antidepressant", "beta-blocker", "prednisone", "insulin",
)
HIGH_IMPACT_LIMITATIONS = ("knee-issues", "back-pain", "arthritis", "joint-problems")
VEGAN_PROTEIN_SOURCES = ("soy", "tofu", "legumes", "beans", "nuts", "peanuts", "seeds")
VEGAN_PROTEIN_CEILING_G = 150
