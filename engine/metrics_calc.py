"""
engine/metrics_calc.py
────────────────────────────────────────────────────────────────────────
Metric Calculator: raw profile fields → CalculatedMetrics.

1. BMR  (Mifflin–St Jeor, mean offset for non-binary sexes)
2. Base TDEE (occupation multiplier only, never stacked with an
   "activity level" multiplier)
3. Exercise burn (MET × kg × hours, weekly total amortised per day)
4. Target calories / weekly rate from the weight endpoints and timeline
5. Body-fat resolution by source priority
6. Diet readiness, macros, water, fiber, heart-rate zones, fitness extras

`compute()` is total for any profile inside its declared domains: it never
raises for implausible values, the rule batteries judge those.
"""

from __future__ import annotations

import logging

import numpy as np

from engine.constants import (
    BMR_SEX_OFFSET,
    DEFAULT_BODY_FAT,
    DEFAULT_WORKOUT_TYPE,
    ELDERLY_PROTEIN_MIN_G_PER_KG,
    ESTIMATE_CONFIDENCE_THRESHOLD,
    FIBER_G_PER_1000_KCAL,
    KCAL_PER_G_CARB,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    KCAL_PER_KG_TISSUE,
    MET_TABLE,
    OCCUPATION_MULTIPLIERS,
    OLDER_ADULT_PROTEIN_BONUS,
    PROTEIN_G_PER_KG,
    READINESS_RAW_RANGE,
    READINESS_WEIGHTS,
    WATER_ML_PER_KG,
)
from engine.domain import parse_clock
from engine.models.metrics import (
    BodyFatEstimate,
    BodyFatSource,
    CalculatedMetrics,
    Confidence,
    GoalDirection,
    HeartRateZone,
    HeartRateZones,
    Macros,
)
from engine.models.profile import DietHabits, Goal, Intensity, Occupation, Profile, Sex

_LOG = logging.getLogger(__name__)

# expected BMR by age band, lower bound inclusive (70 kg male / 60 kg female)
_EXPECTED_BMR = {
    "male": ((18, 1750), (25, 1700), (35, 1650), (45, 1580), (55, 1500), (65, 1400)),
    "female": ((18, 1400), (25, 1350), (35, 1300), (45, 1250), (55, 1200), (65, 1150)),
}
_BMR_DECLINE_PER_YEAR = {"male": 10.0, "female": 8.0, "other": 9.0}


# ──────────────────────────────────────────────────────────────────────
#  Goal direction helpers (shared with modifiers / rules / alternatives)
# ──────────────────────────────────────────────────────────────────────
def goal_direction(p: Profile) -> GoalDirection:
    if p.target_weight_kg < p.weight_kg:
        return GoalDirection.lose
    if p.target_weight_kg > p.weight_kg:
        return GoalDirection.gain
    return GoalDirection.maintain


def goal_conflict(p: Profile) -> bool:
    return p.has_goal(Goal.lose_weight) and p.has_goal(Goal.gain_weight)


def required_weekly_rate(p: Profile) -> float:
    return abs(p.target_weight_kg - p.weight_kg) / p.timeline_weeks


def daily_energy_delta(weekly_rate_kg: float) -> float:
    """kcal/day needed to move `weekly_rate_kg` of tissue per week."""
    return weekly_rate_kg * KCAL_PER_KG_TISSUE / 7


def sleep_hours(wake_time: str, sleep_time: str) -> float:
    minutes = parse_clock(wake_time) - parse_clock(sleep_time)
    if minutes < 0:
        minutes += 24 * 60
    return minutes / 60


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class MetricCalculator:
    """Source-of-truth for BMR/TDEE/targets before any modifier runs."""

    # --------------- public entrypoint --------------------------------
    def compute(self, p: Profile) -> CalculatedMetrics:
        bmr = self.bmr(p)
        bmi = self.bmi(p.weight_kg, p.height_cm)
        base_tdee = self.base_tdee(bmr, p.occupation)
        session = self.session_burn(p)
        exercise = session * p.workouts_per_week / 7
        tdee = base_tdee + exercise

        direction = goal_direction(p)
        rate = required_weekly_rate(p)
        target = self.target_calories(tdee, rate, direction)
        macros = self.macros(target, self.protein_g(p, direction), p)

        body_fat = self.resolve_body_fat(p, bmi)
        fat_mass = p.weight_kg * body_fat.value / 100

        return CalculatedMetrics(
            bmr=bmr,
            bmi=bmi,
            base_tdee=base_tdee,
            session_burn=session,
            exercise_burn=exercise,
            tdee=tdee,
            target_calories=target,
            goal_direction=direction,
            goal_conflict=goal_conflict(p),
            required_weekly_rate=rate,
            weekly_rate=rate,
            timeline_weeks=p.timeline_weeks,
            macros=macros,
            water_ml=round(p.weight_kg * WATER_ML_PER_KG),
            fiber_g=self.fiber_g(target),
            body_fat=body_fat,
            lean_mass_kg=round(p.weight_kg - fat_mass, 2),
            fat_mass_kg=round(fat_mass, 2),
            waist_hip_ratio=self.waist_hip_ratio(p),
            diet_readiness=self.diet_readiness(p.habits),
            sleep_hours=sleep_hours(p.wake_time, p.sleep_time),
            heart_rate=self.heart_rate_zones(p.age),
            metabolic_age=self.metabolic_age(bmr, p.age, p.sex),
            vo2max_estimate=self.vo2max(p.run_minutes, p.age, p.sex),
            recommended_intensity=self.recommended_intensity(p).value,
        )

    # --------------- BMR / BMI / TDEE ---------------------------------
    def bmr(self, p: Profile) -> float:
        base = 10 * p.weight_kg + 6.25 * p.height_cm - 5 * p.age
        return base + BMR_SEX_OFFSET[p.sex.formula_key]

    @staticmethod
    def bmi(weight_kg: float, height_cm: float) -> float:
        height_m = height_cm / 100
        return weight_kg / (height_m * height_m)

    @staticmethod
    def base_tdee(bmr: float, occupation: Occupation) -> float:
        return bmr * OCCUPATION_MULTIPLIERS[occupation.value]

    def session_burn(self, p: Profile) -> float:
        """kcal for one planned session: MET × kg × hours."""
        return self.met(p) * p.weight_kg * p.session_minutes / 60

    @staticmethod
    def met(p: Profile) -> float:
        row = MET_TABLE[p.intensity.value]
        primary = p.workout_types[0].strip().lower() if p.workout_types else DEFAULT_WORKOUT_TYPE
        return row.get(primary, row[DEFAULT_WORKOUT_TYPE])

    # --------------- Calories -----------------------------------------
    @staticmethod
    def target_calories(tdee: float, weekly_rate: float, direction: GoalDirection) -> float:
        delta = daily_energy_delta(weekly_rate)
        if direction is GoalDirection.lose:
            return tdee - delta
        if direction is GoalDirection.gain:
            return tdee + delta
        return tdee

    # --------------- Macros -------------------------------------------
    @staticmethod
    def protein_g(p: Profile, direction: GoalDirection) -> int:
        """Protein first: g/kg tier by goal direction, raised for older adults."""
        muscle = p.has_goal(Goal.gain_muscle)
        if direction is GoalDirection.lose:
            tier = "recomp" if muscle else "cutting"
        elif direction is GoalDirection.gain:
            tier = "bulking" if muscle or p.has_goal(Goal.improve_strength) else "weight_gain"
        else:
            tier = "maintenance"
        per_kg = PROTEIN_G_PER_KG[tier]

        if p.age >= 65:
            per_kg = max(per_kg, ELDERLY_PROTEIN_MIN_G_PER_KG)
        elif p.age >= 50:
            per_kg += OLDER_ADULT_PROTEIN_BONUS
        return round(p.weight_kg * per_kg)

    @staticmethod
    def carb_share(workouts_per_week: int, intensity: Intensity) -> float:
        if intensity is Intensity.advanced and workouts_per_week >= 4:
            return 0.50
        if workouts_per_week >= 3:
            return 0.45
        return 0.40

    def macros(self, kcal: float, protein_g: int, p: Profile) -> Macros:
        remaining = max(kcal - protein_g * KCAL_PER_G_PROTEIN, 0.0)
        share = self.carb_share(p.workouts_per_week, p.intensity)
        return Macros(
            protein_g=protein_g,
            carbs_g=round(remaining * share / KCAL_PER_G_CARB),
            fat_g=round(remaining * (1 - share) / KCAL_PER_G_FAT),
        )

    @staticmethod
    def fiber_g(kcal: float) -> int:
        return round(kcal / 1000 * FIBER_G_PER_1000_KCAL)

    # --------------- Body composition ---------------------------------
    def resolve_body_fat(self, p: Profile, bmi: float) -> BodyFatEstimate:
        """User value > confident external estimate > BMI formula > default."""
        if p.body_fat_pct is not None and p.body_fat_pct > 0:
            return BodyFatEstimate(p.body_fat_pct, BodyFatSource.user_input, Confidence.high, False)

        if (
            p.estimated_body_fat_pct is not None
            and p.estimate_confidence is not None
            and p.estimate_confidence > ESTIMATE_CONFIDENCE_THRESHOLD
        ):
            return BodyFatEstimate(
                p.estimated_body_fat_pct, BodyFatSource.external_estimate, Confidence.medium, True
            )

        estimate = self.body_fat_from_bmi(bmi, p.age, p.sex)
        if 3 <= estimate <= 50:
            return BodyFatEstimate(estimate, BodyFatSource.bmi_formula, Confidence.low, True)

        _LOG.debug("BMI body-fat estimate %.1f implausible, using default", estimate)
        return BodyFatEstimate(
            DEFAULT_BODY_FAT[p.sex.formula_key], BodyFatSource.default, Confidence.low, True
        )

    @staticmethod
    def body_fat_from_bmi(bmi: float, age: int, sex: Sex) -> float:
        """Deurenberg formula."""
        base = 1.2 * bmi + 0.23 * age
        male, female = base - 16.2, base - 5.4
        if sex is Sex.male:
            return round(male, 1)
        if sex is Sex.female:
            return round(female, 1)
        return round((male + female) / 2, 1)

    @staticmethod
    def waist_hip_ratio(p: Profile) -> float | None:
        if not (p.waist_cm and p.hip_cm):
            return None
        return round(p.waist_cm / p.hip_cm, 2)

    # --------------- Habits -------------------------------------------
    @staticmethod
    def diet_readiness(habits: DietHabits) -> int:
        """Signed habit sum renormalised from [-45, 155] onto 0–100."""
        raw = sum(w for name, w in READINESS_WEIGHTS.items() if getattr(habits, name))
        scaled = np.interp(raw, READINESS_RAW_RANGE, (0.0, 100.0))
        return int(np.clip(round(float(scaled)), 0, 100))

    # --------------- Fitness ------------------------------------------
    @staticmethod
    def heart_rate_zones(age: int) -> HeartRateZones:
        max_hr = 220 - age

        def zone(lo: float, hi: float) -> HeartRateZone:
            return HeartRateZone(round(max_hr * lo), round(max_hr * hi))

        return HeartRateZones(
            max_hr=max_hr,
            fat_burn=zone(0.60, 0.70),
            cardio=zone(0.70, 0.85),
            peak=zone(0.85, 0.95),
        )

    @staticmethod
    def metabolic_age(bmr: float, age: int, sex: Sex) -> int:
        key = sex.formula_key
        if key == "other":
            expected = (_expected_bmr("male", age) + _expected_bmr("female", age)) / 2
        else:
            expected = _expected_bmr(key, age)
        years = (expected - bmr) / _BMR_DECLINE_PER_YEAR[key]
        return int(min(max(round(age + years), 18), 85))

    @staticmethod
    def vo2max(run_minutes: int, age: int, sex: Sex) -> float:
        peak, decline = {"male": (50.0, 0.5), "female": (40.0, 0.4)}.get(
            sex.formula_key, (45.0, 0.45)
        )
        base = peak - max(age - 20, 0) * decline
        return round(min(max(base + run_minutes * 0.3, 20.0), 80.0), 1)

    @staticmethod
    def recommended_intensity(p: Profile) -> Intensity:
        """Experience first, then push-up / continuous-run tests for 1–3 years."""
        if p.experience_years >= 3:
            return Intensity.advanced
        if p.experience_years < 1:
            return Intensity.beginner

        young = p.age < 40
        key = p.sex.formula_key
        if key == "male":
            pushup_target = 25 if young else 20
        elif key == "female":
            pushup_target = 15 if young else 10
        else:
            pushup_target = 20 if young else 15

        strong = p.pushups >= pushup_target
        fit = p.run_minutes >= 15
        if strong and fit:
            return Intensity.advanced
        if strong or fit:
            return Intensity.intermediate
        return Intensity.beginner


def _expected_bmr(key: str, age: int) -> float:
    bands = _EXPECTED_BMR[key]
    expected = bands[0][1]          # under 18: youngest band
    for lower, value in bands:
        if age >= lower:
            expected = value
    return float(expected)


_CALC = MetricCalculator()


def compute(profile: Profile) -> CalculatedMetrics:
    return _CALC.compute(profile)
