"""Onboarding profile handed to the engine by value."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Sex(str, Enum):
    male = "male"
    female = "female"
    other = "other"
    prefer_not_to_say = "prefer_not_to_say"

    @property
    def formula_key(self) -> str:
        """Key into the sex-specific tables ("other" covers both non-binary values)."""
        if self in (Sex.male, Sex.female):
            return self.value
        return "other"


class Occupation(str, Enum):
    desk_job = "desk_job"
    light_active = "light_active"
    moderate_active = "moderate_active"
    heavy_labor = "heavy_labor"
    very_active = "very_active"


class StressLevel(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"


class Intensity(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"

    @property
    def rank(self) -> int:
        return list(Intensity).index(self)


class Goal(str, Enum):
    lose_weight = "weight-loss"
    gain_muscle = "muscle-gain"
    gain_weight = "weight-gain"
    improve_strength = "strength"
    improve_endurance = "endurance"
    improve_flexibility = "flexibility"


class Location(str, Enum):
    home = "home"
    gym = "gym"
    both = "both"


class DietType(str, Enum):
    vegetarian = "vegetarian"
    vegan = "vegan"
    non_veg = "non-veg"
    pescatarian = "pescatarian"


@dataclass(frozen=True)
class DietHabits:
    drinks_enough_water: bool = False
    limits_sugary_drinks: bool = False
    eats_regular_meals: bool = False
    avoids_late_night_eating: bool = False
    controls_portion_sizes: bool = False
    reads_nutrition_labels: bool = False
    eats_processed_foods: bool = False
    eats_5_servings_fruits_veggies: bool = False
    limits_refined_sugar: bool = False
    includes_healthy_fats: bool = False
    drinks_alcohol: bool = False
    smokes_tobacco: bool = False
    drinks_coffee: bool = False
    takes_supplements: bool = False


@dataclass(frozen=True)
class MealSlots:
    breakfast: bool = True
    lunch: bool = True
    dinner: bool = True
    snacks: bool = False

    @property
    def any_enabled(self) -> bool:
        return self.breakfast or self.lunch or self.dinner or self.snacks


@dataclass(frozen=True)
class Profile:
    # demographics
    age: int
    sex: Sex
    occupation: Occupation
    # body
    height_cm: float
    weight_kg: float
    target_weight_kg: float
    timeline_weeks: int
    body_fat_pct: float | None = None
    estimated_body_fat_pct: float | None = None   # external (photo) estimate
    estimate_confidence: float | None = None      # 0–100
    waist_cm: float | None = None
    hip_cm: float | None = None
    chest_cm: float | None = None
    # lifestyle
    wake_time: str = "07:00"
    sleep_time: str = "23:00"
    stress_level: StressLevel = StressLevel.moderate
    habits: DietHabits = field(default_factory=DietHabits)
    # goals
    goals: tuple[Goal, ...] = ()
    # medical
    medical_conditions: tuple[str, ...] = ()
    medications: tuple[str, ...] = ()
    physical_limitations: tuple[str, ...] = ()
    pregnant: bool = False
    trimester: int | None = None
    lactating: bool = False
    # workout capability
    experience_years: int = 0
    workouts_per_week: int = 0
    session_minutes: int = 45
    intensity: Intensity = Intensity.beginner
    workout_types: tuple[str, ...] = ()
    pushups: int = 0
    run_minutes: int = 0
    location: Location = Location.gym
    equipment: tuple[str, ...] = ()
    # diet
    diet_type: DietType = DietType.non_veg
    allergies: tuple[str, ...] = ()
    meals: MealSlots = field(default_factory=MealSlots)

    # -------------------------------- convenience flags -------------
    def has_goal(self, goal: Goal) -> bool:
        return goal in self.goals

    @property
    def conditions(self) -> tuple[str, ...]:
        """Condition names normalised to the catalogue spelling."""
        names = (_normalise(c) for c in self.medical_conditions)
        return tuple(n for n in names if n and n != "none")

    @property
    def weekly_training_hours(self) -> float:
        return self.workouts_per_week * self.session_minutes / 60


def _normalise(name: str) -> str:
    return name.strip().lower().replace("_", "-").replace(" ", "-")
