from __future__ import annotations
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from engine.models import (
    DietHabits,
    DietType,
    Goal,
    Intensity,
    Location,
    MealSlots,
    Occupation,
    Profile,
    Sex,
    StressLevel,
)


class DietHabitsIn(BaseModel):
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

    model_config = ConfigDict(from_attributes=True)


class MealSlotsIn(BaseModel):
    breakfast: bool = True
    lunch: bool = True
    dinner: bool = True
    snacks: bool = False

    model_config = ConfigDict(from_attributes=True)


class ProfileIn(BaseModel):
    """
    Structural shape of an onboarding profile.

    Types and enums are enforced here (FastAPI answers 422 on mismatch);
    numeric ranges are left to the engine so the caller gets its fault list.
    """

    # demographics
    age: int
    sex: Sex
    occupation: Occupation = Field(..., description="the only activity tier")
    # body
    height_cm: float
    weight_kg: float
    target_weight_kg: float
    timeline_weeks: int
    body_fat_pct: float | None = None
    estimated_body_fat_pct: float | None = None
    estimate_confidence: float | None = None
    waist_cm: float | None = None
    hip_cm: float | None = None
    chest_cm: float | None = None
    # lifestyle
    wake_time: str = Field("07:00", examples=["06:30"])
    sleep_time: str = Field("23:00", examples=["22:30"])
    stress_level: StressLevel = StressLevel.moderate
    habits: DietHabitsIn = Field(default_factory=DietHabitsIn)
    # goals / medical
    goals: List[Goal] = []
    medical_conditions: List[str] = []
    medications: List[str] = []
    physical_limitations: List[str] = []
    pregnant: bool = False
    trimester: int | None = None
    lactating: bool = False
    # workout capability
    experience_years: int = 0
    workouts_per_week: int = 0
    session_minutes: int = 45
    intensity: Intensity = Intensity.beginner
    workout_types: List[str] = []
    pushups: int = 0
    run_minutes: int = 0
    location: Location = Location.gym
    equipment: List[str] = []
    # diet
    diet_type: DietType = DietType.non_veg
    allergies: List[str] = []
    meals: MealSlotsIn = Field(default_factory=MealSlotsIn)

    model_config = ConfigDict(from_attributes=True)

    def to_profile(self) -> Profile:
        data = self.model_dump(exclude={"habits", "meals"})
        for key, value in data.items():
            if isinstance(value, list):
                data[key] = tuple(value)
        return Profile(
            **data,
            habits=DietHabits(**self.habits.model_dump()),
            meals=MealSlots(**self.meals.model_dump()),
        )
