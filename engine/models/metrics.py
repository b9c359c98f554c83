"""Derived metrics: recomputed on every call, never mutated (only replaced)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GoalDirection(str, Enum):
    lose = "lose"
    gain = "gain"
    maintain = "maintain"


class BodyFatSource(str, Enum):
    user_input = "user_input"
    external_estimate = "external_estimate"
    bmi_formula = "bmi_formula"
    default = "default"


class Confidence(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


@dataclass(frozen=True)
class BodyFatEstimate:
    value: float
    source: BodyFatSource
    confidence: Confidence
    show_warning: bool

    @property
    def measured(self) -> bool:
        """True when the value came from a measurement rather than a formula."""
        return self.source in (BodyFatSource.user_input, BodyFatSource.external_estimate)


@dataclass(frozen=True)
class Macros:
    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class HeartRateZone:
    min_bpm: int
    max_bpm: int


@dataclass(frozen=True)
class HeartRateZones:
    max_hr: int
    fat_burn: HeartRateZone
    cardio: HeartRateZone
    peak: HeartRateZone


@dataclass(frozen=True)
class ConditionAdjustment:
    """The single dominant medical-condition variant chosen for a profile."""

    category: str          # thyroid | insulin_resistance | cardiovascular
    condition: str
    tdee_pct: float = 0.0
    carb_reduction_pct: float = 0.0


@dataclass(frozen=True)
class DeficitCap:
    original_pct: float
    capped_pct: float
    reason: str            # recommended | high_stress | medical_conditions
    uncapped_kcal: float


@dataclass(frozen=True)
class RefeedSchedule:
    weekly_refeeds: bool
    diet_break_week: int | None


@dataclass(frozen=True)
class CalculatedMetrics:
    # energy
    bmr: float
    bmi: float
    base_tdee: float               # BMR × occupation multiplier
    session_burn: float            # kcal per planned session
    exercise_burn: float           # daily average of weekly sessions
    tdee: float
    target_calories: float
    # goal
    goal_direction: GoalDirection
    goal_conflict: bool            # lose + gain requested: direction indeterminate
    required_weekly_rate: float    # kg/week asked for by weights + timeline
    weekly_rate: float             # kg/week after modifiers
    timeline_weeks: int            # after sleep penalty
    # nutrition
    macros: Macros
    water_ml: int
    fiber_g: int
    # body / fitness
    body_fat: BodyFatEstimate
    lean_mass_kg: float
    fat_mass_kg: float
    waist_hip_ratio: float | None
    diet_readiness: int
    sleep_hours: float
    heart_rate: HeartRateZones
    metabolic_age: int
    vo2max_estimate: float
    recommended_intensity: str
    # modifier outcome
    age_factor: float = 1.0
    condition_adjustment: ConditionAdjustment | None = None
    tdee_adjustment_pct: float = 0.0
    carb_reduction_pct: float = 0.0
    pregnancy_kcal: float = 0.0
    deficit_cap: DeficitCap | None = None
    refeed: RefeedSchedule | None = None
    notes: tuple[str, ...] = ()

    @property
    def daily_energy_delta(self) -> float:
        """Signed kcal/day relative to TDEE (negative = deficit)."""
        return self.target_calories - self.tdee
