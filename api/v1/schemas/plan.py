from __future__ import annotations
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict

from engine.models import BodyFatSource, Confidence, GoalDirection, Severity

from .profile import ProfileIn

_ATTRS = ConfigDict(from_attributes=True)


# ─── metrics ────────────────────────────────────────────────────────
class MacrosOut(BaseModel):
    protein_g: int
    carbs_g: int
    fat_g: int

    model_config = _ATTRS


class BodyFatOut(BaseModel):
    value: float
    source: BodyFatSource
    confidence: Confidence
    show_warning: bool

    model_config = _ATTRS


class HeartRateZoneOut(BaseModel):
    min_bpm: int
    max_bpm: int

    model_config = _ATTRS


class HeartRateZonesOut(BaseModel):
    max_hr: int
    fat_burn: HeartRateZoneOut
    cardio: HeartRateZoneOut
    peak: HeartRateZoneOut

    model_config = _ATTRS


class ConditionAdjustmentOut(BaseModel):
    category: str
    condition: str
    tdee_pct: float
    carb_reduction_pct: float

    model_config = _ATTRS


class DeficitCapOut(BaseModel):
    original_pct: float
    capped_pct: float
    reason: str
    uncapped_kcal: float

    model_config = _ATTRS


class RefeedOut(BaseModel):
    weekly_refeeds: bool
    diet_break_week: int | None

    model_config = _ATTRS


class MetricsOut(BaseModel):
    bmr: float
    bmi: float
    base_tdee: float
    session_burn: float
    exercise_burn: float
    tdee: float
    target_calories: float
    goal_direction: GoalDirection
    goal_conflict: bool
    required_weekly_rate: float
    weekly_rate: float
    timeline_weeks: int
    macros: MacrosOut
    water_ml: int
    fiber_g: int
    body_fat: BodyFatOut
    lean_mass_kg: float
    fat_mass_kg: float
    waist_hip_ratio: float | None
    diet_readiness: int
    sleep_hours: float
    heart_rate: HeartRateZonesOut
    metabolic_age: int
    vo2max_estimate: float
    recommended_intensity: str
    age_factor: float
    condition_adjustment: ConditionAdjustmentOut | None
    tdee_adjustment_pct: float
    carb_reduction_pct: float
    pregnancy_kcal: float
    deficit_cap: DeficitCapOut | None
    refeed: RefeedOut | None
    notes: List[str]

    model_config = _ATTRS


# ─── findings / alternatives ────────────────────────────────────────
class FindingOut(BaseModel):
    code: str
    severity: Severity
    message: str
    recommendations: List[str]
    remediation: Dict[str, float]

    model_config = _ATTRS


class ProfileDeltaOut(BaseModel):
    axis: str
    changes: Dict[str, Tuple[Any, Any]]

    model_config = _ATTRS


class AlternativeResultOut(BaseModel):
    may_proceed: bool
    advisory: List[FindingOut]

    model_config = _ATTRS


class AlternativeOut(BaseModel):
    strategy: str
    delta: ProfileDeltaOut
    profile: ProfileIn
    metrics: MetricsOut
    result: AlternativeResultOut
    verified: bool

    model_config = _ATTRS


class PlanOut(BaseModel):
    may_proceed: bool
    blocking: List[FindingOut]
    advisory: List[FindingOut]
    alternatives: List[AlternativeOut]
    metrics: MetricsOut

    model_config = _ATTRS


class FaultOut(BaseModel):
    field: str
    value: Any
    message: str

    model_config = _ATTRS
