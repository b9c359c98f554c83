"""Re-export the engine's value types for easy imports."""

from .metrics import (
    BodyFatEstimate,
    BodyFatSource,
    CalculatedMetrics,
    ConditionAdjustment,
    Confidence,
    DeficitCap,
    GoalDirection,
    HeartRateZone,
    HeartRateZones,
    Macros,
    RefeedSchedule,
)
from .profile import (
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
from .result import (
    AlternativePlan,
    FieldFault,
    Finding,
    InputRejection,
    ProfileDelta,
    Severity,
    ValidationResult,
)

__all__ = [
    "AlternativePlan",
    "BodyFatEstimate",
    "BodyFatSource",
    "CalculatedMetrics",
    "ConditionAdjustment",
    "Confidence",
    "DeficitCap",
    "DietHabits",
    "DietType",
    "FieldFault",
    "Finding",
    "Goal",
    "GoalDirection",
    "HeartRateZone",
    "HeartRateZones",
    "InputRejection",
    "Intensity",
    "Location",
    "Macros",
    "MealSlots",
    "Occupation",
    "Profile",
    "ProfileDelta",
    "RefeedSchedule",
    "Severity",
    "Sex",
    "StressLevel",
    "ValidationResult",
]
