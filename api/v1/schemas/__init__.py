"""Re-export individual schema modules for easy imports."""

from .profile import DietHabitsIn, MealSlotsIn, ProfileIn
from .plan import AlternativeOut, FaultOut, FindingOut, MetricsOut, PlanOut

__all__ = [
    "DietHabitsIn",
    "MealSlotsIn",
    "ProfileIn",
    "AlternativeOut",
    "FaultOut",
    "FindingOut",
    "MetricsOut",
    "PlanOut",
]
