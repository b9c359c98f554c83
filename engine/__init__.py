"""Plan feasibility engine: pure metric calculation, modifiers, validation, alternatives."""

from .errors import ProfileRejected
from .pipeline import calculate, evaluate, evaluate_or_raise
from .policy import DEFAULT_POLICY, EnginePolicy

__all__ = [
    "DEFAULT_POLICY",
    "EnginePolicy",
    "ProfileRejected",
    "calculate",
    "evaluate",
    "evaluate_or_raise",
]
