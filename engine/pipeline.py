"""
engine/pipeline.py
────────────────────────────────────────────────────────────────────────
Profile → Calculator → Modifiers → Validation → (Alternatives)

Recursion through the Alternative Generator is bounded by an explicit
`depth` argument compared against `EnginePolicy.max_alternative_depth`.
"""

from __future__ import annotations

import logging

from engine.alternatives import generate_alternatives
from engine.domain import check_profile
from engine.errors import ProfileRejected
from engine.metrics_calc import compute
from engine.models.metrics import CalculatedMetrics
from engine.models.profile import Profile
from engine.models.result import InputRejection, ValidationResult
from engine.modifiers import adjust
from engine.policy import DEFAULT_POLICY, EnginePolicy
from engine.validation import validate

_LOG = logging.getLogger(__name__)


def calculate(profile: Profile, policy: EnginePolicy = DEFAULT_POLICY) -> CalculatedMetrics:
    """Calculator + Modifiers only (no validation, no domain check)."""
    return adjust(compute(profile), profile, policy)


def evaluate(
    profile: Profile,
    policy: EnginePolicy = DEFAULT_POLICY,
    *,
    depth: int = 0,
) -> ValidationResult | InputRejection:
    faults = check_profile(profile)
    if faults:
        return InputRejection(tuple(faults))

    metrics = calculate(profile, policy)
    result = validate(profile, metrics)

    if not result.may_proceed and depth < policy.max_alternative_depth:
        alternatives = generate_alternatives(profile, metrics, result, depth, policy)
        _LOG.debug("%d alternative(s) at depth %d", len(alternatives), depth)
        result = ValidationResult(
            metrics=result.metrics,
            blocking=result.blocking,
            advisory=result.advisory,
            alternatives=alternatives,
        )
    return result


def evaluate_or_raise(profile: Profile, policy: EnginePolicy = DEFAULT_POLICY) -> ValidationResult:
    outcome = evaluate(profile, policy)
    if isinstance(outcome, InputRejection):
        raise ProfileRejected(outcome)
    return outcome
