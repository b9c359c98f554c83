"""
engine/alternatives.py
────────────────────────────────────────────────────────────────────────
Alternative Generator: for a plan blocked on rate/timeline grounds,
propose up to four single-axis changes that re-validate cleanly.

Each candidate profile is re-run through the whole pipeline one level
deeper (so it is never itself alternated); anything rejected or still
blocked is dropped.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Any, Callable

from engine.constants import (
    BALANCED_RATE_PCT,
    MAX_SESSIONS_PER_WEEK,
    SAFE_MAX_RATE_PCT,
)
from engine.metrics_calc import daily_energy_delta
from engine.models.metrics import CalculatedMetrics, GoalDirection
from engine.models.profile import Profile
from engine.models.result import AlternativePlan, InputRejection, ProfileDelta, ValidationResult
from engine.policy import DEFAULT_POLICY, EnginePolicy
from engine.validation import optimal_rate_pct, weeks_at_rate

_LOG = logging.getLogger(__name__)

# blocks a numeric change can fix; anything else needs a categorical change
FIXABLE_BLOCKS = frozenset({
    "BELOW_BMR",
    "BELOW_ABSOLUTE_MINIMUM",
    "EXTREMELY_UNREALISTIC",
    "SEVERE_SLEEP_DEPRIVATION",
    "INSUFFICIENT_EXERCISE",
})

INCREASE_EXERCISE_SHARE = 0.60
BALANCED_EXERCISE_SHARE = 0.40

Changes = dict[str, Any]


# ──────────────────────────────────────────────────────────────────────
#  Candidate builders: profile + metrics → changed fields (or None)
# ──────────────────────────────────────────────────────────────────────
def _extend_timeline(p: Profile, m: CalculatedMetrics) -> Changes | None:
    return {"timeline_weeks": weeks_at_rate(p, optimal_rate_pct(m))}


def _extra_sessions(p: Profile, m: CalculatedMetrics, rate_pct: float, share: float) -> int:
    weekly_kcal = daily_energy_delta(p.weight_kg * rate_pct) * 7
    return math.ceil(round(share * weekly_kcal / m.session_burn, 6))


def _increase_exercise(p: Profile, m: CalculatedMetrics) -> Changes | None:
    if m.session_burn <= 0:
        return None
    extra = _extra_sessions(p, m, SAFE_MAX_RATE_PCT, INCREASE_EXERCISE_SHARE)
    return {
        "workouts_per_week": min(p.workouts_per_week + extra, MAX_SESSIONS_PER_WEEK),
        "timeline_weeks": weeks_at_rate(p, SAFE_MAX_RATE_PCT),
    }


def _balanced(p: Profile, m: CalculatedMetrics) -> Changes | None:
    if m.session_burn <= 0:
        return None
    extra = max(_extra_sessions(p, m, BALANCED_RATE_PCT, BALANCED_EXERCISE_SHARE), 1)
    return {
        "workouts_per_week": min(p.workouts_per_week + extra, MAX_SESSIONS_PER_WEEK),
        "timeline_weeks": weeks_at_rate(p, BALANCED_RATE_PCT),
    }


def _adjust_target_weight(p: Profile, m: CalculatedMetrics) -> Changes | None:
    reachable = p.weight_kg * optimal_rate_pct(m) * p.timeline_weeks
    # round toward the current weight so the rate never exceeds optimal
    if m.goal_direction is GoalDirection.lose:
        target = math.ceil(round((p.weight_kg - reachable) * 10, 6)) / 10
    else:
        target = math.floor(round((p.weight_kg + reachable) * 10, 6)) / 10
    return {"target_weight_kg": target}


# (strategy, axis, builder) in presentation order
STRATEGIES: tuple[tuple[str, str, Callable[[Profile, CalculatedMetrics], Changes | None]], ...] = (
    ("extend_timeline", "timeline", _extend_timeline),
    ("increase_exercise", "exercise", _increase_exercise),
    ("balanced", "exercise", _balanced),
    ("adjust_target_weight", "target_weight", _adjust_target_weight),
)


def is_fixable(result: ValidationResult) -> bool:
    """True when every blocking cause is rate/timeline related."""
    return bool(result.blocking) and all(f.code in FIXABLE_BLOCKS for f in result.blocking)


def generate_alternatives(
    profile: Profile,
    metrics: CalculatedMetrics,
    result: ValidationResult,
    depth: int = 0,
    policy: EnginePolicy = DEFAULT_POLICY,
) -> tuple[AlternativePlan, ...]:
    if not is_fixable(result):
        return ()
    if metrics.goal_direction is GoalDirection.maintain:
        return ()

    from engine.pipeline import evaluate   # pipeline imports this module

    plans: list[AlternativePlan] = []
    seen: set[Profile] = set()
    for strategy, axis, build in STRATEGIES:
        changes = build(profile, metrics)
        if not changes:
            continue
        changes = {k: v for k, v in changes.items() if getattr(profile, k) != v}
        if not changes:
            continue

        candidate = replace(profile, **changes)
        if candidate in seen:
            continue
        seen.add(candidate)

        outcome = evaluate(candidate, policy, depth=depth + 1)
        if isinstance(outcome, InputRejection):
            _LOG.debug("alternative %s discarded: invalid %s", strategy, outcome.fields)
            continue
        if not outcome.may_proceed:
            _LOG.debug("alternative %s discarded: still blocked by %s", strategy,
                       [f.code for f in outcome.blocking])
            continue

        delta = ProfileDelta(axis, {k: (getattr(profile, k), v) for k, v in changes.items()})
        plans.append(AlternativePlan(strategy, delta, candidate, outcome.metrics, outcome))
    return tuple(plans)
