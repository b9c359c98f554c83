"""
engine/modifiers.py
────────────────────────────────────────────────────────────────────────
Modifier Pipeline: CalculatedMetrics → CalculatedMetrics'

Order of application
  1. age-band metabolic decline (+ perimenopausal factor)
  2. ONE medical-condition variant, chosen by policy priority and capped;
     the adjusted TDEE never drops below BMR
  3. pregnancy / lactation kcal addition
  4. target calories re-derived, deficit cap for loss (never below BMR)
  5. macros + fiber from the final target, variant carb reduction
  6. sleep-debt penalty on the reported timeline only
  7. refeed / diet-break schedule for long cuts
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

import numpy as np

from engine.constants import (
    AGE_BAND_EDGES,
    AGE_BAND_FACTORS,
    CONDITION_CATALOG,
    DEFICIT_CAP_CONSERVATIVE,
    DEFICIT_CAP_RECOMMENDED,
    KCAL_PER_G_CARB,
    KCAL_PER_G_FAT,
    KCAL_PER_KG_TISSUE,
    LACTATION_KCAL,
    MAX_CARB_REDUCTION,
    MAX_TDEE_ADJUSTMENT,
    MENOPAUSE_AGE_RANGE,
    MENOPAUSE_FACTOR,
    OPTIMAL_SLEEP_HOURS,
    PREGNANCY_TRIMESTER_KCAL,
    SLEEP_PENALTY_PER_HOUR,
)
from engine.metrics_calc import MetricCalculator
from engine.models.metrics import (
    CalculatedMetrics,
    ConditionAdjustment,
    DeficitCap,
    GoalDirection,
    Macros,
    RefeedSchedule,
)
from engine.models.profile import Profile, Sex, StressLevel
from engine.policy import DEFAULT_POLICY, EnginePolicy

_LOG = logging.getLogger(__name__)

_CALC = MetricCalculator()


# ──────────────────────────────────────────────────────────────────────
#  Individual modifiers
# ──────────────────────────────────────────────────────────────────────
def age_factor(profile: Profile) -> float:
    band = int(np.digitize(profile.age, AGE_BAND_EDGES))
    factor = AGE_BAND_FACTORS[band]
    lo, hi = MENOPAUSE_AGE_RANGE
    if profile.sex is Sex.female and lo <= profile.age <= hi:
        factor *= MENOPAUSE_FACTOR
    return factor


def select_condition(
    conditions: tuple[str, ...], policy: EnginePolicy = DEFAULT_POLICY
) -> ConditionAdjustment | None:
    """
    Reduce any number of conditions to the single dominant variant.

    Ranking: policy category order, then the larger effect, then name (so the
    choice is independent of input order). The winner's numbers are capped.
    """
    candidates = []
    for name in conditions:
        entry = CONDITION_CATALOG.get(name)
        if entry is None:
            continue
        category, tdee_pct, carb_pct = entry
        candidates.append(ConditionAdjustment(category, name, tdee_pct, carb_pct))
    if not candidates:
        return None

    best = min(
        candidates,
        key=lambda c: (
            policy.rank(c.category),
            -max(abs(c.tdee_pct), c.carb_reduction_pct),
            c.condition,
        ),
    )
    if len(candidates) > 1:
        _LOG.debug(
            "condition variant %s selected over %s",
            best.condition,
            [c.condition for c in candidates if c is not best],
        )
    return replace(
        best,
        tdee_pct=float(np.clip(best.tdee_pct, -MAX_TDEE_ADJUSTMENT, MAX_TDEE_ADJUSTMENT)),
        carb_reduction_pct=min(best.carb_reduction_pct, MAX_CARB_REDUCTION),
    )


def pregnancy_kcal(profile: Profile) -> float:
    if profile.lactating:
        return LACTATION_KCAL
    if profile.pregnant:
        return PREGNANCY_TRIMESTER_KCAL.get(profile.trimester, 0.0)
    return 0.0


def deficit_cap_for(profile: Profile) -> tuple[float, str]:
    if profile.stress_level is StressLevel.high:
        return DEFICIT_CAP_CONSERVATIVE, "high_stress"
    if profile.conditions:
        return DEFICIT_CAP_CONSERVATIVE, "medical_conditions"
    return DEFICIT_CAP_RECOMMENDED, "recommended"


def sleep_adjusted_timeline(timeline_weeks: int, sleep_hours: float) -> int:
    """+20 % timeline per hour of sleep below 7 h, rounded up."""
    if sleep_hours >= OPTIMAL_SLEEP_HOURS:
        return timeline_weeks
    penalty = 1 + SLEEP_PENALTY_PER_HOUR * (OPTIMAL_SLEEP_HOURS - sleep_hours)
    return math.ceil(round(timeline_weeks * penalty, 6))


def refeed_schedule(direction: GoalDirection, timeline_weeks: int, deficit_pct: float) -> RefeedSchedule | None:
    if direction is not GoalDirection.lose:
        return None
    weekly = timeline_weeks >= 12 and deficit_pct >= DEFICIT_CAP_RECOMMENDED - 1e-9
    diet_break = timeline_weeks // 2 if timeline_weeks >= 16 else None
    if not weekly and diet_break is None:
        return None
    return RefeedSchedule(weekly_refeeds=weekly, diet_break_week=diet_break)


def reduce_carbs(macros: Macros, reduction_pct: float) -> Macros:
    """Remove a share of carbohydrate and move its energy to fat."""
    if reduction_pct <= 0:
        return macros
    removed = round(macros.carbs_g * reduction_pct)
    return Macros(
        protein_g=macros.protein_g,
        carbs_g=macros.carbs_g - removed,
        fat_g=macros.fat_g + round(removed * KCAL_PER_G_CARB / KCAL_PER_G_FAT),
    )


# ──────────────────────────────────────────────────────────────────────
#  Pipeline
# ──────────────────────────────────────────────────────────────────────
def adjust(
    metrics: CalculatedMetrics,
    profile: Profile,
    policy: EnginePolicy = DEFAULT_POLICY,
) -> CalculatedMetrics:
    notes: list[str] = []

    factor = age_factor(profile)
    if factor < 1:
        notes.append(f"TDEE reduced {round((1 - factor) * 100)}% for age-related metabolic decline")

    variant = select_condition(profile.conditions, policy)
    tdee_pct = variant.tdee_pct if variant else 0.0
    carb_pct = variant.carb_reduction_pct if variant else 0.0
    if variant and tdee_pct:
        notes.append(f"TDEE adjusted {tdee_pct:+.0%} for {variant.condition}")
    if variant and carb_pct:
        notes.append(f"Carbohydrates reduced {carb_pct:.0%} for {variant.condition}")
    if variant and not (tdee_pct or carb_pct):
        notes.append(f"{variant.condition}: follow medical guidance on intensity and sodium")

    extra_kcal = pregnancy_kcal(profile)
    if extra_kcal:
        notes.append(f"+{extra_kcal:.0f} kcal for pregnancy / lactation")

    tdee = metrics.tdee * factor * (1 + tdee_pct)
    if tdee < metrics.bmr:
        _LOG.debug("adjusted TDEE %.0f raised to BMR %.0f", tdee, metrics.bmr)
        notes.append("TDEE raised to BMR (age and condition adjustments undershot resting needs)")
        tdee = metrics.bmr
    tdee += extra_kcal

    direction = metrics.goal_direction
    weekly_rate = metrics.required_weekly_rate
    target = _CALC.target_calories(tdee, weekly_rate, direction)

    cap = None
    requested_pct = 0.0
    if direction is GoalDirection.lose and tdee > 0:
        requested_pct = (tdee - target) / tdee
        cap_pct, reason = deficit_cap_for(profile)
        if requested_pct > cap_pct:
            capped = min(max(tdee * (1 - cap_pct), metrics.bmr), tdee)
            cap = DeficitCap(
                original_pct=requested_pct,
                capped_pct=(tdee - capped) / tdee,
                reason=reason,
                uncapped_kcal=target,
            )
            _LOG.debug(
                "deficit capped (%s): %.0f → %.0f kcal", reason, target, capped
            )
            target = capped
            weekly_rate = (tdee - target) * 7 / KCAL_PER_KG_TISSUE
            notes.append(
                f"Deficit limited to {cap.capped_pct:.0%} of TDEE ({reason.replace('_', ' ')})"
            )

    macros = _CALC.macros(target, _CALC.protein_g(profile, direction), profile)
    macros = reduce_carbs(macros, carb_pct)

    timeline = sleep_adjusted_timeline(metrics.timeline_weeks, metrics.sleep_hours)
    if timeline != metrics.timeline_weeks:
        notes.append(
            f"Timeline extended to {timeline} weeks for {metrics.sleep_hours:.1f} h sleep"
        )

    return replace(
        metrics,
        tdee=tdee,
        target_calories=target,
        weekly_rate=weekly_rate,
        timeline_weeks=timeline,
        macros=macros,
        fiber_g=_CALC.fiber_g(target),
        age_factor=factor,
        condition_adjustment=variant,
        tdee_adjustment_pct=tdee_pct,
        carb_reduction_pct=carb_pct,
        pregnancy_kcal=extra_kcal,
        deficit_cap=cap,
        refeed=refeed_schedule(direction, timeline, requested_pct),
        notes=tuple(notes),
    )
