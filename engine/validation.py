"""
engine/validation.py
────────────────────────────────────────────────────────────────────────
Validation Engine: two ordered batteries of independent rules.

* Every rule in a battery runs; findings come back in declaration order
  (safety-critical first), never in input-field order.
* The advisory battery is skipped entirely once anything blocks.
* Rules judge the *adjusted* metrics; they never recompute energy.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple

from engine.constants import (
    ABSOLUTE_MIN_KCAL,
    DEFAULT_BODY_FAT,
    ESSENTIAL_BODY_FAT,
    EXTREME_RATE_PCT,
    HEALTHY_MIN_BMI,
    HIGH_IMPACT_LIMITATIONS,
    HIGH_RISK_CONDITIONS,
    HIGH_WEEKLY_TRAINING_HOURS,
    KCAL_PER_KG_TISSUE,
    LOW_READINESS_SCORE,
    LOW_SLEEP_HOURS,
    MAX_WEEKLY_TRAINING_HOURS,
    MAX_WEEKLY_TRAINING_HOURS_VERY_ACTIVE,
    MENOPAUSE_AGE_RANGE,
    METABOLISM_MEDICATIONS,
    MIN_SESSIONS_FOR_DEFICIT,
    OBESITY_CLASS_II_BMI,
    OPTIMAL_GAIN_RATE_PCT,
    OPTIMAL_RATE_PCT,
    OPTIMAL_SLEEP_HOURS,
    SAFE_MAX_RATE_PCT,
    SEVERE_SLEEP_HOURS,
    UNDERWEIGHT_BMI,
    VEGAN_PROTEIN_CEILING_G,
    VEGAN_PROTEIN_SOURCES,
)
from engine.metrics_calc import daily_energy_delta
from engine.models.metrics import CalculatedMetrics, GoalDirection
from engine.models.profile import (
    DietType,
    Goal,
    Intensity,
    Location,
    Occupation,
    Profile,
    Sex,
    StressLevel,
)
from engine.models.result import Finding, Severity, ValidationResult

_LOG = logging.getLogger(__name__)

_EPS = 1e-9


class Hit(NamedTuple):
    """What a rule reports when it fires; the Rule adds code + severity."""

    message: str
    recommendations: tuple[str, ...] = ()
    remediation: Mapping[str, float] = MappingProxyType({})


Check = Callable[[Profile, CalculatedMetrics], "Hit | None"]


@dataclass(frozen=True)
class Rule:
    code: str
    severity: Severity
    check: Check = field(repr=False)

    def evaluate(self, profile: Profile, metrics: CalculatedMetrics) -> Finding | None:
        hit = self.check(profile, metrics)
        if hit is None:
            return None
        return Finding(
            code=self.code,
            severity=self.severity,
            message=hit.message,
            recommendations=tuple(hit.recommendations),
            remediation=dict(hit.remediation),
        )


# ──────────────────────────────────────────────────────────────────────
#  Shared predicates / remediation maths
# ──────────────────────────────────────────────────────────────────────
def _changes_weight(m: CalculatedMetrics) -> bool:
    return m.goal_direction is not GoalDirection.maintain


def _losing(m: CalculatedMetrics) -> bool:
    return m.goal_direction is GoalDirection.lose


def _rate_pct(p: Profile, m: CalculatedMetrics) -> float:
    return m.required_weekly_rate / p.weight_kg


def is_aggressive(p: Profile, m: CalculatedMetrics) -> bool:
    """Requested rate above the optimal 0.75 % of body weight per week."""
    return _changes_weight(m) and _rate_pct(p, m) > OPTIMAL_RATE_PCT + _EPS


def optimal_rate_pct(m: CalculatedMetrics) -> float:
    """Safe weekly rate as a share of body weight (slower for gains)."""
    if m.goal_direction is GoalDirection.gain:
        return OPTIMAL_GAIN_RATE_PCT
    return OPTIMAL_RATE_PCT


def weight_diff(p: Profile) -> float:
    return abs(p.target_weight_kg - p.weight_kg)


def weeks_at_rate(p: Profile, rate_pct: float) -> int:
    """Weeks needed to cover the full weight change at `rate_pct` of body weight."""
    return math.ceil(round(weight_diff(p) / (p.weight_kg * rate_pct), 6))


def _weeks_to_respect_floor(p: Profile, m: CalculatedMetrics, floor_kcal: float) -> int | None:
    """Shortest timeline whose deficit keeps target calories ≥ floor (loss only)."""
    if not _losing(m):
        return None
    allowed = m.tdee - floor_kcal
    if allowed <= 0:
        return None
    return math.ceil(round(weight_diff(p) * KCAL_PER_KG_TISSUE / (7 * allowed), 6))


def _abs_min_kcal(p: Profile) -> float:
    return ABSOLUTE_MIN_KCAL[p.sex.formula_key]


def _normalised(values: tuple[str, ...]) -> set[str]:
    return {v.strip().lower().replace("_", "-").replace(" ", "-") for v in values}


# ──────────────────────────────────────────────────────────────────────
#  Blocking checks
# ──────────────────────────────────────────────────────────────────────
def _essential_body_fat(p: Profile, m: CalculatedMetrics) -> Hit | None:
    floor = ESSENTIAL_BODY_FAT[p.sex.formula_key]
    if not (_losing(m) and m.body_fat.measured and m.body_fat.value <= floor):
        return None
    return Hit(
        f"Body fat of {m.body_fat.value:g}% is at the essential-fat floor ({floor:g}%); "
        "further fat loss is unsafe.",
        ("Switch to a maintenance or muscle-gain goal",),
    )


def _target_bmi_underweight(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not _losing(m):
        return None
    height_m = p.height_cm / 100
    target_bmi = p.target_weight_kg / (height_m * height_m)
    if target_bmi >= UNDERWEIGHT_BMI:
        return None
    min_target = math.ceil(HEALTHY_MIN_BMI * height_m * height_m * 10) / 10
    return Hit(
        f"Target weight gives a BMI of {target_bmi:.1f}, below the underweight "
        f"threshold of {UNDERWEIGHT_BMI}.",
        (f"Choose a target of at least {min_target:g} kg",),
        {"min_target_weight_kg": min_target},
    )


def _floor_fix(
    p: Profile, m: CalculatedMetrics, floor_kcal: float
) -> tuple[tuple[str, ...], dict[str, float]]:
    """A longer timeline when one helps, otherwise the intake to reach."""
    weeks = _weeks_to_respect_floor(p, m, floor_kcal)
    if weeks:
        return (f"Extend the timeline to at least {weeks} weeks",), {"min_timeline_weeks": weeks}
    # no loss direction, or TDEE already at the floor: a longer timeline cannot help
    return (
        (
            f"Eat at least {floor_kcal:.0f} kcal/day",
            "Add daily activity to raise your energy needs",
        ),
        {"min_daily_kcal": round(floor_kcal)},
    )


def _below_bmr(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if m.target_calories >= m.bmr - _EPS:
        return None
    return Hit(
        f"Target of {m.target_calories:.0f} kcal is below your BMR of {m.bmr:.0f} kcal.",
        *_floor_fix(p, m, m.bmr),
    )


def _below_absolute_minimum(p: Profile, m: CalculatedMetrics) -> Hit | None:
    floor = _abs_min_kcal(p)
    if m.target_calories >= floor - _EPS:
        return None
    return Hit(
        f"Target of {m.target_calories:.0f} kcal is below the minimum safe intake "
        f"of {floor:.0f} kcal.",
        *_floor_fix(p, m, max(floor, m.bmr)),
    )


def _extremely_unrealistic(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not (_changes_weight(m) and _rate_pct(p, m) > EXTREME_RATE_PCT + _EPS):
        return None
    weeks = weeks_at_rate(p, optimal_rate_pct(m))
    return Hit(
        f"{m.required_weekly_rate:.2f} kg/week is {_rate_pct(p, m):.1%} of body weight, "
        f"above the {EXTREME_RATE_PCT:.1%} unsafe limit.",
        (f"A {weeks}-week timeline keeps the rate at {optimal_rate_pct(m):.2%} per week",),
        {"min_timeline_weeks": weeks},
    )


def _no_meals_enabled(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if p.meals.any_enabled:
        return None
    return Hit("No meal slots are enabled.", ("Enable at least one meal",))


def _severe_sleep_deprivation(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not (m.sleep_hours < SEVERE_SLEEP_HOURS and is_aggressive(p, m)):
        return None
    weeks = weeks_at_rate(p, optimal_rate_pct(m))
    return Hit(
        f"{m.sleep_hours:.1f} h of sleep cannot support an aggressive rate.",
        ("Sleep at least 7 hours", f"Or extend the timeline to {weeks} weeks"),
        {"min_timeline_weeks": weeks},
    )


def _excessive_training_volume(p: Profile, m: CalculatedMetrics) -> Hit | None:
    limit = (
        MAX_WEEKLY_TRAINING_HOURS_VERY_ACTIVE
        if p.occupation is Occupation.very_active
        else MAX_WEEKLY_TRAINING_HOURS
    )
    hours = p.weekly_training_hours
    if hours <= limit + _EPS:
        return None
    return Hit(
        f"{hours:.1f} h of training per week exceeds the safe ceiling of {limit:g} h.",
        ("Reduce session length or frequency",),
        {"max_weekly_training_hours": limit},
    )


def _unsafe_pregnancy(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not ((p.pregnant or p.lactating) and m.target_calories < m.tdee - _EPS):
        return None
    state = "pregnancy" if p.pregnant else "breastfeeding"
    return Hit(
        f"A calorie deficit is not safe during {state}.",
        ("Set the target weight equal to your current weight", "Consult your doctor"),
    )


def _conflicting_goals(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not m.goal_conflict:
        return None
    return Hit(
        "Weight-loss and weight-gain goals cannot be pursued together.",
        ("Keep one of the two goals",),
    )


def _insufficient_exercise(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not (
        _losing(m)
        and p.workouts_per_week < MIN_SESSIONS_FOR_DEFICIT
        and is_aggressive(p, m)
    ):
        return None
    uncapped = m.tdee - daily_energy_delta(m.required_weekly_rate)
    if uncapped >= m.bmr:
        return None
    return Hit(
        f"With {p.workouts_per_week} session(s) a week this rate needs "
        f"{uncapped:.0f} kcal/day, below BMR.",
        (f"Train at least {MIN_SESSIONS_FOR_DEFICIT} times a week", "Or extend the timeline"),
        {"min_workouts_per_week": MIN_SESSIONS_FOR_DEFICIT},
    )


# ──────────────────────────────────────────────────────────────────────
#  Advisory checks
# ──────────────────────────────────────────────────────────────────────
def _aggressive_timeline(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not is_aggressive(p, m):
        return None
    weeks = weeks_at_rate(p, optimal_rate_pct(m))
    above_safe = _rate_pct(p, m) > SAFE_MAX_RATE_PCT + _EPS
    return Hit(
        f"{_rate_pct(p, m):.2%} of body weight per week is "
        + ("above the 1% safe maximum." if above_safe else "faster than optimal."),
        (f"{weeks} weeks would keep the rate optimal",),
        {"recommended_timeline_weeks": weeks},
    )


def _deficit_limited(p: Profile, m: CalculatedMetrics) -> Hit | None:
    cap = m.deficit_cap
    if cap is None:
        return None
    remediation: dict[str, float] = {"weekly_rate_kg": round(m.weekly_rate, 2)}
    if m.weekly_rate > 0:
        remediation["timeline_weeks_at_capped_rate"] = math.ceil(
            round(weight_diff(p) / m.weekly_rate, 6)
        )
    return Hit(
        f"Deficit reduced from {cap.original_pct:.0%} to {cap.capped_pct:.0%} of TDEE "
        f"({cap.reason.replace('_', ' ')}); expect about {m.weekly_rate:.2f} kg/week.",
        remediation=remediation,
    )


def _obesity_adjusted_rates(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not (_losing(m) and m.bmi >= OBESITY_CLASS_II_BMI):
        return None
    return Hit(
        f"At a BMI of {m.bmi:.1f} faster initial loss is normal; rates are judged "
        "against body weight.",
        ("Recheck targets every 4 weeks",),
    )


def _insufficient_sleep(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if m.sleep_hours >= OPTIMAL_SLEEP_HOURS:
        return None
    return Hit(
        f"{m.sleep_hours:.1f} h of sleep slows progress; timeline revised to "
        f"{m.timeline_weeks} weeks.",
        ("Aim for 7–9 hours of sleep",),
        {"revised_timeline_weeks": m.timeline_weeks},
    )


def _medical_supervision(p: Profile, m: CalculatedMetrics) -> Hit | None:
    flagged = sorted(set(p.conditions) & HIGH_RISK_CONDITIONS)
    if not (flagged and is_aggressive(p, m)):
        return None
    return Hit(
        f"An aggressive rate with {', '.join(flagged)} needs medical supervision.",
        ("Discuss this plan with your doctor",),
    )


def _heart_disease_clearance(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if "heart-disease" not in p.conditions:
        return None
    return Hit(
        "Get cardiology clearance before starting exercise.",
        ("Keep intensity moderate until cleared",),
    )


def _medication_effects(p: Profile, m: CalculatedMetrics) -> Hit | None:
    taken = _normalised(p.medications)
    matched = sorted(med for med in METABOLISM_MEDICATIONS if any(med in t for t in taken))
    if not matched:
        return None
    return Hit(
        f"{', '.join(matched)} can affect metabolism or appetite.",
        ("Track progress closely and adjust with your doctor",),
    )


def _alcohol_impact(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not (p.habits.drinks_alcohol and is_aggressive(p, m)):
        return None
    return Hit("Alcohol adds calories and hurts recovery at this rate.", ("Limit alcohol",))


def _tobacco_impact(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not (p.habits.smokes_tobacco and is_aggressive(p, m)):
        return None
    return Hit("Tobacco reduces training capacity at this rate.", ("Consider a cessation plan",))


def _low_diet_readiness(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not (m.diet_readiness < LOW_READINESS_SCORE and is_aggressive(p, m)):
        return None
    return Hit(
        f"Diet readiness of {m.diet_readiness}/100 makes an aggressive rate hard to sustain.",
        ("Build habits first with a slower timeline",),
        {"recommended_timeline_weeks": weeks_at_rate(p, optimal_rate_pct(m))},
    )


def _elderly_user(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if p.age < 75:
        return None
    return Hit(
        "Prioritise protein, balance and strength work to preserve muscle.",
        ("Get medical clearance for new exercise",),
    )


def _teen_athlete(p: Profile, m: CalculatedMetrics) -> Hit | None:
    heavy = p.occupation is Occupation.very_active or (
        p.intensity is Intensity.advanced and p.workouts_per_week >= 5
    )
    if not (13 <= p.age <= 17 and _losing(m) and heavy):
        return None
    return Hit(
        "Adolescent athletes should not restrict calories while training hard.",
        ("Focus on performance and maintenance",),
    )


def _menopause_age(p: Profile, m: CalculatedMetrics) -> Hit | None:
    lo, hi = MENOPAUSE_AGE_RANGE
    if not (p.sex is Sex.female and lo <= p.age <= hi):
        return None
    return Hit(
        "Perimenopausal hormone changes can slow metabolism; TDEE already reflects this.",
        ("Include strength training",),
    )


def _limited_equipment(p: Profile, m: CalculatedMetrics) -> Hit | None:
    equipment = _normalised(p.equipment) - {"", "none"}
    if not (p.location is Location.home and not equipment and p.has_goal(Goal.gain_muscle)):
        return None
    return Hit(
        "Muscle gain is slower with bodyweight-only training at home.",
        ("Add resistance bands or dumbbells",),
    )


def _physical_limitation(p: Profile, m: CalculatedMetrics) -> Hit | None:
    limits = sorted(_normalised(p.physical_limitations) & set(HIGH_IMPACT_LIMITATIONS))
    high_impact = p.intensity is Intensity.advanced or "hiit" in _normalised(p.workout_types)
    if not (limits and high_impact):
        return None
    return Hit(
        f"High-impact training may aggravate {', '.join(limits)}.",
        ("Choose low-impact alternatives",),
    )


def _intensity_above_assessment(p: Profile, m: CalculatedMetrics) -> Hit | None:
    assessed = Intensity(m.recommended_intensity)
    if p.intensity.rank <= assessed.rank:
        return None
    return Hit(
        f"Chosen intensity ({p.intensity.value}) is above the assessed level "
        f"({assessed.value}).",
        (f"Start at {assessed.value} intensity",),
    )


def _concurrent_training(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not (p.has_goal(Goal.gain_muscle) and p.has_goal(Goal.improve_endurance)):
        return None
    return Hit(
        "Heavy endurance work can blunt muscle gain.",
        ("Separate strength and cardio sessions by at least 6 hours",),
    )


def _recomp_favourable(p: Profile, m: CalculatedMetrics) -> bool:
    return p.experience_years < 1 or m.body_fat.value >= DEFAULT_BODY_FAT[p.sex.formula_key]


def _body_recomp_possible(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not (_losing(m) and p.has_goal(Goal.gain_muscle) and _recomp_favourable(p, m)):
        return None
    return Hit("Losing fat while building muscle is realistic for you.", ("Keep protein high",))


def _body_recomp_slow(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not (_losing(m) and p.has_goal(Goal.gain_muscle) and not _recomp_favourable(p, m)):
        return None
    return Hit(
        "Trained, leaner people recompose slowly.",
        ("Consider separate cut and build phases",),
    )


def _excessive_gain_rate(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not (m.goal_direction is GoalDirection.gain and _rate_pct(p, m) > SAFE_MAX_RATE_PCT + _EPS):
        return None
    return Hit(
        "This gain rate exceeds natural muscle accretion; most of it will be fat.",
        ("Slow the gain rate",),
        {"recommended_timeline_weeks": weeks_at_rate(p, optimal_rate_pct(m))},
    )


def _no_exercise_planned(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if p.workouts_per_week > 0 and p.session_minutes > 0:
        return None
    return Hit("No exercise is planned.", ("Add at least 2 sessions a week",))


def _high_training_volume(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if not (
        p.weekly_training_hours > HIGH_WEEKLY_TRAINING_HOURS + _EPS
        and p.intensity is Intensity.advanced
    ):
        return None
    return Hit("High weekly volume at advanced intensity.", ("Schedule deload weeks",))


def _limited_vegan_protein(p: Profile, m: CalculatedMetrics) -> Hit | None:
    if p.diet_type is not DietType.vegan:
        return None
    blocked = sorted(_normalised(p.allergies) & set(VEGAN_PROTEIN_SOURCES))
    if not blocked and m.macros.protein_g <= VEGAN_PROTEIN_CEILING_G:
        return None
    return Hit(
        f"Reaching {m.macros.protein_g} g of protein on a vegan diet will be difficult"
        + (f" without {', '.join(blocked)}." if blocked else "."),
        ("Consider a plant protein supplement",),
    )


def _multiple_lifestyle_factors(p: Profile, m: CalculatedMetrics) -> Hit | None:
    factors = [
        name
        for name, present in (
            ("short sleep", m.sleep_hours < LOW_SLEEP_HOURS),
            ("tobacco", p.habits.smokes_tobacco),
            ("alcohol", p.habits.drinks_alcohol),
            ("high stress", p.stress_level is StressLevel.high),
            ("processed foods", p.habits.eats_processed_foods),
        )
        if present
    ]
    if len(factors) < 3:
        return None
    return Hit(
        f"Several lifestyle factors combine against progress: {', '.join(factors)}.",
        ("Tackle one factor at a time",),
    )


# ──────────────────────────────────────────────────────────────────────
#  Batteries (declaration order = output order)
# ──────────────────────────────────────────────────────────────────────
def _battery(severity: Severity, *rules: tuple[str, Check]) -> tuple[Rule, ...]:
    return tuple(Rule(code, severity, check) for code, check in rules)


BLOCKING_RULES: tuple[Rule, ...] = _battery(
    Severity.blocking,
    ("AT_ESSENTIAL_BODY_FAT", _essential_body_fat),
    ("TARGET_BMI_UNDERWEIGHT", _target_bmi_underweight),
    ("BELOW_BMR", _below_bmr),
    ("BELOW_ABSOLUTE_MINIMUM", _below_absolute_minimum),
    ("EXTREMELY_UNREALISTIC", _extremely_unrealistic),
    ("NO_MEALS_ENABLED", _no_meals_enabled),
    ("SEVERE_SLEEP_DEPRIVATION", _severe_sleep_deprivation),
    ("EXCESSIVE_TRAINING_VOLUME", _excessive_training_volume),
    ("UNSAFE_PREGNANCY_BREASTFEEDING", _unsafe_pregnancy),
    ("CONFLICTING_GOALS", _conflicting_goals),
    ("INSUFFICIENT_EXERCISE", _insufficient_exercise),
)

ADVISORY_RULES: tuple[Rule, ...] = _battery(
    Severity.advisory,
    ("AGGRESSIVE_TIMELINE", _aggressive_timeline),
    ("DEFICIT_LIMITED_FOR_SAFETY", _deficit_limited),
    ("OBESITY_ADJUSTED_RATES", _obesity_adjusted_rates),
    ("INSUFFICIENT_SLEEP", _insufficient_sleep),
    ("MEDICAL_SUPERVISION", _medical_supervision),
    ("HEART_DISEASE_CLEARANCE", _heart_disease_clearance),
    ("MEDICATION_EFFECTS", _medication_effects),
    ("ALCOHOL_IMPACT", _alcohol_impact),
    ("TOBACCO_IMPACT", _tobacco_impact),
    ("LOW_DIET_READINESS", _low_diet_readiness),
    ("ELDERLY_USER", _elderly_user),
    ("TEEN_ATHLETE_RESTRICTION", _teen_athlete),
    ("MENOPAUSE_AGE_RANGE", _menopause_age),
    ("LIMITED_EQUIPMENT_MUSCLE_GAIN", _limited_equipment),
    ("PHYSICAL_LIMITATION_INTENSITY", _physical_limitation),
    ("INTENSITY_ABOVE_ASSESSMENT", _intensity_above_assessment),
    ("CONCURRENT_TRAINING_INTERFERENCE", _concurrent_training),
    ("BODY_RECOMP_POSSIBLE", _body_recomp_possible),
    ("BODY_RECOMP_SLOW", _body_recomp_slow),
    ("EXCESSIVE_GAIN_RATE", _excessive_gain_rate),
    ("NO_EXERCISE_PLANNED", _no_exercise_planned),
    ("HIGH_TRAINING_VOLUME", _high_training_volume),
    ("LIMITED_VEGAN_PROTEIN", _limited_vegan_protein),
    ("MULTIPLE_LIFESTYLE_FACTORS", _multiple_lifestyle_factors),
)


def run_battery(
    rules: tuple[Rule, ...], profile: Profile, metrics: CalculatedMetrics
) -> tuple[Finding, ...]:
    findings = (rule.evaluate(profile, metrics) for rule in rules)
    return tuple(f for f in findings if f is not None)


def validate(profile: Profile, metrics: CalculatedMetrics) -> ValidationResult:
    blocking = run_battery(BLOCKING_RULES, profile, metrics)
    if blocking:
        _LOG.debug("blocked by %s", [f.code for f in blocking])
        return ValidationResult(metrics=metrics, blocking=blocking)
    advisory = run_battery(ADVISORY_RULES, profile, metrics)
    return ValidationResult(metrics=metrics, advisory=advisory)
