# tests/test_pipeline.py
from __future__ import annotations

import itertools

import pytest

from engine import ProfileRejected, calculate, evaluate, evaluate_or_raise
from engine.constants import ABSOLUTE_MIN_KCAL
from engine.domain import check_profile, parse_clock
from engine.models import (
    Goal,
    InputRejection,
    Occupation,
    Sex,
    StressLevel,
    ValidationResult,
)
from tests.profiles import EXTREME_LOSS, SAFE_LOSS, make_profile


# ── Scenarios ────────────────────────────────────────────────────────
def test_scenario_safe_loss():
    res = evaluate(SAFE_LOSS)
    assert isinstance(res, ValidationResult)
    assert res.may_proceed
    assert res.blocking == ()
    m = res.metrics
    assert m.required_weekly_rate == pytest.approx(0.5)
    # the 20 % deficit cap resolves a slower rate than the one requested
    assert m.deficit_cap is not None
    assert m.deficit_cap.reason == "recommended"
    assert m.weekly_rate == pytest.approx((m.tdee - m.target_calories) * 7 / 7700)
    assert m.weekly_rate < m.required_weekly_rate


def test_scenario_elderly_hypothyroid_maintenance():
    res = evaluate(
        make_profile(
            age=65,
            target_weight_kg=80,
            goals=(),
            medical_conditions=("hypothyroid",),
            workouts_per_week=0,
            workout_types=(),
        )
    )
    assert res.may_proceed
    assert "BELOW_BMR" not in res.codes


def test_scenario_extreme_timeline_block():
    res = evaluate(EXTREME_LOSS)
    assert not res.may_proceed
    assert "EXTREMELY_UNREALISTIC" in res.codes
    extend = [a for a in res.alternatives if a.strategy == "extend_timeline"]
    assert extend and extend[0].profile.timeline_weeks >= 26


def test_scenario_pregnancy_block():
    res = evaluate(make_profile(sex=Sex.female, age=29, pregnant=True, trimester=3))
    assert not res.may_proceed
    assert "UNSAFE_PREGNANCY_BREASTFEEDING" in res.codes
    assert res.alternatives == ()


def test_scenario_conflicting_goals():
    res = evaluate(make_profile(goals=(Goal.lose_weight, Goal.gain_weight)))
    assert not res.may_proceed
    assert "CONFLICTING_GOALS" in res.codes


# ── Properties ──────────────────────────────────────────────────────
def test_determinism():
    for profile in (SAFE_LOSS, EXTREME_LOSS):
        assert calculate(profile) == calculate(profile)
        assert evaluate(profile) == evaluate(profile)


GRID = [
    make_profile(
        sex=sex,
        age=age,
        occupation=occ,
        weight_kg=weight,
        target_weight_kg=weight + delta,
        timeline_weeks=weeks,
        workouts_per_week=sessions,
        stress_level=stress,
    )
    for sex, age, occ, weight, delta, weeks, sessions, stress in itertools.product(
        (Sex.male, Sex.female, Sex.other),
        (18, 45, 70),
        (Occupation.desk_job, Occupation.very_active),
        (50, 95),
        (-15, -4, 0, 6),
        (6, 24),
        (0, 4),
        (StressLevel.low, StressLevel.high),
    )
]


def test_safety_floor_whenever_plan_may_proceed():
    for profile in GRID:
        res = evaluate(profile)
        if isinstance(res, InputRejection) or not res.may_proceed:
            continue
        floor = max(res.metrics.bmr, ABSOLUTE_MIN_KCAL[profile.sex.formula_key])
        assert res.metrics.target_calories >= floor - 1e-6, profile


def test_alternative_soundness_over_grid():
    for profile in GRID:
        res = evaluate(profile)
        if isinstance(res, InputRejection):
            continue
        for alt in res.alternatives:
            assert evaluate(alt.profile).may_proceed, (profile, alt.strategy)


def test_monotonic_required_rate():
    rates = [calculate(make_profile(timeline_weeks=w)).required_weekly_rate for w in (4, 8, 12, 20, 52, 104)]
    assert rates == sorted(rates, reverse=True)


def test_no_modifier_stacking():
    conditions = ("hypothyroidism", "hyperthyroid", "pcos", "diabetes-type1", "hypertension")
    for n in range(2, len(conditions) + 1):
        for combo in itertools.combinations(conditions, n):
            m = calculate(make_profile(medical_conditions=combo))
            assert abs(m.tdee_adjustment_pct) <= 0.15
            assert m.carb_reduction_pct <= 0.30


# ── Input faults ────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "changes, field",
    [
        (dict(weight_kg=-5), "weight_kg"),
        (dict(timeline_weeks=0), "timeline_weeks"),
        (dict(age=8), "age"),
        (dict(height_cm=float("nan")), "height_cm"),
        (dict(body_fat_pct=80), "body_fat_pct"),
        (dict(wake_time="25:00"), "wake_time"),
        (dict(sex=Sex.female, pregnant=True, lactating=True), "lactating"),
    ],
)
def test_out_of_domain_fields_are_rejected(changes, field):
    res = evaluate(make_profile(**changes))
    assert isinstance(res, InputRejection)
    assert field in res.fields


def test_rejection_is_not_a_finding():
    res = evaluate(make_profile(weight_kg=-5, goals=(Goal.lose_weight, Goal.gain_weight)))
    assert isinstance(res, InputRejection)
    assert not hasattr(res, "blocking")


def test_evaluate_or_raise():
    assert evaluate_or_raise(SAFE_LOSS).may_proceed
    with pytest.raises(ProfileRejected) as exc:
        evaluate_or_raise(make_profile(weight_kg=0))
    assert exc.value.rejection.fields == ("weight_kg",)


def test_check_profile_accepts_valid_profile():
    assert check_profile(SAFE_LOSS) == []


def test_parse_clock():
    assert parse_clock("07:30") == 450
    with pytest.raises(ValueError):
        parse_clock("0730")
