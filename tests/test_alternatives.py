# tests/test_alternatives.py
from __future__ import annotations

from engine import EnginePolicy, calculate, evaluate
from engine.alternatives import STRATEGIES, generate_alternatives, is_fixable
from engine.models import Goal, InputRejection, MealSlots, Sex
from engine.validation import validate
from tests.profiles import EXTREME_LOSS, MAINTAIN, SAFE_LOSS, make_profile

RESULT = evaluate(EXTREME_LOSS)
ALTS = {alt.strategy: alt for alt in RESULT.alternatives}


def test_extreme_loss_gets_alternatives():
    assert not RESULT.may_proceed
    assert 1 <= len(RESULT.alternatives) <= len(STRATEGIES)


def test_extend_timeline_holds_optimal_rate():
    alt = ALTS["extend_timeline"]
    assert alt.profile.timeline_weeks >= 26
    assert alt.profile.timeline_weeks == 34
    assert alt.delta.axis == "timeline"
    assert alt.delta.changes == {"timeline_weeks": (8, 34)}


def test_exercise_candidates_cap_sessions():
    for name in ("increase_exercise", "balanced"):
        alt = ALTS[name]
        assert alt.delta.axis == "exercise"
        assert SAFE_LOSS.workouts_per_week < alt.profile.workouts_per_week <= 7


def test_adjust_target_keeps_timeline():
    alt = ALTS["adjust_target_weight"]
    assert alt.profile.timeline_weeks == EXTREME_LOSS.timeline_weeks
    assert alt.profile.target_weight_kg == 75.2       # 80 − 80 × 0.75 % × 8
    assert set(alt.delta.changes) == {"target_weight_kg"}


def test_every_alternative_revalidates_cleanly():
    for alt in RESULT.alternatives:
        assert alt.verified
        assert alt.result.may_proceed
        again = validate(alt.profile, calculate(alt.profile))
        assert again.may_proceed
        assert evaluate(alt.profile).may_proceed


def test_alternatives_are_never_alternated():
    for alt in RESULT.alternatives:
        assert alt.result.alternatives == ()


def test_alternatives_are_distinct():
    profiles = [alt.profile for alt in RESULT.alternatives]
    assert len(profiles) == len(set(profiles))


def test_depth_zero_policy_disables_generation():
    res = evaluate(EXTREME_LOSS, EnginePolicy(max_alternative_depth=0))
    assert not res.may_proceed
    assert res.alternatives == ()


def test_categorical_blocks_get_no_alternatives():
    pregnant = evaluate(make_profile(sex=Sex.female, pregnant=True, trimester=2))
    assert not pregnant.may_proceed
    assert pregnant.alternatives == ()

    conflict = evaluate(make_profile(EXTREME_LOSS, goals=(Goal.lose_weight, Goal.gain_weight)))
    assert "EXTREMELY_UNREALISTIC" in conflict.codes
    assert conflict.alternatives == ()

    no_meals = evaluate(make_profile(EXTREME_LOSS, meals=MealSlots(False, False, False, False)))
    assert no_meals.alternatives == ()


def test_is_fixable():
    assert is_fixable(RESULT)
    assert not is_fixable(evaluate(SAFE_LOSS))


def test_maintenance_never_alternated():
    metrics = calculate(MAINTAIN)
    res = validate(MAINTAIN, metrics)
    assert generate_alternatives(MAINTAIN, metrics, res) == ()


def test_out_of_domain_candidates_are_dropped():
    # 40 → 72 kg: gaining at 0.5 %/week would need 160 weeks (> 104)
    huge = make_profile(weight_kg=40, target_weight_kg=72, height_cm=150, goals=())
    res = evaluate(huge)
    assert not isinstance(res, InputRejection)
    assert "EXTREMELY_UNREALISTIC" in res.codes
    strategies = {alt.strategy for alt in res.alternatives}
    assert "extend_timeline" not in strategies
    assert "adjust_target_weight" in strategies


def test_gain_alternatives_use_slower_gain_rate():
    fast_gain = make_profile(weight_kg=60, target_weight_kg=72, timeline_weeks=8, goals=())
    res = evaluate(fast_gain)
    assert "EXTREMELY_UNREALISTIC" in res.codes
    alts = {alt.strategy: alt for alt in res.alternatives}
    assert alts["extend_timeline"].profile.timeline_weeks == 40      # 12 / (60 × 0.5 %)
    assert alts["adjust_target_weight"].profile.target_weight_kg == 62.4   # 60 + 60 × 0.5 % × 8
    finding = next(f for f in res.blocking if f.code == "EXTREMELY_UNREALISTIC")
    assert finding.remediation["min_timeline_weeks"] == 40
