# tests/test_metrics_calc.py
from __future__ import annotations

import math

from engine.metrics_calc import MetricCalculator, compute, goal_direction, sleep_hours
from engine.models import (
    BodyFatSource,
    Confidence,
    DietHabits,
    Goal,
    GoalDirection,
    Intensity,
    Occupation,
    Sex,
)
from tests.profiles import MAINTAIN, SAFE_LOSS, make_profile

calc = MetricCalculator()
M = compute(SAFE_LOSS)


# ── BMR / BMI / TDEE ─────────────────────────────────────────────────
def test_bmr_mifflin_male():
    expected = 10 * 80 + 6.25 * 178 - 5 * 30 + 5   # 1767.5
    assert math.isclose(M.bmr, expected, rel_tol=1e-9)


def test_bmr_other_sex_is_mean_of_binary_formulas():
    male = calc.bmr(SAFE_LOSS)
    female = calc.bmr(make_profile(sex=Sex.female))
    for sex in (Sex.other, Sex.prefer_not_to_say):
        assert math.isclose(calc.bmr(make_profile(sex=sex)), (male + female) / 2)


def test_bmi():
    assert math.isclose(M.bmi, 80 / 1.78**2, rel_tol=1e-9)


def test_base_tdee_uses_occupation_only():
    assert math.isclose(M.base_tdee, M.bmr * 1.25, rel_tol=1e-9)
    heavy = compute(make_profile(occupation=Occupation.heavy_labor))
    assert math.isclose(heavy.base_tdee, heavy.bmr * 1.60, rel_tol=1e-9)


def test_exercise_burn_is_weekly_met_average():
    session = 5.0 * 80 * 45 / 60                    # intermediate strength
    assert math.isclose(M.session_burn, session)
    assert math.isclose(M.exercise_burn, session * 3 / 7)
    assert math.isclose(M.tdee, M.base_tdee + M.exercise_burn)


def test_unknown_workout_type_falls_back_to_mixed():
    odd = compute(make_profile(workout_types=("underwater-basket-weaving",)))
    mixed = compute(make_profile(workout_types=("mixed",)))
    assert math.isclose(odd.session_burn, mixed.session_burn)
    assert math.isclose(compute(make_profile(workout_types=())).session_burn, mixed.session_burn)


# ── Goal / targets ──────────────────────────────────────────────────
def test_target_calories_from_rate():
    assert math.isclose(M.required_weekly_rate, 0.5)
    assert math.isclose(M.target_calories, M.tdee - 0.5 * 7700 / 7)


def test_goal_direction():
    assert goal_direction(SAFE_LOSS) is GoalDirection.lose
    assert goal_direction(MAINTAIN) is GoalDirection.maintain
    assert goal_direction(make_profile(target_weight_kg=85)) is GoalDirection.gain
    assert compute(MAINTAIN).target_calories == compute(MAINTAIN).tdee


def test_goal_conflict_flag():
    both = make_profile(goals=(Goal.lose_weight, Goal.gain_weight))
    assert compute(both).goal_conflict
    assert not M.goal_conflict


def test_required_rate_never_increases_with_timeline():
    rates = [compute(make_profile(timeline_weeks=w)).required_weekly_rate for w in range(4, 105)]
    assert all(a >= b for a, b in zip(rates, rates[1:]))


# ── Body fat resolution ─────────────────────────────────────────────
def test_body_fat_user_value_wins():
    bf = compute(make_profile(body_fat_pct=18, estimated_body_fat_pct=25, estimate_confidence=95)).body_fat
    assert bf.source is BodyFatSource.user_input
    assert bf.confidence is Confidence.high
    assert not bf.show_warning


def test_body_fat_external_estimate_needs_confidence():
    confident = compute(make_profile(estimated_body_fat_pct=25, estimate_confidence=80)).body_fat
    assert confident.source is BodyFatSource.external_estimate
    assert confident.value == 25

    unsure = compute(make_profile(estimated_body_fat_pct=25, estimate_confidence=60)).body_fat
    assert unsure.source is BodyFatSource.bmi_formula


def test_body_fat_deurenberg_formula():
    expected = 1.2 * (80 / 1.78**2) + 0.23 * 30 - 16.2   # ≈ 21.0
    assert M.body_fat.source is BodyFatSource.bmi_formula
    assert math.isclose(M.body_fat.value, expected, abs_tol=0.05)
    assert math.isclose(M.lean_mass_kg + M.fat_mass_kg, 80, abs_tol=0.02)


# ── Readiness / macros / hydration ──────────────────────────────────
def test_diet_readiness_bounds():
    good = DietHabits(
        drinks_enough_water=True,
        limits_sugary_drinks=True,
        eats_regular_meals=True,
        avoids_late_night_eating=True,
        controls_portion_sizes=True,
        reads_nutrition_labels=True,
        eats_5_servings_fruits_veggies=True,
        limits_refined_sugar=True,
        includes_healthy_fats=True,
        drinks_coffee=True,
    )
    bad = DietHabits(eats_processed_foods=True, drinks_alcohol=True, smokes_tobacco=True)
    assert calc.diet_readiness(good) == 100
    assert calc.diet_readiness(bad) == 0


def test_protein_tiers():
    assert calc.protein_g(SAFE_LOSS, GoalDirection.lose) == 176                  # 2.2 g/kg
    recomp = make_profile(goals=(Goal.lose_weight, Goal.gain_muscle))
    assert calc.protein_g(recomp, GoalDirection.lose) == 192                     # 2.4 g/kg
    assert calc.protein_g(MAINTAIN, GoalDirection.maintain) == 128               # 1.6 g/kg
    assert calc.protein_g(make_profile(MAINTAIN, age=55), GoalDirection.maintain) == 144
    assert calc.protein_g(make_profile(MAINTAIN, age=70), GoalDirection.maintain) == 160


def test_carb_share_rises_with_training():
    assert calc.carb_share(2, Intensity.beginner) == 0.40
    assert calc.carb_share(3, Intensity.beginner) == 0.45
    assert calc.carb_share(4, Intensity.advanced) == 0.50


def test_water_and_fiber():
    assert M.water_ml == 2800
    assert M.fiber_g == round(M.target_calories / 1000 * 14)


# ── Sleep / fitness extras ──────────────────────────────────────────
def test_sleep_hours_wraps_midnight():
    assert sleep_hours("07:00", "23:00") == 8
    assert sleep_hours("23:00", "07:00") == 16
    assert sleep_hours("06:00", "06:00") == 0


def test_heart_rate_zones():
    hr = M.heart_rate
    assert hr.max_hr == 190
    assert (hr.fat_burn.min_bpm, hr.fat_burn.max_bpm) == (114, 133)
    assert hr.cardio.min_bpm == hr.fat_burn.max_bpm


def test_recommended_intensity():
    assert calc.recommended_intensity(SAFE_LOSS) is Intensity.beginner
    assert calc.recommended_intensity(make_profile(experience_years=4)) is Intensity.advanced
    fit = make_profile(experience_years=2, pushups=30, run_minutes=20)
    assert calc.recommended_intensity(fit) is Intensity.advanced
    assert calc.recommended_intensity(make_profile(experience_years=2, pushups=30)) is Intensity.intermediate


def test_fitness_estimates_are_clamped():
    assert 18 <= M.metabolic_age <= 85
    assert 20 <= M.vo2max_estimate <= 80
    assert M.waist_hip_ratio is None
    assert compute(make_profile(waist_cm=90, hip_cm=100)).waist_hip_ratio == 0.9
