"""Shared profile fixtures for the engine tests."""

from __future__ import annotations

from dataclasses import replace

from engine.models import Goal, Intensity, Occupation, Profile, Sex

# 30 y male, desk job, 3 × 45 min intermediate strength, 80 → 70 kg in 20 weeks
SAFE_LOSS = Profile(
    age=30,
    sex=Sex.male,
    occupation=Occupation.desk_job,
    height_cm=178,
    weight_kg=80,
    target_weight_kg=70,
    timeline_weeks=20,
    workouts_per_week=3,
    session_minutes=45,
    intensity=Intensity.intermediate,
    workout_types=("strength",),
    goals=(Goal.lose_weight,),
)

# same person, 80 → 60 kg in 8 weeks
EXTREME_LOSS = replace(SAFE_LOSS, target_weight_kg=60, timeline_weeks=8)

MAINTAIN = replace(SAFE_LOSS, target_weight_kg=80, goals=())


def make_profile(base: Profile = SAFE_LOSS, **changes) -> Profile:
    return replace(base, **changes)
