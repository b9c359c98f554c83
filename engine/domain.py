"""
engine/domain.py
────────────────────────────────────────────────────────────────────────
Declared numeric domains of a Profile.

A value outside its domain is a *fault* (malformed input), reported as a
`FieldFault`; it is never turned into a blocking finding. Physiologically
odd but in-range values pass here and are judged by the rule batteries.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from engine.models.profile import Profile
from engine.models.result import FieldFault

_LOG = logging.getLogger(__name__)

# field → (min, max), inclusive
REQUIRED_RANGES: dict[str, tuple[float, float]] = {
    "age": (13, 120),
    "height_cm": (100, 250),
    "weight_kg": (30, 300),
    "target_weight_kg": (30, 300),
    "timeline_weeks": (4, 104),
    "experience_years": (0, 50),
    "workouts_per_week": (0, 7),
    "session_minutes": (0, 300),
    "pushups": (0, 200),
    "run_minutes": (0, 300),
}

OPTIONAL_RANGES: dict[str, tuple[float, float]] = {
    "body_fat_pct": (3, 50),
    "estimated_body_fat_pct": (3, 50),
    "estimate_confidence": (0, 100),
    "waist_cm": (30, 250),
    "hip_cm": (30, 250),
    "chest_cm": (30, 250),
    "trimester": (1, 3),
}


def parse_clock(value: str) -> int:
    """"HH:MM" → minutes after midnight."""
    hours, sep, minutes = value.strip().partition(":")
    if not sep:
        raise ValueError(f"expected HH:MM, got {value!r}")
    h, m = int(hours), int(minutes)
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise ValueError(f"clock time out of range: {value!r}")
    return h * 60 + m


def check_profile(profile: Profile) -> list[FieldFault]:
    """Return every out-of-domain field (empty list → profile is well-formed)."""
    faults: list[FieldFault] = []

    for name, bounds in REQUIRED_RANGES.items():
        fault = _check_range(name, getattr(profile, name), bounds)
        if fault:
            faults.append(fault)

    for name, bounds in OPTIONAL_RANGES.items():
        value = getattr(profile, name)
        if value is None:
            continue
        fault = _check_range(name, value, bounds)
        if fault:
            faults.append(fault)

    for name in ("wake_time", "sleep_time"):
        value = getattr(profile, name)
        try:
            parse_clock(value)
        except (ValueError, AttributeError) as exc:
            faults.append(FieldFault(name, value, f"invalid clock time ({exc})"))

    if profile.pregnant and profile.lactating:
        faults.append(
            FieldFault("lactating", True, "pregnant and lactating cannot both be set")
        )

    if faults:
        _LOG.debug("profile rejected: %s", [f.field for f in faults])
    return faults


def _check_range(name: str, value: Any, bounds: tuple[float, float]) -> FieldFault | None:
    lo, hi = bounds
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return FieldFault(name, value, "must be a number")
    if not math.isfinite(value):
        return FieldFault(name, value, "must be a finite number")
    if not lo <= value <= hi:
        return FieldFault(name, value, f"must be between {lo:g} and {hi:g}")
    return None
