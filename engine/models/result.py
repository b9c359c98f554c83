"""Validation outcome types: findings, alternatives and input rejections."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from engine.models.metrics import CalculatedMetrics
from engine.models.profile import Profile


class Severity(str, Enum):
    blocking = "blocking"
    advisory = "advisory"


@dataclass(frozen=True)
class Finding:
    code: str
    severity: Severity
    message: str
    recommendations: tuple[str, ...] = ()
    remediation: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class ProfileDelta:
    axis: str
    changes: dict[str, tuple[Any, Any]]   # field → (old, new)


@dataclass(frozen=True)
class AlternativePlan:
    strategy: str
    delta: ProfileDelta
    profile: Profile
    metrics: CalculatedMetrics
    result: "ValidationResult"
    verified: bool = True     # re-run through the full pipeline, not blocked


@dataclass(frozen=True)
class ValidationResult:
    metrics: CalculatedMetrics
    blocking: tuple[Finding, ...] = ()
    advisory: tuple[Finding, ...] = ()
    alternatives: tuple[AlternativePlan, ...] = ()

    @property
    def may_proceed(self) -> bool:
        return not self.blocking

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(f.code for f in self.blocking + self.advisory)


@dataclass(frozen=True)
class FieldFault:
    field: str
    value: Any
    message: str


@dataclass(frozen=True)
class InputRejection:
    """The profile is malformed; no metrics or findings were produced."""

    faults: tuple[FieldFault, ...]

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(f.field for f in self.faults)
