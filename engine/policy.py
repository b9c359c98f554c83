"""Tunable policy passed into the engine (the engine never reads settings itself)."""

from __future__ import annotations

from dataclasses import dataclass

from engine.constants import CONDITION_CATALOG, DEFAULT_CONDITION_PRIORITY


@dataclass(frozen=True)
class EnginePolicy:
    # medical-condition categories, most dominant first
    condition_priority: tuple[str, ...] = DEFAULT_CONDITION_PRIORITY
    # alternatives are generated at depth < max_alternative_depth
    max_alternative_depth: int = 1

    def __post_init__(self) -> None:
        known = {entry[0] for entry in CONDITION_CATALOG.values()}
        unknown = [c for c in self.condition_priority if c not in known]
        if unknown:
            raise ValueError(f"Unknown condition categories in priority: {unknown}")
        if self.max_alternative_depth < 0:
            raise ValueError("max_alternative_depth must be >= 0")

    def rank(self, category: str) -> int:
        """Lower is more dominant; unlisted categories rank after every listed one."""
        try:
            return self.condition_priority.index(category)
        except ValueError:
            return len(self.condition_priority)


DEFAULT_POLICY = EnginePolicy()
