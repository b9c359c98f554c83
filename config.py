"""
Centralised settings loader (pydantic-settings v2).

Only the HTTP / CLI surfaces read these; the engine receives an
`EnginePolicy` built from them and never touches the environment.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ────────────────────────────────────────────────────
    env_name: str = Field("local", validation_alias="ENV_NAME")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    # ─── engine policy ──────────────────────────────────────────────
    # comma-separated condition categories, most dominant first
    condition_priority: str = Field(
        "thyroid,insulin_resistance,cardiovascular",
        validation_alias="CONDITION_PRIORITY",
    )
    max_alternative_depth: int = Field(1, ge=0, validation_alias="MAX_ALTERNATIVE_DEPTH")

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )

    @property
    def condition_priority_order(self) -> tuple[str, ...]:
        return tuple(c.strip() for c in self.condition_priority.split(",") if c.strip())


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
