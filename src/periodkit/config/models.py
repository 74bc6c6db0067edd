"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, periodkit.toml only contains
overrides. An empty file (or none at all) yields a Monday-start Gregorian
engine.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from periodkit.domain.units import DEFAULT_WEEK_START

DEFAULT_MAX_ITERATIONS = 100_000


# --- periodkit.toml sections ---


class EngineConfig(BaseModel):
    """[engine] section."""

    model_config = {"frozen": True}

    week_start_day: int = Field(default=DEFAULT_WEEK_START, ge=0, le=6)
    adapter: str = "gregorian"
    max_iterations: int = Field(default=DEFAULT_MAX_ITERATIONS, gt=0)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True


class PeriodKitConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    engine: EngineConfig = Field(default_factory=EngineConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
