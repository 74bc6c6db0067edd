"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PERIODKIT_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``periodkit.toml`` or ``[tool.periodkit]``, via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`periodkit.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from periodkit.config.discovery import find_config, read_config_data
from periodkit.config.models import EngineConfig, PluginsConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from ``periodkit.toml`` or ``[tool.periodkit]`` in pyproject.toml."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = read_config_data(toml_path)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class PeriodKitSettings(BaseSettings):
    """Unified settings for the periodkit CLI.

    Merges CLI flags, environment variables, the TOML ``[engine]`` and
    ``[plugins]`` sections, and code-baked defaults into a single frozen
    object stored on the CLI's AppContext.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PERIODKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    engine: EngineConfig = Field(default_factory=EngineConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        week_start: int | None = None,
        adapter: str | None = None,
        **cli_flags: Any,
    ) -> PeriodKitSettings:
        """Construct settings from a CLI invocation.

        Discovers ``periodkit.toml`` via walk-up from *cwd* (or uses the
        explicit *config_path*). ``week_start`` and ``adapter`` override the
        matching ``[engine]`` keys; unset flags leave lower layers intact.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(cwd)

        engine_overrides: dict[str, Any] = {}
        if week_start is not None:
            engine_overrides["week_start_day"] = week_start
        if adapter is not None:
            engine_overrides["adapter"] = adapter
        if engine_overrides:
            cli_flags["engine"] = engine_overrides

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
