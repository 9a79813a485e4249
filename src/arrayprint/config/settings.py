"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ARRAYPRINT_*`` prefix
  3. TOML file    — explicit ``--config`` / ``ARRAYPRINT_CONFIG``, or
                    ``arrayprint.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

A broken explicit file is a usage error.  A broken discovered file is
reported as a warning and ignored, so a stray file in some parent
directory can never make a plain run fail.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from arrayprint.config.discovery import ConfigLocation, locate_config
from arrayprint.config.models import OutputConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed already-parsed TOML data to Pydantic."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML data during construction.
_tls = threading.local()


def _reject(location: ConfigLocation, msg: str, warnings: list[str], exc: Exception) -> None:
    """Fail on an explicit file, warn on a discovered one."""
    if location.explicit:
        raise click.ClickException(msg) from exc
    warnings.append(f"{msg}; ignoring it")


class ArraySettings(BaseSettings):
    """Unified settings for the arrayprint CLI.

    Stored on the :class:`~arrayprint.commands._context.AppContext` that
    the root group puts in ``click.Context.obj``.

    Attributes:
        config_path: The TOML file that was applied, or None.
        config_warnings: Problems found while locating or reading the
            config file, logged once logging is configured.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ARRAYPRINT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    config_warnings: tuple[str, ...] = Field(default=(), exclude=True)

    # --- CLI flags ---
    json_output: bool = False
    table: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    output: OutputConfig = Field(default_factory=OutputConfig)

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
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_data", {})),
        )

    @classmethod
    def _build(
        cls,
        config_path: Path | None,
        toml_data: dict[str, Any],
        **kwargs: Any,
    ) -> ArraySettings:
        _tls.toml_data = toml_data
        try:
            return cls(config_path=config_path, **kwargs)
        finally:
            _tls.toml_data = {}

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> ArraySettings:
        """Construct settings from a CLI invocation.

        Raises:
            click.ClickException: An explicit config file is not valid
                TOML or holds invalid values.
        """
        location, warnings = locate_config(config_path, start)

        if location is not None:
            raw = location.path.read_text(encoding="utf-8")
            try:
                data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                _reject(location, f"Invalid TOML in {location.path}: {exc}", warnings, exc)
            else:
                try:
                    return cls._build(
                        location.path,
                        data,
                        config_warnings=tuple(warnings),
                        **cli_flags,
                    )
                except ValidationError as exc:
                    msg = f"Invalid settings in {location.path}: {exc.error_count()} error(s)"
                    _reject(location, msg, warnings, exc)

        return cls._build(None, {}, config_warnings=tuple(warnings), **cli_flags)
