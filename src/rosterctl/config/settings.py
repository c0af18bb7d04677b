"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ROSTERCTL_*`` prefix
  3. TOML file    — ``rosterctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the walk-up discovery from :mod:`rosterctl.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rosterctl.config.discovery import find_config
from rosterctl.config.models import DataConfig, McpConfig, RosterConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``rosterctl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path for the settings object currently under construction.
_tls = threading.local()


class RosterSettings(BaseSettings):
    """Unified settings for the rosterctl CLI and server.

    Attributes:
        data_root: Directory that relative bootstrap paths resolve against
            (parent of ``rosterctl.toml``, or CWD if no config found).
        config_path: The config file in use, if any.
        profile_file: ``--profile-file`` override for ``[data] profile_file``.
        roster_file: ``--roster-file`` override for ``[data] roster_file``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ROSTERCTL_",
        "env_nested_delimiter": "__",
    }

    data_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    profile_file: str | None = None
    roster_file: str | None = None

    # --- TOML sections ---
    data: DataConfig = Field(default_factory=DataConfig)
    roster: RosterConfig = Field(default_factory=RosterConfig)
    mcp: McpConfig = Field(default_factory=McpConfig)

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
        data_root: Path | None = None,
        **cli_flags: Any,
    ) -> RosterSettings:
        """Construct settings from a CLI invocation.

        Discovers ``rosterctl.toml`` via walk-up (or explicit *config_path*),
        resolves *data_root* from the config file's parent directory, and
        merges CLI flags as highest-priority overrides. Flags left unset
        (``None``, or ``False`` for an unpassed switch) are dropped so they
        never shadow env or TOML values.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(data_root)

        resolved_root = data_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        flags = {
            key: value
            for key, value in cli_flags.items()
            if value is not None and value is not False
        }
        _tls.toml_path = toml_path
        try:
            return cls(data_root=resolved_root, config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None

    @property
    def profile_path(self) -> Path:
        return self._resolve(self.profile_file or self.data.profile_file)

    @property
    def roster_path(self) -> Path:
        return self._resolve(self.roster_file or self.data.roster_file)

    def _resolve(self, name: str) -> Path:
        path = Path(name).expanduser()
        return path if path.is_absolute() else self.data_root / path
