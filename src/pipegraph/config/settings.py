"""PipegraphSettings: global flags plus the [reach], [export] and [output] tables.

Sources, strongest first: CLI flags, ``PIPEGRAPH_*`` environment
variables (``__`` separates nested keys, e.g.
``PIPEGRAPH_REACH__START_NODE=3``), then ``pipegraph.toml``, then the
defaults in :mod:`pipegraph.config.models`.

The TOML file is the one named by ``--config``, else by
``$PIPEGRAPH_CONFIG``, else the nearest ``pipegraph.toml`` at or above
the working directory.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from pipegraph.config.models import ExportConfig, OutputConfig, ReachConfig

CONFIG_FILENAME = "pipegraph.toml"
CONFIG_ENV_VAR = "PIPEGRAPH_CONFIG"


def locate_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Return the TOML file to read, or None when there is none."""
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class PipegraphSettings(BaseSettings):
    """Everything a command needs to know about how to run and print."""

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="PIPEGRAPH_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    reach: ReachConfig = Field(default_factory=ReachConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
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
        # The file to read arrives as the config_path init kwarg.
        toml_file = init_settings().get("config_path")
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_root: Path | None = None,
        **cli_flags: Any,
    ) -> PipegraphSettings:
        """Locate the TOML file and build settings with *cli_flags* on top.

        Raises click.ClickException when the file is not valid TOML.
        """
        toml_path = locate_config(config_path, search_root)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
