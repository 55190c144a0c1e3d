"""PatternSettings: one frozen object built from flags, env vars and TOML.

Highest priority first: CLI flags, ``PATTERNCTL_*`` env vars (``__``
separates nested keys), the discovered ``patternctl.toml``, then the
defaults in :mod:`patternctl.config.models`.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from patternctl.config.discovery import find_config
from patternctl.config.models import CheckoutConfig, ExportConfig

# File picked by from_cli, read by settings_customise_sources.
_toml_file: ContextVar[Path | None] = ContextVar("_toml_file", default=None)


class PatternSettings(BaseSettings):
    """Global flags plus the ``[checkout]`` and ``[export]`` sections.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PATTERNCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    checkout: CheckoutConfig = Field(default_factory=CheckoutConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=_toml_file.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> PatternSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* wins over walk-up discovery from *start*
        (default: cwd); a missing explicit file means no TOML layer. Bad
        TOML syntax and values that fail validation both surface as
        :class:`click.ClickException`.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(start)

        token = _toml_file.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        except ValidationError as exc:
            raise click.ClickException(f"Invalid configuration: {exc}") from exc
        finally:
            _toml_file.reset(token)
