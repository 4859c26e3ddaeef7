"""Settings for one shopnet run.

Sources, highest priority first: the global CLI flags, ``SHOPNET_*``
environment variables (``SHOPNET_INPUT__MAX_SHOPS=50``), the ``[input]``
table of ``shopnet.toml``, then the defaults on :class:`InputConfig`.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, TomlConfigSettingsSource

from shopnet.config.discovery import find_config
from shopnet.config.models import InputConfig

# The TOML file chosen by from_cli, read while the settings are built.
_toml_file: ContextVar[Path | None] = ContextVar("shopnet_toml_file", default=None)


class ShopnetSettings(BaseSettings):
    """Output flags and input limits, frozen once built.

    Attributes:
        config_path: The ``shopnet.toml`` that was read, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SHOPNET_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    input: InputConfig = Field(default_factory=InputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlConfigSettingsSource(settings_cls, toml_file=_toml_file.get())
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_from: Path | None = None,
        **cli_flags: Any,
    ) -> ShopnetSettings:
        """Build settings for a command line.

        ``--config`` names the TOML file outright (a missing file means no
        file); without it the file is discovered from *search_from*.

        Raises:
            click.ClickException: The TOML file is not valid TOML.
        """
        if config_path:
            toml_path = Path(config_path) if Path(config_path).is_file() else None
        else:
            toml_path = find_config(search_from)

        token = _toml_file.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _toml_file.reset(token)
