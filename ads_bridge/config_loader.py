"""Configuration loader for the ADS variable bridge."""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import voluptuous as vol
import yaml

from .const import (
    CONFIG_VERSION_PREFIX,
    DEFAULT_EVENT_LOGGER,
    DEFAULT_STRING_ENCODING,
    DEFAULT_VERBOSITY,
)
from .domain.value_objects.bridge_event import Verbosity

_LOGGER = logging.getLogger(__name__)


def _known_encoding(value: Any) -> str:
    """Voluptuous validator for codec names."""
    try:
        return codecs.lookup(str(value)).name
    except LookupError as err:
        raise vol.Invalid(f"unknown string encoding '{value}'") from err


CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional("version", default=CONFIG_VERSION_PREFIX + "0"): vol.Coerce(str),
        vol.Optional("string_encoding", default=DEFAULT_STRING_ENCODING): _known_encoding,
        vol.Optional("verbosity", default=DEFAULT_VERBOSITY): vol.In(
            [v.value for v in Verbosity]
        ),
        vol.Optional("logger_name", default=DEFAULT_EVENT_LOGGER): str,
    }
)


@dataclass(frozen=True)
class BridgeConfig:
    """Validated bridge settings.

    Attributes:
        version: Configuration format version
        string_encoding: Code page for string values
        verbosity: Most verbose event level that is published
        logger_name: Logger that receives bridge events
    """

    version: str = CONFIG_VERSION_PREFIX + "0"
    string_encoding: str = DEFAULT_STRING_ENCODING
    verbosity: Verbosity = Verbosity.IMPORTANT
    logger_name: str = DEFAULT_EVENT_LOGGER

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BridgeConfig:
        """Validate a raw configuration mapping.

        Raises:
            ValueError: If configuration is invalid
        """
        try:
            config = CONFIG_SCHEMA(data)
        except vol.Invalid as err:
            raise ValueError(f"Invalid configuration: {err}") from err

        version = config["version"]
        if not version.startswith(CONFIG_VERSION_PREFIX):
            raise ValueError(
                f"Configuration version {version} not supported. "
                f"Only version {CONFIG_VERSION_PREFIX}x is supported."
            )

        return cls(
            version=version,
            string_encoding=config["string_encoding"],
            verbosity=Verbosity(config["verbosity"]),
            logger_name=config["logger_name"],
        )


def load_config(config_file: str | Path | None = None) -> BridgeConfig:
    """Load and validate bridge configuration from YAML.

    Args:
        config_file: Path to the YAML file (None = built-in defaults)

    Returns:
        Validated configuration

    Raises:
        ValueError: If configuration is invalid
        FileNotFoundError: If configuration file not found
    """
    if config_file is None:
        return BridgeConfig()

    config_file = Path(config_file)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    try:
        data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise ValueError(f"Invalid YAML: {err}") from err

    if not data:
        raise ValueError("Configuration file is empty")
    if not isinstance(data, dict):
        raise ValueError("Configuration must be a mapping")

    config = BridgeConfig.from_dict(data)
    _LOGGER.info(
        "Loaded bridge configuration %s: encoding=%s, verbosity=%s",
        config.version,
        config.string_encoding,
        config.verbosity.value,
    )
    return config
