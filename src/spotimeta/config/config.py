"""Configuration management for spotimeta."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from spotimeta.config.paths import default_config_path
from spotimeta.platform.logging import logger
from spotimeta.platform.spotify.errors import ConfigurationError
from spotimeta.platform.spotify.models import (
    DEFAULT_TIMEOUT,
    URI_BASE,
    ClientConfig,
    ResponseFormat,
    Timeout,
)


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


def _positive_seconds(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError("timeout must be a number of seconds")
    if value <= 0:
        raise ConfigurationError("timeout must be greater than zero")
    return float(value)


def _coerce_timeout(value: object) -> Timeout:
    """Accept a single timeout or a ``[connect, read]`` pair from TOML."""

    if isinstance(value, (list, tuple)):
        if len(value) != 2:
            raise ConfigurationError("timeout pair must hold exactly [connect, read]")
        return (_positive_seconds(value[0]), _positive_seconds(value[1]))
    return _positive_seconds(value)


@dataclass
class Config:
    """Application configuration."""

    # Response format requested from the service (JSON or XML)
    response_format: str = ResponseFormat.XML.value

    # Service root, without a trailing slash
    base_uri: str = URI_BASE

    # Seconds; a single number or a [connect, read] pair
    timeout: Timeout = DEFAULT_TIMEOUT

    # Log file path
    log_file: Path | None = _path_field()

    def __post_init__(self) -> None:
        """Normalise path fields and validate scalar types."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)
            elif value is not None and not isinstance(value, Path):
                raise ConfigurationError(f"{f.name} must be a string path")

        if not isinstance(self.response_format, str):
            raise ConfigurationError("response_format must be a string")
        if not isinstance(self.base_uri, str) or not self.base_uri.strip():
            raise ConfigurationError("base_uri must be a non-empty string")
        self.timeout = _coerce_timeout(self.timeout)

    def client_config(self) -> ClientConfig:
        """Build the validated client configuration.

        Raises:
            ConfigurationError: If ``response_format`` is not JSON or XML.
        """
        return ClientConfig.create(
            self.response_format,
            base_uri=self.base_uri,
            timeout=self.timeout,
        )

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from a TOML file.

        Args:
            path: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration, or defaults when the file is absent.

        Raises:
            ConfigurationError: If the file is not valid TOML or holds bad values.
        """
        config_file = path or default_config_path()
        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error("Failed to load configuration: %s", e)
            raise ConfigurationError(f"Invalid configuration file {config_file}: {e}") from e

        known = {f.name for f in fields(cls)}
        for key in sorted(set(config_dict) - known):
            logger.warning("Ignoring unknown configuration key '%s' in %s", key, config_file)
            del config_dict[key]

        instance = cls(**config_dict)
        logger.info("Configuration loaded from %s", config_file)
        return instance


__all__ = ["Config"]
