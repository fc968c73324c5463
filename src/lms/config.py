"""Environment-driven configuration for the LMS server."""

from __future__ import annotations

import os
from collections.abc import Mapping  # noqa: TC003
from dataclasses import dataclass, field

from lms.logging import DEFAULT_LOG_DIR, DEFAULT_LOG_LEVEL

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass
class Settings:
    """Server settings.

    Each field can be set from an ``LMS_*`` environment variable, see
    ``from_env``.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_dir: str = DEFAULT_LOG_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Parsed settings, with defaults for unset variables.

        Raises:
            ConfigError: If LMS_PORT is not a valid TCP port.
        """
        if environ is None:
            environ = os.environ

        raw_port = environ.get("LMS_PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError as e:
            raise ConfigError(f"LMS_PORT must be an integer, got {raw_port!r}") from e
        if not 0 < port < 65536:
            raise ConfigError(f"LMS_PORT out of range: {port}")

        origins = [
            origin.strip()
            for origin in environ.get("LMS_CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        return cls(
            host=environ.get("LMS_HOST", DEFAULT_HOST),
            port=port,
            log_dir=environ.get("LMS_LOG_DIR", DEFAULT_LOG_DIR),
            log_level=environ.get("LMS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            cors_origins=origins or ["*"],
        )
