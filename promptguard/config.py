"""Configuration model for the scanner."""

import logging
import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SENSITIVITY,
    LOG_FILE_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    SENSITIVITY_ENV_VAR,
)
from .core.exceptions import InvalidConfigError
from .scanners.models import SensitivityLevel

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ScannerConfig(BaseModel):
    """Scanner settings, usually taken from the environment."""

    sensitivity: SensitivityLevel = Field(
        default=SensitivityLevel(DEFAULT_SENSITIVITY),
        description="Which severities a scan reports",
    )
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level name")
    log_file: str | None = Field(
        default=None, description="Optional JSON log file (rotated hourly)"
    )

    @field_validator("sensitivity", mode="before")
    @classmethod
    def _normalize_sensitivity(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ScannerConfig":
        """
        Build a configuration from environment variables.

        Unset variables fall back to the defaults.

        Raises:
            InvalidConfigError: if a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        if env.get(SENSITIVITY_ENV_VAR):
            values["sensitivity"] = env[SENSITIVITY_ENV_VAR]
        if env.get(LOG_LEVEL_ENV_VAR):
            values["log_level"] = env[LOG_LEVEL_ENV_VAR]
        if env.get(LOG_FILE_ENV_VAR):
            values["log_file"] = env[LOG_FILE_ENV_VAR]
        return cls.build(**values)

    @classmethod
    def build(cls, **values: object) -> "ScannerConfig":
        """Validate ``values`` and raise InvalidConfigError on failure."""
        try:
            return cls(**values)
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid scanner configuration: {e}") from e
