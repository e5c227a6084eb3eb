"""Runtime configuration.

Settings come from CODEREVIEW_* environment variables (optionally populated from a
.env file by the CLI). Uses BaseModel (not BaseSettings) and explicit env reads.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from codereview.errors import ConfigError
from codereview.review.models import Severity

OUTPUT_FORMATS = ("human", "json", "jsonl")
FAIL_ON_NONE = "none"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ENV_PREFIX = "CODEREVIEW_"
_TRUTHY = {"1", "true", "yes", "on"}


class ReviewSettings(BaseModel):
    """Settings for the CLI and logging.

    The review core takes no configuration; these only shape how results are
    produced and reported.
    """

    default_language: str | None = Field(
        default=None, description="Language used when none is given and none can be detected"
    )
    output_format: str = Field(default="human", description="human, json or jsonl")
    fail_on: str = Field(
        default=Severity.HIGH.value,
        description="Lowest severity that makes `codereview review` exit 1, or 'none'",
    )
    log_level: str = Field(default="WARNING", description="structlog filtering level")
    log_json: bool = Field(default=False, description="Render log events as JSON")

    model_config = ConfigDict(frozen=True)

    @field_validator("output_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        value = value.lower()
        if value not in OUTPUT_FORMATS:
            raise ValueError(f"must be one of {', '.join(OUTPUT_FORMATS)}")
        return value

    @field_validator("fail_on")
    @classmethod
    def _check_fail_on(cls, value: str) -> str:
        value = value.lower()
        if value != FAIL_ON_NONE and value not in {s.value for s in Severity}:
            raise ValueError(f"must be a severity or '{FAIL_ON_NONE}'")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return value

    @property
    def fail_on_severity(self) -> Severity | None:
        """Threshold severity, or None when failing is disabled."""
        if self.fail_on == FAIL_ON_NONE:
            return None
        return Severity(self.fail_on)


def load_settings(environ: Mapping[str, str] | None = None) -> ReviewSettings:
    """Build ReviewSettings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Validated ReviewSettings

    Raises:
        ConfigError: If any variable holds an invalid value
    """
    env = os.environ if environ is None else environ

    values: dict[str, object] = {}
    if language := env.get(f"{_ENV_PREFIX}DEFAULT_LANGUAGE"):
        values["default_language"] = language
    if output_format := env.get(f"{_ENV_PREFIX}FORMAT"):
        values["output_format"] = output_format
    if fail_on := env.get(f"{_ENV_PREFIX}FAIL_ON"):
        values["fail_on"] = fail_on
    if log_level := env.get(f"{_ENV_PREFIX}LOG_LEVEL"):
        values["log_level"] = log_level
    if log_json := env.get(f"{_ENV_PREFIX}LOG_JSON"):
        values["log_json"] = log_json.strip().lower() in _TRUTHY

    try:
        return ReviewSettings.model_validate(values)
    except ValidationError as e:
        raise ConfigError(_format_errors(e)) from e


def apply_overrides(settings: ReviewSettings, **overrides: object) -> ReviewSettings:
    """Return a validated copy of ``settings`` with non-None overrides applied.

    Raises:
        ConfigError: If an override holds an invalid value
    """
    values = settings.model_dump()
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return ReviewSettings.model_validate(values)
    except ValidationError as e:
        raise ConfigError(_format_errors(e)) from e


def _format_errors(error: ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors()
    )
    return f"Invalid configuration: {details}"
