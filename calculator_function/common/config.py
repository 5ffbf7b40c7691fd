"""Runtime settings read from the function's environment."""
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from calculator_function.common.operations import ZERO_DIVISION_TOLERANCE

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CalculatorSettings(BaseModel):
    """
    Settings for a single invocation.

    Built fresh from the environment on every call instead of living in a
    module-level global, so each invocation sees the current environment.
    """

    model_config = ConfigDict(frozen=True)

    log_level: str = Field(default="INFO", description="Level of the shared logger")
    json_indent: int = Field(default=2, ge=0, description="Indentation of JSON responses")
    zero_tolerance: float = Field(
        default=ZERO_DIVISION_TOLERANCE,
        ge=0,
        description="Divisors with an absolute value below this are treated as zero",
    )

    @field_validator("log_level")
    def log_level_must_be_known(cls, v: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {v!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalculatorSettings":
        """
        Build settings from environment variables.

        Recognized variables: ``LOG_LEVEL``, ``CALCULATOR_JSON_INDENT`` and
        ``CALCULATOR_ZERO_TOLERANCE``. Unset variables keep their defaults.

        :param Mapping environ: Environment to read, defaults to ``os.environ``

        :return: Validated settings
        :rtype: CalculatorSettings
        :raises pydantic.ValidationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        values = {}
        if "LOG_LEVEL" in env:
            values["log_level"] = env["LOG_LEVEL"]
        if "CALCULATOR_JSON_INDENT" in env:
            values["json_indent"] = env["CALCULATOR_JSON_INDENT"]
        if "CALCULATOR_ZERO_TOLERANCE" in env:
            values["zero_tolerance"] = env["CALCULATOR_ZERO_TOLERANCE"]
        return cls(**values)
