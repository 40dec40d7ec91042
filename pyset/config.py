"""
Settings that control how sets check and report on their elements.
"""
import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ENV_CHECK_TYPES = "PYSET_CHECK_TYPES"
ENV_LOG_LEVEL = "PYSET_LOG_LEVEL"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SetSettings(BaseModel):
    """
    Runtime settings shared by a Set and every set derived from it.
    """
    model_config = ConfigDict(frozen=True)

    check_types: bool = Field(
        default=True,
        description="Reject values that are not instances of the element type")
    log_level: LogLevel = Field(
        default="WARNING",
        description="Level applied to the pyset logger by configure_logging")


DEFAULT_SETTINGS = SetSettings()


def load_settings(environ: Mapping[str, str] | None = None) -> SetSettings:
    """
    Builds settings from PYSET_* environment variables.
    Unset variables keep their defaults; invalid values raise
    pydantic.ValidationError.
    """
    if environ is None:
        environ = os.environ
    values: dict[str, str] = {}
    if ENV_CHECK_TYPES in environ:
        values["check_types"] = environ[ENV_CHECK_TYPES].strip()
    if ENV_LOG_LEVEL in environ:
        values["log_level"] = environ[ENV_LOG_LEVEL].strip().upper()
    return SetSettings.model_validate(values)
