"""Configuration for Vow Timer.

Settings come from the environment (optionally primed from a ``.env`` file in
the working directory). The only required value is the store connection
string.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from vow_timer.errors import ConfigError

DATABASE_URL_ENV = "VOW_DATABASE_URL"
SESSION_MINUTES_ENV = "VOW_SESSION_MINUTES"
ROTATION_SECONDS_ENV = "VOW_ROTATION_SECONDS"
OPERATION_TIMEOUT_ENV = "VOW_OPERATION_TIMEOUT"


class AppConfig(BaseModel):
    """Runtime settings."""

    database_url: str = Field(..., description="Store connection string")
    session_minutes: int = Field(default=25, ge=0)
    rotation_interval: float = Field(default=180.0, gt=0)
    operation_timeout: float = Field(default=5.0, gt=0)

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("database_url cannot be empty")
        return v


def load_config(
    environ: Mapping[str, str] | None = None, *, use_dotenv: bool = True
) -> AppConfig:
    """Build an AppConfig from environment variables.

    Args:
        environ: Mapping to read from; defaults to ``os.environ``.
        use_dotenv: Load a ``.env`` file into the process environment first.

    Raises:
        ConfigError: If the connection string is absent or a value is invalid.
    """
    if use_dotenv:
        load_dotenv(dotenv_path=".env")
    if environ is None:
        environ = os.environ

    url = environ.get(DATABASE_URL_ENV, "")
    if not url.strip():
        raise ConfigError(
            f"{DATABASE_URL_ENV} environment variable is required. "
            "Create a .env file or set it in your environment"
        )

    values: dict[str, str] = {"database_url": url}
    optional = {
        "session_minutes": SESSION_MINUTES_ENV,
        "rotation_interval": ROTATION_SECONDS_ENV,
        "operation_timeout": OPERATION_TIMEOUT_ENV,
    }
    for field, env_name in optional.items():
        if environ.get(env_name):
            values[field] = environ[env_name]

    try:
        return AppConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
