"""Configuration objects for the infrastructure layer."""

from __future__ import annotations

import os
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..domain.exceptions import ConfigurationError

DEFAULT_LOCAL_PATH_PREFIXES = ("/var/mobile/Media", "/private/var/mobile")
_BUCKET_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def bucket_for_app_group(app_group: str) -> str:
    """Derive a NATS bucket name from an app group identifier.

    NATS bucket names allow only alphanumerics and underscores, so every
    other character is replaced with an underscore.
    """
    return re.sub(r"[^a-zA-Z0-9_]", "_", app_group)


class ShareIntakeConfig(BaseModel):
    """Strongly-typed configuration for the share intake runtime.

    Groups the handoff store location, the on-device path prefixes that
    resolve without an asset lookup, and logging settings.
    """

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    # Handoff store
    app_group: str = Field(
        default="group.share_intake",
        min_length=1,
        description="App group the handoff store is scoped to",
    )
    bucket: str | None = Field(
        default=None,
        description="NATS KV bucket; derived from app_group when omitted",
    )
    nats_servers: list[str] = Field(
        default_factory=lambda: ["nats://localhost:4222"],
        min_length=1,
        description="List of NATS server URLs",
    )

    # Reference resolution
    local_path_prefixes: tuple[str, ...] = Field(
        default=DEFAULT_LOCAL_PATH_PREFIXES,
        description="Absolute path prefixes that resolve by string transform alone",
    )
    resolve_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds to wait for an asset lookup; None waits indefinitely",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level name")

    @field_validator("nats_servers")
    @classmethod
    def validate_servers(cls, v: list[str]) -> list[str]:
        """Validate server URLs format."""
        for server in v:
            if not server.startswith(("nats://", "tls://", "ws://", "wss://")):
                raise ValueError(
                    f"Invalid server URL: {server}. "
                    "Must start with nats://, tls://, ws://, or wss://"
                )
        return v

    @field_validator("bucket")
    @classmethod
    def validate_bucket_name(cls, v: str | None) -> str | None:
        """Validate bucket name format."""
        if v is not None and not _BUCKET_PATTERN.match(v):
            raise ValueError(
                f"Invalid bucket name: {v}. "
                "Must contain only alphanumeric characters and underscores"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @model_validator(mode="before")
    @classmethod
    def derive_bucket(cls, data: Any) -> Any:
        """Fill in the bucket name from the app group."""
        if isinstance(data, dict) and not data.get("bucket"):
            app_group = str(data.get("app_group") or "group.share_intake").strip()
            data = {**data, "bucket": bucket_for_app_group(app_group)}
        return data

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ShareIntakeConfig:
        """Build a configuration from SHARE_INTAKE_* environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        if app_group := env.get("SHARE_INTAKE_APP_GROUP"):
            values["app_group"] = app_group
        if bucket := env.get("SHARE_INTAKE_BUCKET"):
            values["bucket"] = bucket
        if nats_url := env.get("SHARE_INTAKE_NATS_URL"):
            values["nats_servers"] = [s.strip() for s in nats_url.split(",") if s.strip()]
        if timeout := env.get("SHARE_INTAKE_RESOLVE_TIMEOUT"):
            try:
                values["resolve_timeout"] = float(timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid SHARE_INTAKE_RESOLVE_TIMEOUT: {timeout}",
                    details={"variable": "SHARE_INTAKE_RESOLVE_TIMEOUT"},
                ) from e
        if log_level := env.get("SHARE_INTAKE_LOG_LEVEL"):
            values["log_level"] = log_level

        try:
            return cls(**values)
        except ValueError as e:
            raise ConfigurationError(f"Invalid share intake configuration: {e}") from e


class LogContext(BaseModel):
    """Strongly-typed context for structured logging.

    Provides a consistent way to pass context to loggers so that every
    intake log line carries the operation and the URL it concerns.
    """

    model_config = ConfigDict(
        extra="allow",
        str_strip_whitespace=True,
        strict=False,
        validate_assignment=True,
    )

    operation: str | None = Field(default=None, description="Current operation")
    component: str | None = Field(default=None, description="Component generating the log")
    content_class: str | None = Field(default=None, description="Content class of the URL")
    lookup_key: str | None = Field(default=None, description="Handoff store key")
    initial: bool | None = Field(default=None, description="Whether the event is initial")

    # Error context
    error_code: str | None = Field(default=None, description="Structured error code")
    error_type: str | None = Field(default=None, description="Type of error encountered")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging frameworks."""
        return {k: v for k, v in self.model_dump().items() if v is not None}

    def with_error(self, error: Exception) -> LogContext:
        """Create a new context with error information."""
        return LogContext(
            **{
                **self.model_dump(),
                "error_code": getattr(error, "code", None) or error.__class__.__name__,
                "error_type": type(error).__module__ + "." + type(error).__name__,
            }
        )
