"""Application configuration loading and validation."""

from __future__ import annotations

from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)


class ConfigError(ValueError):
    """Raised when configuration cannot be loaded safely."""


class PlaceholderNumbering(str, Enum):
    """How the list query numbers its LIMIT/OFFSET placeholders."""

    LEGACY = "legacy"
    SEQUENTIAL = "sequential"


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Runtime settings loaded from environment variables."""

    model_config = ConfigDict(frozen=True)

    list_numbering: PlaceholderNumbering = PlaceholderNumbering.LEGACY
    list_limit_default: int = Field(default=50, ge=0)
    list_limit_max: int = Field(default=100, ge=0)
    validate_sql: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(_LOG_LEVELS)}.")
        return normalized

    @field_validator("list_numbering", mode="before")
    @classmethod
    def normalize_numbering(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        if self.list_limit_default > self.list_limit_max:
            raise ValueError(
                "CRUDGEN_LIST_LIMIT_DEFAULT cannot exceed CRUDGEN_LIST_LIMIT_MAX."
            )
        return self


def _env_value(name: str, default: str | None = None) -> str | None:
    import os

    value = os.getenv(name, default)
    if value is None:
        return None
    return value.strip()


def load_settings() -> Settings:
    """Load settings from environment variables."""
    payload = {
        "list_numbering": _env_value("CRUDGEN_LIST_NUMBERING", "legacy"),
        "list_limit_default": _env_value("CRUDGEN_LIST_LIMIT_DEFAULT", "50"),
        "list_limit_max": _env_value("CRUDGEN_LIST_LIMIT_MAX", "100"),
        "validate_sql": _env_value("CRUDGEN_VALIDATE_SQL", "true"),
        "log_level": _env_value("CRUDGEN_LOG_LEVEL", "WARNING"),
    }

    try:
        return Settings.model_validate(payload)
    except ValidationError as exc:
        messages = []
        for err in exc.errors():
            field = ".".join(str(item) for item in err["loc"]) or "settings"
            messages.append(f"- {field}: {err['msg']}")
        raise ConfigError(
            "Invalid configuration values:\n" + "\n".join(messages)
        ) from exc
