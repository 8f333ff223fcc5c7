"""Configuration settings for match scoring."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL_NAME = "JobMatchingModel"
DEFAULT_MODEL_SUFFIX = ".joblib"


class MatchingConfig(BaseSettings):
    """Match scoring configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `MATCHING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MATCHING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        protected_namespaces=(),
    )

    # Model resource settings
    model_name: str = Field(
        default=DEFAULT_MODEL_NAME,
        description="Logical name of the bundled classification model",
    )
    model_suffix: str = Field(
        default=DEFAULT_MODEL_SUFFIX,
        description="File extension of the bundled model resource",
    )
    model_path: Path | None = Field(
        default=None,
        description="Explicit model file path (overrides the bundled resource)",
    )

    # Input text settings
    include_job_fields: bool = Field(
        default=False,
        description=(
            "Append the job title, required skills and minimum experience to the "
            "model input. Off by default: scores depend on the candidate only."
        ),
    )

    @field_validator("model_name", mode="before")
    @classmethod
    def validate_model_name(cls, v: str) -> str:
        """Reject empty names and names containing path separators."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("model_name must be a non-empty string")
        value = v.strip()
        if "/" in value or "\\" in value:
            raise ValueError("model_name must not contain path separators")
        return value

    @field_validator("model_suffix", mode="before")
    @classmethod
    def validate_model_suffix(cls, v: str) -> str:
        """Ensure the suffix looks like a file extension."""
        if not isinstance(v, str) or not v.startswith(".") or len(v) < 2:
            raise ValueError("model_suffix must start with '.' (e.g. '.joblib')")
        return v


# Singleton instance for easy import
_matching_config: MatchingConfig | None = None


def get_matching_config() -> MatchingConfig:
    """Get the matching configuration singleton."""
    global _matching_config
    if _matching_config is None:
        _matching_config = MatchingConfig()
    return _matching_config


def reset_matching_config() -> None:
    """Reset the matching configuration singleton (useful for testing)."""
    global _matching_config
    _matching_config = None
