"""
Configuration settings for Typed Prompt.

This module provides configuration management using Pydantic settings
with support for environment variables and ``.env`` files.
"""

from typing import Optional, Dict, Any
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

UNSUPPORTED_TYPE_POLICIES = {"raise", "retry"}


class TypedPromptSettings(BaseSettings):
    """
    Configuration settings for Typed Prompt.

    Settings are loaded from multiple sources in order of preference:
    1. Environment variables (prefixed with TYPED_PROMPT_)
    2. ``.env`` file in the working directory
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPED_PROMPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Retry Configuration
    retry_message: str = Field(
        default="Please try again.",
        description="Notice printed after every rejected reply"
    )

    unsupported_type_policy: str = Field(
        default="raise",
        description="What a request for a type without a parser does: 'raise' or 'retry'"
    )

    eof_retry_limit: Optional[int] = Field(
        default=None,
        description="Consecutive empty reads tolerated before giving up (unlimited when unset)",
        gt=0
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    @field_validator("retry_message")
    @classmethod
    def validate_retry_message(cls, v: str) -> str:
        """Validate retry message."""
        if not v.strip():
            raise ValueError("Retry message must not be blank")
        return v

    @field_validator("unsupported_type_policy")
    @classmethod
    def validate_unsupported_type_policy(cls, v: str) -> str:
        """Validate unsupported type policy."""
        v_lower = v.strip().lower()
        if v_lower not in UNSUPPORTED_TYPE_POLICIES:
            raise ValueError(
                f"Invalid policy '{v}'. Valid policies: {', '.join(sorted(UNSUPPORTED_TYPE_POLICIES))}"
            )
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Valid levels: {', '.join(sorted(valid_levels))}")
        return v_upper

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug flag."""
        return "DEBUG" if self.debug else self.log_level

    @property
    def retries_unsupported_types(self) -> bool:
        """Whether unsupported type requests loop instead of raising."""
        return self.unsupported_type_policy == "retry"

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump()


def get_settings() -> TypedPromptSettings:
    """Get the current Typed Prompt settings."""
    return TypedPromptSettings()
