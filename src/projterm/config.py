"""Configuration management for projterm."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from projterm.security.validator import MAX_COMMAND_LENGTH


class TerminalSettings(BaseSettings):
    """Terminal command settings, read from PROJTERM_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PROJTERM_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Security
    max_command_length: int = Field(
        default=MAX_COMMAND_LENGTH, gt=0, description="Longest accepted command in characters"
    )
    block_suspicious_patterns: bool = Field(
        default=True, description="Reject script-injection patterns anywhere in a command"
    )

    # Audit and output
    audit_preview_length: int = Field(
        default=100, ge=0, description="Characters of each command kept in audit logs"
    )
    suggestion_limit: int = Field(
        default=10, ge=0, description="Maximum autocomplete suggestions"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")


def get_settings() -> TerminalSettings:
    """Get settings from the environment and an optional .env file."""
    return TerminalSettings()
