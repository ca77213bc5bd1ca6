"""Centralized configuration management using Pydantic Settings.

Converter defaults, service limits and logging options are all read from the
environment (or a ``.env`` file) here. Converters take their initial property
values from ``get_settings().converter``.
"""

import codecs
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConverterConfig(BaseSettings):
    """Default values for newly created converters."""

    input_encoding: str = Field(
        default="utf-8",
        description="Codec used to decode byte input"
    )
    output_encoding: str = Field(
        default="utf-8",
        description="Codec used to encode byte output"
    )
    detect_encoding_from_byte_order_mark: bool = Field(
        default=False,
        description="Let a byte-order mark on byte input override input_encoding"
    )

    # Buffer Settings
    input_stream_buffer_size: int = Field(
        default=4096,
        ge=1,
        le=16 * 1024 * 1024,
        description="Read buffer size in bytes for byte input streams"
    )
    output_stream_buffer_size: int = Field(
        default=4096,
        ge=1,
        le=16 * 1024 * 1024,
        description="Write buffer size in bytes for byte output streams"
    )

    # RFC 3676 recommends keeping flowed lines well under 78 characters
    max_line_length: int = Field(
        default=76,
        ge=16,
        le=998,
        description="Flowed lines are kept shorter than this many characters"
    )

    model_config = SettingsConfigDict(env_prefix="CONVERTER_")

    @field_validator("input_encoding", "output_encoding")
    @classmethod
    def validate_encoding(cls, v):
        """Normalize codec names and reject unknown ones."""
        try:
            return codecs.lookup(v).name
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")


class ContentConfig(BaseSettings):
    """Limits applied by the HTTP conversion service."""

    # The whole body is held in memory for the JSON response
    max_content_size: int = Field(
        default=10 * 1024 * 1024,
        ge=1,
        le=200 * 1024 * 1024,
        description="Maximum size of the content field in UTF-8 bytes"
    )

    model_config = SettingsConfigDict(env_prefix="CONTENT_")


class LoggingConfig(BaseSettings):
    """Logging configuration with structured logging support."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Application log level"
    )
    access_log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Uvicorn access log level"
    )

    json_logs: bool = Field(
        default=False,
        description="Enable JSON formatted logs (recommended for production)"
    )

    access_log_file: str | None = Field(
        default=None,
        description="Path to access log file (None = stdout)"
    )
    error_log_file: str | None = Field(
        default=None,
        description="Path to error log file (None = stderr)"
    )

    log_rotation_size: int = Field(
        default=10 * 1024 * 1024,  # 10MB
        ge=1024 * 1024,  # Min 1MB
        description="Log file size before rotation (bytes)"
    )
    log_rotation_count: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Number of rotated log files to keep"
    )

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings combining all configuration sections."""

    app_name: str = Field(
        default="Text Converter",
        description="Application name"
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version"
    )

    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Runtime environment"
    )

    converter: ConverterConfig = Field(default_factory=ConverterConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def validate_settings(self) -> list[str]:
        """Validate settings and return list of warnings/info messages."""
        messages = []

        if self.environment == "production" and not self.logging.json_logs:
            messages.append("INFO: JSON logs recommended for production")

        if self.converter.input_encoding != "utf-8" or self.converter.output_encoding != "utf-8":
            messages.append(
                f"WARNING: Non UTF-8 default encodings "
                f"(input={self.converter.input_encoding}, output={self.converter.output_encoding})"
            )

        messages.append(f"INFO: Flowed line length: {self.converter.max_line_length}")
        messages.append(
            f"INFO: Max content size: {self.content.max_content_size / 1024 / 1024:.1f}MB"
        )
        messages.append(
            f"INFO: BOM detection: "
            f"{'enabled' if self.converter.detect_encoding_from_byte_order_mark else 'disabled'}"
        )

        return messages


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = Settings()
    return _settings
