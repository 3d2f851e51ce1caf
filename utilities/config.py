"""
Configuration management using environment variables.
Handles shared bookshelf settings (logging, id generation) with validation and defaults.
"""

from typing import Optional
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BookshelfConfig(BaseSettings):
    """
    Configuration class for shared bookshelf settings.
    Uses pydantic BaseSettings for environment variable management.
    """

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log renderer: json or console")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    # Book identifiers
    book_id_length: int = Field(default=16, description="Length of generated book ids")

    # Development/Testing
    debug: bool = Field(default=False, description="Enable debug mode")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields from .env
    )

    @field_validator('book_id_length')
    @classmethod
    def validate_book_id_length(cls, v):
        """Ensure generated ids stay reasonably sized."""
        if v < 4 or v > 64:
            raise ValueError('book_id_length must be between 4 and 64')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'log_level must be one of: {valid_levels}')
        return v.upper()

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v):
        """Ensure log format is valid."""
        valid_formats = ['json', 'console']
        if v.lower() not in valid_formats:
            raise ValueError(f'log_format must be one of: {valid_formats}')
        return v.lower()

    def get_log_file_path(self) -> Optional[Path]:
        """Get log file path as Path object."""
        if self.log_file:
            return Path(self.log_file)
        return None


# Global configuration instance
config = BookshelfConfig()
