"""
Configuration management for billdesk.

Uses Pydantic settings for validation and environment variable support.
"""
from functools import lru_cache
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.value_objects import Currency


class ApiSettings(BaseSettings):
    """Billing REST API configuration."""

    model_config = SettingsConfigDict(
        env_prefix='BILLDESK_API_',
        env_file='.env',
        extra='ignore'
    )

    base_url: str = Field(default='http://localhost:8080/api', description='API base URL')
    timeout: float = Field(default=10.0, description='Request timeout in seconds')
    token: Optional[str] = Field(default=None, description='Initial bearer token')

    @field_validator('base_url')
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip('/')


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix='BILLDESK_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    # Application
    app_name: str = Field(default='billdesk')
    app_version: str = Field(default='0.1.0')
    environment: str = Field(default='development')  # development, staging, production

    # Logging
    log_level: str = Field(default='INFO')
    log_format: str = Field(default='text')  # json or text

    # Billing
    default_currency: Currency = Field(default=Currency.USD)
    recent_bills_limit: int = Field(default=5, ge=0)

    # Sub-settings
    api: ApiSettings = Field(default_factory=ApiSettings)

    @field_validator('log_format')
    @classmethod
    def check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ('json', 'text'):
            raise ValueError("log_format must be 'json' or 'text'")
        return value


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get cached application settings.

    Uses LRU cache to avoid re-reading environment variables on every access.
    """
    return AppSettings()
