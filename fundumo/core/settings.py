"""
Centralized application settings using Pydantic BaseSettings.

This module provides type-safe access to environment variables with validation.
All settings are loaded once at application startup.
"""

from pathlib import Path
from typing import Optional

from domain.exceptions import ConfigurationError
from domain.value_objects.enums import DEFAULT_STORAGE_PREFIX
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ============================================================================
# Application Constants
# ============================================================================

# Backend URL that selects the in-memory key-value backend
MEMORY_BACKEND_URL = "memory://"


def _get_base_path() -> Path:
    """Get the project root (parent of fundumo/)."""
    return Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults and are validated on startup.
    """

    # Storage configuration
    database_url: str = "sqlite+aiosqlite:///./fundumo.db"
    storage_prefix: str = DEFAULT_STORAGE_PREFIX

    # Debug configuration
    debug_logging: bool = False

    # Seconds to wait for pending writes when shutting down
    write_queue_stop_timeout: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # Allow extra fields for forward compatibility
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def validate_debug_logging(cls, v: Optional[str]) -> bool:
        """Parse debug_logging from string to bool."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            return v.lower() == "true"
        return False

    @field_validator("storage_prefix")
    @classmethod
    def validate_storage_prefix(cls, v: str) -> str:
        """Reject an empty namespace, which would collide with unrelated keys."""
        if not v.strip():
            raise ConfigurationError("storage_prefix must not be empty")
        return v

    @property
    def project_root(self) -> Path:
        """
        Get the project root directory.

        Returns:
            Path to the project root directory
        """
        return _get_base_path()

    @property
    def uses_memory_backend(self) -> bool:
        """Whether the configured URL selects the in-memory backend."""
        return self.database_url == MEMORY_BACKEND_URL


# Singleton instance - load settings once at module import
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()

        # Reload settings with explicit env file path if it exists
        env_path = _settings.project_root / ".env"
        if env_path.exists():
            _settings = Settings(_env_file=str(env_path))

    return _settings


def reset_settings() -> None:
    """
    Reset the settings singleton (useful for testing).
    """
    global _settings
    _settings = None
