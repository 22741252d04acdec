"""Configuration management for the table gateway.

Centralizes all environment variable access for better testability and maintainability.
"""

import os
from typing import Optional


def _env(name: str) -> Optional[str]:
    """Read an environment variable, treating empty strings as unset."""
    value = os.environ.get(name)
    return value or None


class Config:
    """Application configuration loaded from environment variables."""

    # Supabase configuration
    @staticmethod
    def supabase_url() -> Optional[str]:
        """Get Supabase project URL from environment."""
        return _env("SUPABASE_URL")

    @staticmethod
    def supabase_key() -> Optional[str]:
        """Get Supabase access key from environment."""
        return _env("SUPABASE_KEY") or _env("SUPABASE_SERVICE_ROLE_KEY")

    # Server
    @staticmethod
    def port() -> int:
        """Get HTTP port (defaults to 3000)."""
        return int(os.environ.get("PORT") or 3000)

    @staticmethod
    def environment() -> str:
        return os.environ.get("ENVIRONMENT") or "development"

    @staticmethod
    def log_level() -> str:
        return (os.environ.get("LOG_LEVEL") or "INFO").upper()

    @staticmethod
    def api_prefix() -> str:
        return "/api/v1"

    @staticmethod
    def docs_path() -> str:
        return "/api-docs"

    # Helper methods
    @staticmethod
    def is_configured() -> bool:
        """Check if all required configuration is present."""
        return all([
            Config.supabase_url(),
            Config.supabase_key(),
        ])

    @staticmethod
    def get_missing_config() -> list[str]:
        """Get list of missing required configuration keys."""
        missing = []
        if not Config.supabase_url():
            missing.append("SUPABASE_URL")
        if not Config.supabase_key():
            missing.append("SUPABASE_KEY")
        return missing


# Singleton instance for easy access
config = Config()
