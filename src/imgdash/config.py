"""Configuration management for imgdash.

Values come from environment variables, then Streamlit secrets as fallback.
A ``.env`` file in the working directory is loaded once at import time;
variables already present in the environment take precedence.
"""

import os
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

try:
    import streamlit as st

    STREAMLIT_AVAILABLE = True
except ImportError:
    STREAMLIT_AVAILABLE = False

from .logging_config import get_logger

logger = get_logger(__name__)

load_dotenv(override=False)

DEFAULT_APPWRITE_ENDPOINT = "https://cloud.appwrite.io/v1"
DEFAULT_SESSION_STORE_PATH = ".imgdash/session.json"


class Config:
    """Centralized configuration management using environment variables."""

    def __init__(self):
        self._cache = {}

    def get(self, key: str, default: Any = None, cast_type: type = str) -> Any:
        """Get configuration value from environment variables or Streamlit secrets.

        Args:
            key: Configuration key
            default: Default value if not found
            cast_type: Type to cast the value to (str, int, bool, float)

        Returns:
            Configuration value cast to the specified type
        """
        cache_key = f"{key}:{cast_type.__name__}"
        if cache_key in self._cache:
            return self._cache[cache_key]

        value = os.getenv(key)

        if value is None and STREAMLIT_AVAILABLE:
            try:
                value = st.secrets.get(key)
            except Exception:  # nosec B110
                # No secrets.toml, or not running inside Streamlit
                pass

        if value is None:
            value = default

        if value is not None:
            try:
                if cast_type is bool:
                    if isinstance(value, str):
                        value = value.lower() in ("true", "1", "yes", "on")  # type: ignore[assignment]
                    else:
                        value = bool(value)  # type: ignore[assignment]
                elif cast_type is not str:
                    value = cast_type(value)
            except (ValueError, TypeError) as e:
                logger.warning(f"Failed to cast config value '{key}' to {cast_type.__name__}: {e}")
                value = default

        self._cache[cache_key] = value
        return value

    def get_required(self, key: str, cast_type: type = str) -> Any:
        """Get required configuration value.

        Raises:
            ValueError: If the required configuration is not found
        """
        value = self.get(key, cast_type=cast_type)
        if value is None:
            raise ValueError(f"Required configuration '{key}' not found")
        return value

    def is_development(self) -> bool:
        """Check if running in development mode."""
        environment = self.get("ENVIRONMENT", "development").lower()
        return environment in ["development", "dev", "local"]

    def clear_cache(self):
        """Clear configuration cache."""
        self._cache.clear()


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def get_env(key: str, default: Any = None, cast_type: type = str) -> Any:
    """Get a configuration value with type casting."""
    return get_config().get(key, default, cast_type)


def is_development() -> bool:
    """Check if running in development mode."""
    return get_config().is_development()


@dataclass(frozen=True)
class BackendSettings:
    """Connection settings for the hosted backend."""

    endpoint: str
    project_id: str
    database_id: str
    uploads_collection_id: str
    bucket_id: str
    api_key: str | None = None

    def missing(self) -> list[str]:
        """Names of identifiers that are empty and will make remote calls fail."""
        fields = {
            "APPWRITE_ENDPOINT": self.endpoint,
            "APPWRITE_PROJECT_ID": self.project_id,
            "APPWRITE_DATABASE_ID": self.database_id,
            "APPWRITE_UPLOADS_COLLECTION_ID": self.uploads_collection_id,
            "APPWRITE_BUCKET_ID": self.bucket_id,
        }
        return [name for name, value in fields.items() if not value]


def get_backend_settings() -> BackendSettings:
    """Read backend settings. Identifiers default to an empty string."""
    return BackendSettings(
        endpoint=str(get_env("APPWRITE_ENDPOINT", DEFAULT_APPWRITE_ENDPOINT)),
        project_id=str(get_env("APPWRITE_PROJECT_ID", "")),
        database_id=str(get_env("APPWRITE_DATABASE_ID", "")),
        uploads_collection_id=str(get_env("APPWRITE_UPLOADS_COLLECTION_ID", "")),
        bucket_id=str(get_env("APPWRITE_BUCKET_ID", "")),
        api_key=get_env("APPWRITE_API_KEY") or None,
    )


def missing_backend_settings() -> list[str]:
    """List backend settings that are not configured."""
    return get_backend_settings().missing()


def get_session_store_path() -> str:
    """Get the path of the file that persists the login session."""
    return str(get_env("SESSION_STORE_PATH", DEFAULT_SESSION_STORE_PATH))
