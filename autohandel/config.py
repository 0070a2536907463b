"""
AutoHandel Configuration

Environment variables and settings for the back-office application.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class AppConfig:
    """Application configuration settings."""

    # Storage
    DATABASE_URL: Optional[str] = None          # Primary key-value backend (PostgreSQL)
    LOCAL_STORE_PATH: str = 'autohandel_local.db'
    LOCAL_KEY_PREFIX: str = 'kv_'
    DB_POOL_MIN_CONN: int = 1
    DB_POOL_MAX_CONN: int = 5

    # Logging
    LOG_LEVEL: str = 'INFO'
    JSON_LOGS: bool = False

    # Flask
    SECRET_KEY: Optional[str] = None
    DEBUG: bool = False

    # Feeds
    RECENT_ACTIVITY_LIMIT: int = 20

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Load configuration from environment variables."""
        return cls(
            DATABASE_URL=os.environ.get('DATABASE_URL') or None,
            LOCAL_STORE_PATH=os.environ.get(
                'AUTOHANDEL_LOCAL_STORE', 'autohandel_local.db'
            ),
            DB_POOL_MIN_CONN=int(os.environ.get('DB_POOL_MIN_CONN', '1')),
            DB_POOL_MAX_CONN=int(os.environ.get('DB_POOL_MAX_CONN', '5')),
            LOG_LEVEL=os.environ.get('LOG_LEVEL', 'INFO'),
            JSON_LOGS=os.environ.get('PRODUCTION', '').lower() == 'true',
            SECRET_KEY=os.environ.get('FLASK_SECRET_KEY', os.environ.get('SECRET_KEY')),
            DEBUG=os.environ.get('FLASK_DEBUG', 'false').lower() == 'true',
        )

    @property
    def has_primary_backend(self) -> bool:
        return bool(self.DATABASE_URL)


# Singleton config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the application configuration singleton."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config():
    """Drop the cached configuration so the next call re-reads the environment."""
    global _config
    _config = None
