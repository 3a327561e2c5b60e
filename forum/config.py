# =============================================================================
# File: forum/config.py
# Purpose: Read settings from the environment (.env supported) for create_app.
# =============================================================================
from __future__ import annotations

import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv

load_dotenv()  # Loads .env if present (local dev)


class ConfigError(RuntimeError):
    """Raised when the app cannot start with the given settings."""


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Defaults; the environment is read on each from_env() call."""

    DATABASE_URL = "sqlite:///forum.db"
    HOST = "0.0.0.0"
    PORT = 5000
    LOG_LEVEL = "INFO"
    STATIC_URL_PATH = "/static"

    @classmethod
    def from_env(cls) -> Dict[str, Any]:
        return {
            # Session cookies are signed with it; there is no usable default.
            "SECRET_KEY": os.getenv("SECRET_KEY", ""),
            "DATABASE_URL": os.getenv("DATABASE_URL", cls.DATABASE_URL),
            "HOST": os.getenv("HOST", cls.HOST),
            "PORT": int(os.getenv("PORT", cls.PORT)),
            "LOG_LEVEL": os.getenv("LOG_LEVEL", cls.LOG_LEVEL),
            "STATIC_URL_PATH": os.getenv("STATIC_URL_PATH", cls.STATIC_URL_PATH),
            "SEED_BOARDS": _env_bool("SEED_BOARDS", True),
        }


def load_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge environment settings with explicit overrides.

    Raises:
        ConfigError: if no SECRET_KEY ends up configured.
    """
    settings = Config.from_env()
    if overrides:
        settings.update(overrides)

    if not settings.get("SECRET_KEY"):
        raise ConfigError("SECRET_KEY is not set; session cookies cannot be signed")

    return settings
