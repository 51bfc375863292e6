# /club_admin/core/config.py

"""
Runtime configuration for the club administration backend.

All settings come from environment variables. A local `.env` file is loaded
first so development setups do not need to export anything by hand.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_SESSION_SECRET = "cretanclubsecret"
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024


def _env_flag(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(value: Optional[str], default: List[str]) -> List[str]:
    if value is None:
        return list(default)
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or list(default)


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    session_secret: str = DEFAULT_SESSION_SECRET
    session_max_age: int = 60 * 60 * 24
    secure_cookies: bool = False
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES

    seed_admin_username: str = "admin"
    seed_admin_password: str = "password"
    seed_admin_name: str = "Διαχειριστής"
    seed_sample_data: bool = True

    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build a :class:`Settings` instance from the process environment."""
    load_dotenv()

    return Settings(
        session_secret=os.getenv("SESSION_SECRET", DEFAULT_SESSION_SECRET),
        session_max_age=int(os.getenv("SESSION_MAX_AGE", str(60 * 60 * 24))),
        secure_cookies=os.getenv("APP_ENV", "development").strip().lower() == "production",
        cors_origins=_env_list(os.getenv("CORS_ORIGINS"), ["*"]),
        max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES))),
        seed_admin_username=os.getenv("SEED_ADMIN_USERNAME", "admin"),
        seed_admin_password=os.getenv("SEED_ADMIN_PASSWORD", "password"),
        seed_admin_name=os.getenv("SEED_ADMIN_NAME", "Διαχειριστής"),
        seed_sample_data=_env_flag(os.getenv("SEED_SAMPLE_DATA"), True),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


__all__ = ["Settings", "load_settings"]
