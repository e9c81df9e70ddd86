"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with the sample data and a demo administrator out of
the box.  In a production deployment you should at least override
``SECRET_KEY`` and ``ADMIN_PASSWORD_HASH``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Dating Admin API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    log_json: bool = _env_flag("LOG_JSON", "false")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Seeded administrator.  ``ADMIN_PASSWORD_HASH`` takes precedence
    # over ``ADMIN_PASSWORD``; produce one with ``hash_admin_password.py``.
    admin_name: str = os.getenv("ADMIN_NAME", "John Admin")
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@loveadmin.com")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")
    admin_password_hash: str = os.getenv("ADMIN_PASSWORD_HASH", "")

    # When false the store starts empty apart from the administrator.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")

    # IANA zone used to decide which calendar day counts as "today" for
    # the same-day message statistic.  Message dates are stored as
    # ``YYYY-MM-DD`` strings and compared verbatim.
    stats_timezone: str = os.getenv("STATS_TIMEZONE", "UTC")

    # Requests carrying a known key in this header are written to the
    # API call log.
    api_key_header: str = os.getenv("API_KEY_HEADER", "X-API-Key")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
