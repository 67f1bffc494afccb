"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults provided for all fields.  Values
are computed once when this module is imported, so environment
variables must be set before the first import (tests patch the
attributes of ``settings`` directly instead).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Customer API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional log file.  When empty only the console handler is used.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "customer.db")

    # Every route is mounted under this prefix, e.g. ``/api/customer/all``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))


settings = Settings()
