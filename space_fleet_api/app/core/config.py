"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration at all; override them via
environment variables in a real deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Space Fleet API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Level for the ship service and store loggers, e.g. "DEBUG" to log
    # every list query.  Empty means they inherit the root level.
    service_log_level: str = os.getenv("SERVICE_LOG_LEVEL", "")

    # Path to the SQLite database file.  A relative path is resolved
    # relative to the ``space_fleet_api`` package directory by the ``db``
    # module.
    database_url: str = os.getenv("DATABASE_URL", "space_fleet.db")

    # Page size used by the ship list when the client does not pass one.
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "3"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
