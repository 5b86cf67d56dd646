"""
Logging configuration for the Space Fleet API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger once per process.  Per-logger levels are
applied on every call, so the ship service and store can log more or
less than the rest of the application, e.g. ``DEBUG`` for the list
queries built by ``ShipService`` while uvicorn stays at ``INFO``.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional

# Loggers whose level follows ``settings.service_log_level``.
SERVICE_LOGGERS = (
    "space_fleet_api.app.services.ship_service",
    "space_fleet_api.app.services.ship_store",
)


def service_log_levels(level: str) -> dict:
    """Map every ship service logger to ``level``; empty when ``level`` is unset."""
    if not level:
        return {}
    return {name: level for name in SERVICE_LOGGERS}


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    levels: Optional[Mapping[str, str]] = None,
) -> None:
    """Configure logging.

    Parameters
    ----------
    level : str
        Root logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    levels : Optional[Mapping[str, str]]
        Level names for individual loggers, keyed by logger name.
        Unknown level names fall back to ``INFO``.
    """
    for name, logger_level in (levels or {}).items():
        logging.getLogger(name).setLevel(getattr(logging, logger_level.upper(), logging.INFO))

    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by uvicorn or when ``create_app`` is
        # called repeatedly in tests.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
