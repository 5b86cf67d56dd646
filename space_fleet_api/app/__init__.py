"""
Application package initializer.

The application is split into ``core`` (configuration, logging,
database and errors), ``schemas`` (API payloads), ``models`` (the ship
entity), ``services`` (rating, validation, query translation, storage
and business logic) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
