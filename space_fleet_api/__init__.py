"""
Top-level package for the Space Fleet API.

Makes ``space_fleet_api`` importable so that modules within ``app``
can be referenced by fully qualified names like
``space_fleet_api.app.main``.  All functionality lives in submodules
under ``app``.
"""

__all__ = []
