"""
Top-level router for version 1 of the API.

Aggregates the domain routers.  The ships router declares its own
``/ships`` paths so that the count route can sit next to the item
routes without a clash.
"""

from fastapi import APIRouter

from .endpoints import ships

router = APIRouter()

router.include_router(ships.router, tags=["ships"])
