"""
Business logic for ships.

``ShipService`` sits between the HTTP routes and the record store.  It
turns list criteria into store queries, computes ratings for new ships,
applies partial updates and reports missing ships with
``ShipNotFoundError``.  Request validation is done by the caller with
the functions in ``services.validation`` before any method here is
invoked; the only exception is ``update_ship``, which re-checks every
supplied field on its own and skips the ones that fail.
"""

import logging
from typing import Any, List, Mapping, Optional

from ..core.config import settings
from ..core.errors import ShipNotFoundError, ShipValidationError
from ..models.ship import Ship
from ..schemas.ship import ShipOrder
from .rating import compute_rating, production_year
from .ship_query import ShipFilter, ShipQuery
from .ship_store import ShipStore
from .validation import FIELD_CHECKS, is_valid_field

logger = logging.getLogger(__name__)

# SQLite stores integers as signed 64-bit values.
STORE_MIN_INTEGER, STORE_MAX_INTEGER = -(2 ** 63), 2 ** 63 - 1

INTEGER_CRITERIA = {
    "after": "after",
    "before": "before",
    "min_crew_size": "minCrewSize",
    "max_crew_size": "maxCrewSize",
}


def _fits_store(value: int) -> bool:
    return STORE_MIN_INTEGER <= value <= STORE_MAX_INTEGER


def check_filter(filters: ShipFilter) -> None:
    """Reject integer criteria the store cannot represent."""
    for field, wire_name in INTEGER_CRITERIA.items():
        value = getattr(filters, field)
        if value is not None and not _fits_store(value):
            raise ShipValidationError(f"{wire_name} is out of range: {value}")


def rate(ship: Ship) -> float:
    return compute_rating(production_year(ship.prod_date), ship.is_used, ship.speed)


class ShipService:
    """Service for managing ships.

    Stateless apart from the store it wraps; create one per request.
    Concurrent updates of the same ship are last-write-wins.
    """

    def __init__(self, store: ShipStore) -> None:
        self.store = store

    async def list_ships(
        self,
        filters: Optional[ShipFilter] = None,
        order: ShipOrder = ShipOrder.ID,
        page_number: int = 0,
        page_size: Optional[int] = None,
    ) -> List[Ship]:
        """Return one page of ships matching ``filters``.

        - ``order``: sort key, always ascending; defaults to the id.
        - ``page_number``: zero-based page index.
        - ``page_size``: ships per page; defaults to
          ``settings.default_page_size``.
        """
        if page_size is None:
            page_size = settings.default_page_size
        if page_number < 0 or page_size < 1:
            raise ShipValidationError(
                f"Invalid page: pageNumber={page_number}, pageSize={page_size}"
            )
        if not (_fits_store(page_size) and _fits_store(page_number * page_size)):
            raise ShipValidationError(
                f"Page out of range: pageNumber={page_number}, pageSize={page_size}"
            )
        filters = filters or ShipFilter()
        check_filter(filters)
        query = ShipQuery.from_filter(filters)
        logger.debug(
            "Listing ships where %s order=%s page=%s size=%s",
            query.clauses, order.value, page_number, page_size,
        )
        return self.store.search(query, order, page_number * page_size, page_size)

    async def count_ships(self, filters: Optional[ShipFilter] = None) -> int:
        """Count ships matching ``filters``, ignoring order and pagination."""
        filters = filters or ShipFilter()
        check_filter(filters)
        return self.store.count(ShipQuery.from_filter(filters))

    async def create_ship(self, fields: Mapping[str, Any]) -> Ship:
        """Create a ship from already validated fields and return the stored record."""
        ship = Ship(
            name=fields["name"],
            planet=fields["planet"],
            ship_type=fields["ship_type"],
            prod_date=fields["prod_date"],
            is_used=bool(fields.get("is_used") or False),
            speed=fields["speed"],
            crew_size=fields["crew_size"],
            rating=0.0,
        )
        ship.rating = rate(ship)
        saved = self.store.save(ship)
        logger.info("Created ship %s '%s' with rating %s", saved.id, saved.name, saved.rating)
        return saved

    async def get_ship(self, ship_id: int) -> Ship:
        ship = self.store.find_by_id(ship_id)
        if ship is None:
            raise ShipNotFoundError(ship_id)
        return ship

    async def update_ship(self, ship_id: int, patch: Mapping[str, Any]) -> Ship:
        """Apply a partial update to a ship.

        ``patch`` holds only the fields the client supplied.  Each one
        that passes its own bound check overwrites the stored value;
        the rest are skipped.  When anything changed, the rating is
        recomputed and the ship saved.  Otherwise the ship is returned
        as loaded, without a write.
        """
        ship = await self.get_ship(ship_id)
        changed = []
        for field, value in patch.items():
            if field not in FIELD_CHECKS:
                continue
            if not is_valid_field(field, value):
                logger.info("Skipping invalid %s=%r in update of ship %s", field, value, ship_id)
                continue
            setattr(ship, field, value)
            changed.append(field)
        if not changed:
            return ship
        ship.rating = rate(ship)
        saved = self.store.save(ship)
        logger.info("Updated ship %s fields %s, rating %s", ship_id, changed, saved.rating)
        return saved

    async def delete_ship(self, ship_id: int) -> Ship:
        """Delete a ship and return it as it was before deletion."""
        ship = await self.get_ship(ship_id)
        self.store.delete(ship)
        logger.info("Deleted ship %s '%s'", ship_id, ship.name)
        return ship
