"""
Translation of ship list filters into store queries.

``ShipFilter`` holds the optional criteria a client may pass to the list
and count routes.  ``ShipQuery.from_filter`` narrows a predicate one
clause at a time, adding a clause only for criteria that were supplied,
so an empty filter matches every ship.  Values never end up in the SQL
text; they travel as parameters next to it.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from ..schemas.ship import ShipType

LIKE_ESCAPE = "\\"


@dataclass
class ShipFilter:
    """Optional list criteria.  ``None`` means "no constraint"."""

    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    # Production date bounds, epoch milliseconds, inclusive.
    after: Optional[int] = None
    before: Optional[int] = None
    is_used: Optional[bool] = None
    min_speed: Optional[float] = None
    max_speed: Optional[float] = None
    min_crew_size: Optional[int] = None
    max_crew_size: Optional[int] = None
    min_rating: Optional[float] = None
    max_rating: Optional[float] = None


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so ``text`` matches literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class ShipQuery:
    """A conjunction of SQL predicates over the ``ship`` table."""

    def __init__(self) -> None:
        self.clauses: List[str] = []
        self.params: List[Any] = []

    def where(self, clause: str, *params: Any) -> "ShipQuery":
        self.clauses.append(clause)
        self.params.extend(params)
        return self

    def contains(self, column: str, text: str) -> "ShipQuery":
        return self.where(f"{column} LIKE ? ESCAPE '{LIKE_ESCAPE}'", f"%{escape_like(text)}%")

    def equals(self, column: str, value: Any) -> "ShipQuery":
        return self.where(f"{column} = ?", value)

    def at_least(self, column: str, value: Any) -> "ShipQuery":
        return self.where(f"{column} >= ?", value)

    def at_most(self, column: str, value: Any) -> "ShipQuery":
        return self.where(f"{column} <= ?", value)

    @property
    def where_sql(self) -> str:
        """The ``WHERE`` part of a statement, or an empty string."""
        if not self.clauses:
            return ""
        return " WHERE " + " AND ".join(self.clauses)

    @classmethod
    def from_filter(cls, criteria: ShipFilter) -> "ShipQuery":
        query = cls()
        if criteria.name:
            query.contains("name", criteria.name)
        if criteria.planet:
            query.contains("planet", criteria.planet)
        if criteria.ship_type is not None:
            query.equals("ship_type", criteria.ship_type.value)
        if criteria.after is not None:
            query.at_least("prod_date", criteria.after)
        if criteria.before is not None:
            query.at_most("prod_date", criteria.before)
        if criteria.is_used is not None:
            query.equals("is_used", 1 if criteria.is_used else 0)
        if criteria.min_speed is not None:
            query.at_least("speed", criteria.min_speed)
        if criteria.max_speed is not None:
            query.at_most("speed", criteria.max_speed)
        if criteria.min_crew_size is not None:
            query.at_least("crew_size", criteria.min_crew_size)
        if criteria.max_crew_size is not None:
            query.at_most("crew_size", criteria.max_crew_size)
        if criteria.min_rating is not None:
            query.at_least("rating", criteria.min_rating)
        if criteria.max_rating is not None:
            query.at_most("rating", criteria.max_rating)
        return query
