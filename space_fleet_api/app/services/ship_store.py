"""
SQLite-backed record store for ships.

The store knows nothing about validation or ratings: it loads, searches,
counts, saves and deletes ``Ship`` rows.  Any ``sqlite3.Error`` is
logged and re-raised as ``StoreError`` so callers only deal with domain
exceptions.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional

from ..core.errors import StoreError
from ..models.ship import Ship
from ..schemas.ship import ShipOrder, ShipType
from .ship_query import ShipQuery

logger = logging.getLogger(__name__)

COLUMNS = "id, name, planet, ship_type, prod_date, is_used, speed, crew_size, rating"


def _row_to_ship(row: sqlite3.Row) -> Ship:
    return Ship(
        id=row["id"],
        name=row["name"],
        planet=row["planet"],
        ship_type=ShipType(row["ship_type"]),
        prod_date=row["prod_date"],
        is_used=bool(row["is_used"]),
        speed=row["speed"],
        crew_size=row["crew_size"],
        rating=row["rating"],
    )


class ShipStore:
    """Persistence for ships over a single SQLite connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    @contextmanager
    def _translate_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except sqlite3.Error as exc:
            logger.error("Ship store failed to %s: %s", action, exc)
            raise StoreError(f"Failed to {action}: {exc}") from exc

    def find_by_id(self, ship_id: int) -> Optional[Ship]:
        with self._translate_errors("load ship"):
            row = self.conn.execute(
                f"SELECT {COLUMNS} FROM ship WHERE id = ?", (ship_id,)
            ).fetchone()
        return _row_to_ship(row) if row else None

    def search(self, query: ShipQuery, order: ShipOrder, offset: int, limit: int) -> List[Ship]:
        """Return one page of ships matching ``query`` sorted ascending by ``order``."""
        sql = f"SELECT {COLUMNS} FROM ship{query.where_sql} ORDER BY {order.column} ASC"
        if order is not ShipOrder.ID:
            # Keep pages stable when several ships share the sort value.
            sql += ", id ASC"
        sql += " LIMIT ? OFFSET ?"
        with self._translate_errors("search ships"):
            rows = self.conn.execute(sql, (*query.params, limit, offset)).fetchall()
        return [_row_to_ship(row) for row in rows]

    def count(self, query: ShipQuery) -> int:
        with self._translate_errors("count ships"):
            row = self.conn.execute(
                f"SELECT COUNT(*) AS total FROM ship{query.where_sql}", tuple(query.params)
            ).fetchone()
        return row["total"]

    def save(self, ship: Ship) -> Ship:
        """Insert a new ship or overwrite an existing one, returning the stored copy."""
        values = (
            ship.name,
            ship.planet,
            ship.ship_type.value,
            ship.prod_date,
            int(ship.is_used),
            ship.speed,
            ship.crew_size,
            ship.rating,
        )
        with self._translate_errors("save ship"):
            if ship.id is None:
                cursor = self.conn.execute(
                    """
                    INSERT INTO ship (name, planet, ship_type, prod_date, is_used, speed, crew_size, rating)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    values,
                )
                ship_id = cursor.lastrowid
            else:
                self.conn.execute(
                    """
                    UPDATE ship
                    SET name = ?, planet = ?, ship_type = ?, prod_date = ?, is_used = ?,
                        speed = ?, crew_size = ?, rating = ?
                    WHERE id = ?
                    """,
                    (*values, ship.id),
                )
                ship_id = ship.id
            self.conn.commit()
        saved = ship.copy()
        saved.id = ship_id
        return saved

    def delete(self, ship: Ship) -> None:
        with self._translate_errors("delete ship"):
            self.conn.execute("DELETE FROM ship WHERE id = ?", (ship.id,))
            self.conn.commit()
