"""Ship entity as held by the service layer and the record store."""

from dataclasses import dataclass, replace
from typing import Optional

from ..schemas.ship import ShipType


@dataclass
class Ship:
    name: str
    planet: str
    ship_type: ShipType
    prod_date: int
    is_used: bool
    speed: float
    crew_size: int
    rating: float
    # Assigned by the store on first save.
    id: Optional[int] = None

    def copy(self) -> "Ship":
        return replace(self)
