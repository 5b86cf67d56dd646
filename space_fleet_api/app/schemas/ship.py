"""
Pydantic models for ship data.

These schemas define the structure of ship data exchanged via the API.
Wire names are camelCase (``shipType``, ``prodDate``, ``isUsed``,
``crewSize``) while the Python attributes are snake_case; both are
accepted on input.  ``prodDate`` is always transmitted as epoch
milliseconds.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ShipType(str, Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class ShipOrder(str, Enum):
    """Sort keys accepted by the ship list."""

    ID = "ID"
    SPEED = "SPEED"
    DATE = "DATE"
    RATING = "RATING"

    @property
    def column(self) -> str:
        """Name of the ``ship`` table column this order sorts by."""
        return {
            "ID": "id",
            "SPEED": "speed",
            "DATE": "prod_date",
            "RATING": "rating",
        }[self.value]


class ShipInfo(BaseModel):
    """Request body for creating or updating a ship.

    Every field is optional at the schema level so that missing or
    out-of-range values are reported by the validation service with a
    400 response instead of a framework error.  For updates only the
    fields the client actually sent are considered; use
    :meth:`present_fields` to obtain them.
    """

    name: Optional[str] = Field(None, examples=["Liberty"])
    planet: Optional[str] = Field(None, examples=["Earth"])
    ship_type: Optional[ShipType] = Field(None, alias="shipType", examples=["TRANSPORT"])
    prod_date: Optional[int] = Field(None, alias="prodDate", examples=[33103209600000])
    is_used: Optional[bool] = Field(None, alias="isUsed", examples=[False])
    speed: Optional[float] = Field(None, examples=[0.5])
    crew_size: Optional[int] = Field(None, alias="crewSize", examples=[100])

    model_config = {
        "populate_by_name": True,
    }

    def present_fields(self) -> Dict[str, Any]:
        """Return the fields that were explicitly supplied, keyed by attribute name.

        A field sent as ``null`` or ``""`` is present; a field left out
        of the request body is not.
        """
        return {name: getattr(self, name) for name in self.model_fields_set}


class ShipRead(BaseModel):
    """Schema for reading a ship from the API."""

    id: int
    name: str
    planet: str
    ship_type: ShipType = Field(..., alias="shipType")
    prod_date: int = Field(..., alias="prodDate")
    is_used: bool = Field(..., alias="isUsed")
    speed: float
    crew_size: int = Field(..., alias="crewSize")
    rating: float

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }
