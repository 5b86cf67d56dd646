"""
Validation rules for ship requests.

Create requests are validated all-or-nothing: every required field must
be present and within bounds.  Update requests only check the fields the
client actually supplied, but each of those must satisfy the same bound
as on create.  Field values are keyed by their Python attribute names
(``ship_type``, ``prod_date`` ...); reasons use the wire names so they
can be returned to clients unchanged.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from ..core.errors import ShipValidationError
from ..schemas.ship import ShipType
from .rating import MAX_PRODUCTION_YEAR, MIN_PRODUCTION_YEAR, production_year

MAX_TEXT_LENGTH = 50
MIN_SPEED = 0.01
MAX_SPEED = 0.99
MIN_CREW_SIZE = 1
MAX_CREW_SIZE = 9999
# Ids are signed 64-bit integers in the store.
MAX_ID = 2 ** 63 - 1

REQUIRED_ON_CREATE = ("name", "planet", "ship_type", "prod_date", "speed", "crew_size")

WIRE_NAMES = {
    "name": "name",
    "planet": "planet",
    "ship_type": "shipType",
    "prod_date": "prodDate",
    "is_used": "isUsed",
    "speed": "speed",
    "crew_size": "crewSize",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation: valid, or rejected with a reason."""

    reason: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.reason is None

    def raise_for_error(self) -> None:
        if self.reason is not None:
            raise ShipValidationError(self.reason)


VALID = ValidationResult()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_text(value: Any) -> bool:
    return isinstance(value, str) and 0 < len(value) <= MAX_TEXT_LENGTH


def is_valid_ship_type(value: Any) -> bool:
    return isinstance(value, ShipType)


def is_valid_prod_date(value: Any) -> bool:
    if not _is_integer(value) or value < 0:
        return False
    try:
        year = production_year(value)
    except ValueError:
        return False
    return MIN_PRODUCTION_YEAR <= year <= MAX_PRODUCTION_YEAR


def is_valid_is_used(value: Any) -> bool:
    return isinstance(value, bool)


def is_valid_speed(value: Any) -> bool:
    return _is_number(value) and MIN_SPEED <= value <= MAX_SPEED


def is_valid_crew_size(value: Any) -> bool:
    return _is_integer(value) and MIN_CREW_SIZE <= value <= MAX_CREW_SIZE


FIELD_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "name": is_valid_text,
    "planet": is_valid_text,
    "ship_type": is_valid_ship_type,
    "prod_date": is_valid_prod_date,
    "is_used": is_valid_is_used,
    "speed": is_valid_speed,
    "crew_size": is_valid_crew_size,
}


def is_valid_field(field: str, value: Any) -> bool:
    """Check a single field against its bound.  Unknown fields are invalid."""
    check = FIELD_CHECKS.get(field)
    return check is not None and check(value)


def validate_id(ship_id: Any) -> ValidationResult:
    if not _is_integer(ship_id) or not 0 < ship_id <= MAX_ID:
        return ValidationResult(f"Invalid id: {ship_id}")
    return VALID


def validate_create(fields: Mapping[str, Any]) -> ValidationResult:
    """Validate a create request.

    All of name, planet, shipType, prodDate, speed and crewSize are
    required.  ``isUsed`` may be absent or null, in which case the ship
    is treated as new.
    """
    for field in REQUIRED_ON_CREATE:
        if fields.get(field) is None:
            return ValidationResult(f"{WIRE_NAMES[field]} is required")
    for field, value in fields.items():
        if field == "is_used" and value is None:
            continue
        if field in FIELD_CHECKS and not FIELD_CHECKS[field](value):
            return ValidationResult(f"{WIRE_NAMES[field]} is out of range: {value!r}")
    return VALID


def validate_update(ship_id: Any, fields: Mapping[str, Any]) -> ValidationResult:
    """Validate an update request.

    ``fields`` must only contain the fields the client supplied.  Each
    of them, including ones supplied as null or empty, must pass its
    bound check.
    """
    result = validate_id(ship_id)
    if not result.valid:
        return result
    for field, value in fields.items():
        if field not in FIELD_CHECKS:
            continue
        if value is None:
            return ValidationResult(f"{WIRE_NAMES[field]} must not be null")
        if not FIELD_CHECKS[field](value):
            return ValidationResult(f"{WIRE_NAMES[field]} is out of range: {value!r}")
    return VALID
