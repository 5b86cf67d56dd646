"""
Ship rating computation.

The rating grows with speed, halves for used ships and falls with the
age of the ship relative to the current year of the catalog, 3019:

    rating = 80 * speed * k / (3019 - year + 1)

where ``k`` is 0.5 for used ships and 1 otherwise.  Results are rounded
to two decimal places, ties rounding away from zero.
"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

MIN_PRODUCTION_YEAR = 2800
MAX_PRODUCTION_YEAR = 3019

_TWO_PLACES = Decimal("0.01")


def round_half_up(value: float, places: Decimal = _TWO_PLACES) -> float:
    """Round ``value`` to ``places`` using round-half-up.

    The float is converted through its shortest decimal representation,
    so ``0.125`` rounds to ``0.13`` and not to whatever its binary
    approximation would suggest.
    """
    return float(Decimal(repr(value)).quantize(places, rounding=ROUND_HALF_UP))


def production_year(prod_date: int) -> int:
    """Return the calendar year of an epoch-milliseconds timestamp.

    The year is taken in the local time zone of the server.  Raises
    ``ValueError`` for timestamps the platform cannot represent.
    """
    try:
        return datetime.fromtimestamp(prod_date / 1000).year
    except (OverflowError, OSError) as exc:
        raise ValueError(f"Unrepresentable production date: {prod_date}") from exc


def compute_rating(production_year: int, is_used: bool, speed: float) -> float:
    """Compute the rating of a ship produced in ``production_year``."""
    if not MIN_PRODUCTION_YEAR <= production_year <= MAX_PRODUCTION_YEAR:
        raise ValueError(
            f"Production year {production_year} outside "
            f"[{MIN_PRODUCTION_YEAR}, {MAX_PRODUCTION_YEAR}]"
        )
    usage_factor = 0.5 if is_used else 1.0
    rating = 80 * speed * usage_factor / (MAX_PRODUCTION_YEAR - production_year + 1)
    return round_half_up(rating)
