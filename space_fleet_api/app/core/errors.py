"""
Domain exceptions raised by the service layer.

Endpoints translate these into HTTP responses: validation errors become
400, missing ships become 404 and store failures are logged and
answered with 500 by the application-wide handler in ``main``.
"""


class ShipValidationError(ValueError):
    """A ship field or identifier violates its constraints."""


class ShipNotFoundError(LookupError):
    """No ship exists with the requested identifier."""

    def __init__(self, ship_id: int) -> None:
        super().__init__(f"Ship {ship_id} not found")
        self.ship_id = ship_id


class StoreError(RuntimeError):
    """The record store failed to read or write."""
