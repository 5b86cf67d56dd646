"""
Ship endpoints.

These routes provide list, count and CRUD operations for ships.  Every
handler validates its input before calling ``ShipService`` and maps the
service's domain exceptions onto status codes: 400 for invalid input
and 404 for missing ships.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from space_fleet_api.app.core.db import get_ship_store
from space_fleet_api.app.core.errors import ShipNotFoundError
from space_fleet_api.app.schemas.ship import ShipInfo, ShipOrder, ShipRead, ShipType
from space_fleet_api.app.services.ship_query import ShipFilter
from space_fleet_api.app.services.ship_service import ShipService
from space_fleet_api.app.services.ship_store import ShipStore
from space_fleet_api.app.services.validation import validate_create, validate_id, validate_update

router = APIRouter()

# Bounds of the Long and Integer query parameters.
MIN_MILLIS, MAX_MILLIS = -(2 ** 63), 2 ** 63 - 1
MIN_INT, MAX_INT = -(2 ** 31), 2 ** 31 - 1


def get_ship_service(store: ShipStore = Depends(get_ship_store)) -> ShipService:
    return ShipService(store)


def ship_filter(
    name: Optional[str] = Query(None, description="Substring of the ship name"),
    planet: Optional[str] = Query(None, description="Substring of the planet"),
    ship_type: Optional[ShipType] = Query(None, alias="shipType"),
    after: Optional[int] = Query(
        None, ge=MIN_MILLIS, le=MAX_MILLIS, description="Earliest production date, epoch millis"),
    before: Optional[int] = Query(
        None, ge=MIN_MILLIS, le=MAX_MILLIS, description="Latest production date, epoch millis"),
    is_used: Optional[bool] = Query(None, alias="isUsed"),
    min_speed: Optional[float] = Query(None, alias="minSpeed"),
    max_speed: Optional[float] = Query(None, alias="maxSpeed"),
    min_crew_size: Optional[int] = Query(None, alias="minCrewSize", ge=MIN_INT, le=MAX_INT),
    max_crew_size: Optional[int] = Query(None, alias="maxCrewSize", ge=MIN_INT, le=MAX_INT),
    min_rating: Optional[float] = Query(None, alias="minRating"),
    max_rating: Optional[float] = Query(None, alias="maxRating"),
) -> ShipFilter:
    """Collect the optional list criteria shared by the list and count routes."""
    return ShipFilter(
        name=name,
        planet=planet,
        ship_type=ship_type,
        after=after,
        before=before,
        is_used=is_used,
        min_speed=min_speed,
        max_speed=max_speed,
        min_crew_size=min_crew_size,
        max_crew_size=max_crew_size,
        min_rating=min_rating,
        max_rating=max_rating,
    )


def _checked_id(ship_id: int) -> int:
    result = validate_id(ship_id)
    if not result.valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.reason)
    return ship_id


@router.get("/ships", response_model=List[ShipRead])
async def list_ships(
    filters: ShipFilter = Depends(ship_filter),
    order: Optional[ShipOrder] = Query(None),
    page_number: int = Query(0, alias="pageNumber", ge=0, le=MAX_INT),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1, le=MAX_INT),
    service: ShipService = Depends(get_ship_service),
) -> List[ShipRead]:
    """Return one page of ships.

    - **name**, **planet**: substring filters.
    - **shipType**, **isUsed**: exact filters.
    - **after**, **before**: production date range (epoch millis).
    - **minSpeed**/**maxSpeed**, **minCrewSize**/**maxCrewSize**,
      **minRating**/**maxRating**: inclusive ranges.
    - **order**: `ID`, `SPEED`, `DATE` or `RATING`, ascending; `ID` by default.
    - **pageNumber**, **pageSize**: zero-based page, 3 ships per page by default.
    """
    ships = await service.list_ships(
        filters,
        order=order or ShipOrder.ID,
        page_number=page_number,
        page_size=page_size,
    )
    return [ShipRead.model_validate(ship) for ship in ships]


@router.get("/ships/count", response_model=int)
async def count_ships(
    filters: ShipFilter = Depends(ship_filter),
    service: ShipService = Depends(get_ship_service),
) -> int:
    """Count ships matching the same filters as the list route."""
    return await service.count_ships(filters)


@router.post("/ships", response_model=ShipRead)
async def create_ship(
    info: ShipInfo,
    service: ShipService = Depends(get_ship_service),
) -> ShipRead:
    """Create a ship.

    name, planet, shipType, prodDate, speed and crewSize are required;
    isUsed defaults to false.  The rating is computed by the server and
    any rating in the body is ignored.
    """
    fields = info.present_fields()
    result = validate_create(fields)
    if not result.valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.reason)
    ship = await service.create_ship(fields)
    return ShipRead.model_validate(ship)


@router.get("/ships/{ship_id}", response_model=ShipRead)
async def get_ship(
    ship_id: int,
    service: ShipService = Depends(get_ship_service),
) -> ShipRead:
    """Retrieve a single ship by its ID."""
    _checked_id(ship_id)
    try:
        ship = await service.get_ship(ship_id)
    except ShipNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ShipRead.model_validate(ship)


@router.post("/ships/{ship_id}", response_model=ShipRead)
async def update_ship(
    ship_id: int,
    info: ShipInfo,
    service: ShipService = Depends(get_ship_service),
) -> ShipRead:
    """Partially update a ship.

    Only fields present in the body are considered.  A present field
    that is empty, null or out of range rejects the whole request.
    """
    fields = info.present_fields()
    result = validate_update(ship_id, fields)
    if not result.valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.reason)
    try:
        ship = await service.update_ship(ship_id, fields)
    except ShipNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ShipRead.model_validate(ship)


@router.delete("/ships/{ship_id}")
async def delete_ship(
    ship_id: int,
    service: ShipService = Depends(get_ship_service),
) -> Response:
    """Delete a ship.  Responds with an empty 200 on success."""
    _checked_id(ship_id)
    try:
        await service.delete_ship(ship_id)
    except ShipNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_200_OK)
