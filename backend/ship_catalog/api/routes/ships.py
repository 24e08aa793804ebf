"""Ship Routes: REST endpoints for the ship catalog.

Invariants:
    - Query/body parsing only; filtering, validation and rating live in the service
    - Malformed ids, params and bodies surface as 400 (RequestValidationError handler)
    - Domain errors propagate to the global ShipCatalogError handler

Endpoints:
    GET    /rest/ships          filtered, sorted page of ships
    GET    /rest/ships/count    number of ships matching the same filters
    POST   /rest/ships          create
    GET    /rest/ships/{id}     read
    POST   /rest/ships/{id}     partial update
    DELETE /rest/ships/{id}     delete
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ship_catalog.config import Settings, get_settings
from ship_catalog.core.domain_types import (
    MAX_BIGINT, MAX_INT, MIN_INT, ShipOrder, ShipType,
)
from ship_catalog.core.ship_filters import ShipFilters
from ship_catalog.infrastructure.database import get_db
from ship_catalog.infrastructure.ship_store import SqlShipStore
from ship_catalog.schemas.ship import ShipPayload, ShipResponse
from ship_catalog.services.ship_service import ShipService

router = APIRouter(prefix="/rest/ships", tags=["ships"])

# ids above BIGINT cannot exist; reject them as malformed (400)
ShipIdParam = Annotated[int, Path(le=MAX_BIGINT)]


def get_ship_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ShipService:
    """One service per request, bound to the request's DB session."""
    return ShipService(SqlShipStore(db), settings.update_speed_check)


def ship_filters(
    name: str | None = None,
    planet: str | None = None,
    ship_type: ShipType | None = Query(None, alias="shipType"),
    after: int | None = None,
    before: int | None = None,
    is_used: bool | None = Query(None, alias="isUsed"),
    min_speed: float | None = Query(None, alias="minSpeed"),
    max_speed: float | None = Query(None, alias="maxSpeed"),
    min_crew_size: int | None = Query(
        None, alias="minCrewSize", ge=MIN_INT, le=MAX_INT,
    ),
    max_crew_size: int | None = Query(
        None, alias="maxCrewSize", ge=MIN_INT, le=MAX_INT,
    ),
    min_rating: float | None = Query(None, alias="minRating"),
    max_rating: float | None = Query(None, alias="maxRating"),
) -> ShipFilters:
    return ShipFilters(
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


@router.get("", response_model=list[ShipResponse])
async def list_ships(
    filters: ShipFilters = Depends(ship_filters),
    order: ShipOrder = ShipOrder.ID,
    page_number: int = Query(0, alias="pageNumber", le=MAX_BIGINT),
    page_size: int | None = Query(None, alias="pageSize", le=MAX_INT),
    service: ShipService = Depends(get_ship_service),
    settings: Settings = Depends(get_settings),
):
    """Page of ships matching every supplied filter."""
    if page_size is None:
        page_size = settings.default_page_size
    ships = await service.list_ships(filters, order, page_number, page_size)
    return [ShipResponse.from_ship(ship) for ship in ships]


@router.get("/count", response_model=int)
async def count_ships(
    filters: ShipFilters = Depends(ship_filters),
    service: ShipService = Depends(get_ship_service),
):
    """Total number of ships matching the filters."""
    return await service.count_ships(filters)


@router.post("", response_model=ShipResponse, status_code=status.HTTP_200_OK)
async def create_ship(
    body: ShipPayload, service: ShipService = Depends(get_ship_service),
):
    ship = await service.create_ship(body.to_draft())
    return ShipResponse.from_ship(ship)


@router.get("/{ship_id}", response_model=ShipResponse)
async def get_ship(
    ship_id: ShipIdParam, service: ShipService = Depends(get_ship_service),
):
    ship = await service.get_ship(ship_id)
    return ShipResponse.from_ship(ship)


@router.post("/{ship_id}", response_model=ShipResponse)
async def update_ship(
    ship_id: ShipIdParam,
    body: ShipPayload,
    service: ShipService = Depends(get_ship_service),
):
    """Partial update: only supplied fields change, rating is recomputed."""
    ship = await service.update_ship(ship_id, body.to_draft())
    return ShipResponse.from_ship(ship)


@router.delete("/{ship_id}", status_code=status.HTTP_200_OK)
async def delete_ship(
    ship_id: ShipIdParam, service: ShipService = Depends(get_ship_service),
):
    await service.delete_ship(ship_id)
