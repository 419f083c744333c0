import logging
import re
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status
from hangar.models import (
    CreateShipRequest,
    ErrorResponse,
    ShipFilter,
    ShipOrder,
    ShipResponse,
    ShipType,
    UpdateShipRequest,
)
from hangar.services.ship import ship_service, InvalidShipError
from hangar.services.ship.validation import parse_prod_date

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rest")

SHIP_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
# Largest id an SQL BIGINT can hold
MAX_SHIP_ID = 2**63 - 1

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


def parse_ship_id(ship_id: str) -> int:
    """Parse a path identifier, rejecting anything that is not a positive integer"""
    value = int(ship_id) if SHIP_ID_PATTERN.fullmatch(ship_id) else None
    if value is None or not 1 <= value <= MAX_SHIP_ID:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid ship id: {ship_id!r}",
        )
    return value


def ship_filter_params(
    name: Optional[str] = Query(None),
    planet: Optional[str] = Query(None),
    ship_type: Optional[ShipType] = Query(None, alias="shipType"),
    after: Optional[int] = Query(None, description="Epoch milliseconds"),
    before: Optional[int] = Query(None, description="Epoch milliseconds"),
    is_used: Optional[bool] = Query(None, alias="isUsed"),
    min_speed: Optional[float] = Query(None, alias="minSpeed"),
    max_speed: Optional[float] = Query(None, alias="maxSpeed"),
    min_crew_size: Optional[int] = Query(None, alias="minCrewSize"),
    max_crew_size: Optional[int] = Query(None, alias="maxCrewSize"),
    min_rating: Optional[float] = Query(None, alias="minRating"),
    max_rating: Optional[float] = Query(None, alias="maxRating"),
) -> ShipFilter:
    """Collect the optional listing criteria from the query string"""
    try:
        after_date = parse_prod_date(after)
        before_date = parse_prod_date(before)
    except InvalidShipError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return ShipFilter(
        name=name,
        planet=planet,
        ship_type=ship_type,
        after=after_date,
        before=before_date,
        is_used=is_used,
        min_speed=min_speed,
        max_speed=max_speed,
        min_crew_size=min_crew_size,
        max_crew_size=max_crew_size,
        min_rating=min_rating,
        max_rating=max_rating,
    )


@router.get("/ships", response_model=List[ShipResponse], responses=ERROR_RESPONSES)
async def list_ships(
    criteria: ShipFilter = Depends(ship_filter_params),
    order: Optional[ShipOrder] = Query(None),
    page_number: Optional[int] = Query(None, alias="pageNumber"),
    page_size: Optional[int] = Query(None, alias="pageSize"),
):
    """List ships matching the filters, sorted and paged"""
    try:
        ships = await ship_service.list_ships(criteria, order, page_number, page_size)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return [ShipResponse.model_validate(ship) for ship in ships]


@router.get("/ships/count", response_model=int, responses=ERROR_RESPONSES)
async def count_ships(criteria: ShipFilter = Depends(ship_filter_params)):
    """Count ships matching the filters"""
    return await ship_service.count_ships(criteria)


@router.post("/ships", response_model=ShipResponse, responses=ERROR_RESPONSES)
async def create_ship(request: CreateShipRequest = Body(...)):
    """Create a new ship"""
    try:
        ship = await ship_service.create_ship(request)
    except InvalidShipError as e:
        logger.info(f"Rejected ship creation: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return ShipResponse.model_validate(ship)


@router.get("/ships/{ship_id}", response_model=ShipResponse, responses=ERROR_RESPONSES)
async def get_ship(ship_id: str):
    """Get ship information"""
    ship = await ship_service.get_ship(parse_ship_id(ship_id))
    if not ship:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Ship not found"
        )

    return ShipResponse.model_validate(ship)


@router.post("/ships/{ship_id}", response_model=ShipResponse, responses=ERROR_RESPONSES)
async def update_ship(ship_id: str, request: UpdateShipRequest = Body(...)):
    """Update the fields present in the body"""
    parsed_id = parse_ship_id(ship_id)
    try:
        ship = await ship_service.update_ship(parsed_id, request)
    except InvalidShipError as e:
        logger.info(f"Rejected update of ship {parsed_id}: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if not ship:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Ship not found"
        )

    return ShipResponse.model_validate(ship)


@router.delete("/ships/{ship_id}", status_code=status.HTTP_200_OK, responses=ERROR_RESPONSES)
async def delete_ship(ship_id: str):
    """Delete a ship"""
    success = await ship_service.delete_ship(parse_ship_id(ship_id))
    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Ship not found"
        )

    return Response(status_code=status.HTTP_200_OK)
