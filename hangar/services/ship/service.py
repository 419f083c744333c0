"""
Ship service module.

This module provides the ShipService class, which runs listing requests through
the filter, sort and page steps and runs create/update requests through
validation and rating before they reach the record store.
"""

import logging
from typing import List, Optional

from hangar.config import settings
from hangar.database import db_service
from hangar.models import (
    Ship,
    ShipFilter,
    ShipOrder,
    CreateShipRequest,
    UpdateShipRequest,
)
from hangar.services.ship.query import filter_ships, sort_ships, get_page
from hangar.services.ship.rating import compute_rating
from hangar.services.ship.validation import (
    parse_prod_date,
    validate_new_ship,
    validate_ship_patch,
)

logger = logging.getLogger(__name__)


class ShipService:
    """Service for ship records."""

    async def list_ships(
        self,
        criteria: Optional[ShipFilter] = None,
        order: Optional[ShipOrder] = None,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> List[Ship]:
        """Filter, sort and page the stored ships.

        Raises:
            ValueError: page_number is negative or page_size is not positive
        """
        if page_size is None:
            page_size = settings.default_page_size

        ships = filter_ships(await db_service.list_all_ships(), criteria)
        return get_page(sort_ships(ships, order), page_number, page_size)

    async def count_ships(self, criteria: Optional[ShipFilter] = None) -> int:
        """Count stored ships matching the criteria, ignoring sort and paging"""
        return len(filter_ships(await db_service.list_all_ships(), criteria))

    async def get_ship(self, ship_id: int) -> Optional[Ship]:
        return await db_service.get_ship(ship_id)

    async def create_ship(self, request: CreateShipRequest) -> Ship:
        """Validate, rate and store a new ship.

        Raises:
            InvalidShipError: a required field is missing or out of range
        """
        validate_new_ship(request)

        prod_date = parse_prod_date(request.prod_date)
        is_used = bool(request.is_used)
        ship = Ship(
            name=request.name,
            planet=request.planet,
            ship_type=request.ship_type,
            prod_date=prod_date,
            is_used=is_used,
            speed=request.speed,
            crew_size=request.crew_size,
            rating=compute_rating(request.speed, is_used, prod_date),
        )
        ship = await db_service.create_ship(ship)
        logger.info(f"Created ship {ship.id} ({ship.name!r}, rating={ship.rating})")
        return ship

    async def update_ship(self, ship_id: int, request: UpdateShipRequest) -> Optional[Ship]:
        """Apply the fields present in the request to an existing ship.

        The whole request is validated before the ship is touched, so an invalid
        field leaves the stored record unchanged. Returns None if the ship does
        not exist.

        Raises:
            InvalidShipError: a supplied field is out of range
        """
        ship = await db_service.get_ship(ship_id)
        if not ship:
            return None

        validate_ship_patch(request)

        if request.name is not None:
            ship.name = request.name
        if request.planet is not None:
            ship.planet = request.planet
        if request.ship_type is not None:
            ship.ship_type = request.ship_type
        if request.prod_date is not None:
            ship.prod_date = parse_prod_date(request.prod_date)
        if request.is_used is not None:
            ship.is_used = request.is_used
        if request.speed is not None:
            ship.speed = request.speed
        if request.crew_size is not None:
            ship.crew_size = request.crew_size

        if (
            request.speed is not None
            or request.is_used is not None
            or request.prod_date is not None
        ):
            ship.rating = compute_rating(ship.speed, ship.is_used, ship.prod_date)

        ship = await db_service.update_ship(ship)
        logger.info(f"Updated ship {ship_id}")
        return ship

    async def delete_ship(self, ship_id: int) -> bool:
        """Delete a ship; False if it does not exist"""
        deleted = await db_service.delete_ship(ship_id)
        if deleted:
            logger.info(f"Deleted ship {ship_id}")
        return deleted


ship_service = ShipService()
