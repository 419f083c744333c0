"""
Ship service module.

This module provides the ShipService class and the pure validation, rating and
query helpers it is built from.
"""

from hangar.services.ship.service import ShipService, ship_service
from hangar.services.ship.validation import InvalidShipError

__all__ = ["ShipService", "ship_service", "InvalidShipError"]
