"""
Field validation for ship records.

The ``is_*_valid`` checks are pure predicates. ``validate_new_ship`` and
``validate_ship_patch`` run them in a fixed field order and raise
``InvalidShipError`` for the first failing field, before anything is written.
"""

from datetime import datetime
from typing import Any, Optional

from hangar.models import ShipPayload
from hangar.utils import from_epoch_millis, year_of

MAX_STRING_LENGTH = 50

# Production year bounds, both exclusive
MIN_PROD_YEAR = 2800
MAX_PROD_YEAR = 3019

MIN_SPEED = 0.01
MAX_SPEED = 0.99

MIN_CREW_SIZE = 1
MAX_CREW_SIZE = 9999


class InvalidShipError(ValueError):
    """A ship field is missing or outside its allowed range"""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"Invalid value for '{field}'")


def is_string_valid(value: Optional[str]) -> bool:
    return value is not None and 0 < len(value) <= MAX_STRING_LENGTH


def is_prod_date_valid(prod_date: Optional[datetime]) -> bool:
    return prod_date is not None and MIN_PROD_YEAR < year_of(prod_date) < MAX_PROD_YEAR


def is_speed_valid(speed: Optional[float]) -> bool:
    return speed is not None and MIN_SPEED <= speed <= MAX_SPEED


def is_crew_size_valid(crew_size: Optional[int]) -> bool:
    return crew_size is not None and MIN_CREW_SIZE <= crew_size <= MAX_CREW_SIZE


def parse_prod_date(millis: Optional[int]) -> Optional[datetime]:
    """Convert the epoch-millisecond wire value, rejecting values no datetime can hold"""
    if millis is None:
        return None
    try:
        return from_epoch_millis(millis)
    except (OverflowError, OSError, ValueError):
        raise InvalidShipError("prodDate", f"prodDate {millis} is out of range")


def is_ship_valid(payload: Optional[ShipPayload]) -> bool:
    """Whole-record check used on creation"""
    try:
        validate_new_ship(payload)
    except InvalidShipError:
        return False
    return True


def _check(field: str, valid: bool, value: Any):
    if not valid:
        raise InvalidShipError(field, f"Invalid value for '{field}': {value!r}")


def validate_new_ship(payload: Optional[ShipPayload]):
    """Require every mandatory field to be present and within range"""
    if payload is None:
        raise InvalidShipError("body", "Ship body is required")

    _check("name", is_string_valid(payload.name), payload.name)
    _check("planet", is_string_valid(payload.planet), payload.planet)
    _check("shipType", payload.ship_type is not None, payload.ship_type)
    _check("prodDate", is_prod_date_valid(parse_prod_date(payload.prod_date)), payload.prod_date)
    _check("speed", is_speed_valid(payload.speed), payload.speed)
    _check("crewSize", is_crew_size_valid(payload.crew_size), payload.crew_size)


def validate_ship_patch(payload: ShipPayload):
    """Check only the fields present in a partial update"""
    if payload.name is not None:
        _check("name", is_string_valid(payload.name), payload.name)
    if payload.planet is not None:
        _check("planet", is_string_valid(payload.planet), payload.planet)
    if payload.prod_date is not None:
        _check("prodDate", is_prod_date_valid(parse_prod_date(payload.prod_date)), payload.prod_date)
    if payload.speed is not None:
        _check("speed", is_speed_valid(payload.speed), payload.speed)
    if payload.crew_size is not None:
        _check("crewSize", is_crew_size_valid(payload.crew_size), payload.crew_size)
