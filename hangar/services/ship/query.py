"""
Filtering, sorting and paging of ship collections.

All three operate on in-memory lists already fetched from the store and never
mutate their input.
"""

from typing import Iterable, List, Optional, Sequence

from hangar.models import Ship, ShipFilter, ShipOrder
from hangar.utils import ensure_utc

DEFAULT_PAGE_SIZE = 3


def matches(ship: Ship, criteria: ShipFilter) -> bool:
    """True when the ship satisfies every criterion that is set"""
    if criteria.name is not None and criteria.name not in ship.name:
        return False
    if criteria.planet is not None and criteria.planet not in ship.planet:
        return False
    if criteria.ship_type is not None and ship.ship_type != criteria.ship_type:
        return False

    prod_date = ensure_utc(ship.prod_date)
    if criteria.after is not None and prod_date < ensure_utc(criteria.after):
        return False
    if criteria.before is not None and prod_date > ensure_utc(criteria.before):
        return False

    if criteria.is_used is not None and ship.is_used != criteria.is_used:
        return False
    if criteria.min_speed is not None and ship.speed < criteria.min_speed:
        return False
    if criteria.max_speed is not None and ship.speed > criteria.max_speed:
        return False
    if criteria.min_crew_size is not None and ship.crew_size < criteria.min_crew_size:
        return False
    if criteria.max_crew_size is not None and ship.crew_size > criteria.max_crew_size:
        return False
    if criteria.min_rating is not None and ship.rating < criteria.min_rating:
        return False
    if criteria.max_rating is not None and ship.rating > criteria.max_rating:
        return False
    return True


def filter_ships(ships: Iterable[Ship], criteria: Optional[ShipFilter] = None) -> List[Ship]:
    """Keep matching ships in their original order"""
    if criteria is None:
        return list(ships)
    return [ship for ship in ships if matches(ship, criteria)]


def sort_ships(ships: Iterable[Ship], order: Optional[ShipOrder] = None) -> List[Ship]:
    """Stable ascending sort on the chosen key; no key keeps the input order"""
    if order is None:
        return list(ships)

    if order is ShipOrder.DATE:
        return sorted(ships, key=lambda ship: ensure_utc(ship.prod_date))
    return sorted(ships, key=lambda ship: getattr(ship, order.field_name))


def get_page(
    ships: Sequence[Ship],
    page_number: Optional[int] = None,
    page_size: Optional[int] = None,
) -> List[Ship]:
    """Slice out one zero-based page"""
    page = 0 if page_number is None else page_number
    size = DEFAULT_PAGE_SIZE if page_size is None else page_size

    if page < 0:
        raise ValueError(f"pageNumber must be >= 0, got {page}")
    if size < 1:
        raise ValueError(f"pageSize must be >= 1, got {size}")

    start = page * size
    return list(ships[start:start + size])
