import math
from datetime import datetime

from hangar.utils import year_of

# The rating treats this as the current year
CURRENT_YEAR = 3019


def compute_rating(speed: float, is_used: bool, prod_date: datetime) -> float:
    """Rating = 80 * speed * k / (CURRENT_YEAR - production year + 1), k = 0.5 for used ships.

    Rounded half-up to two decimals.
    """
    k = 0.5 if is_used else 1.0
    rating = 80 * speed * k / (CURRENT_YEAR - year_of(prod_date) + 1)
    return math.floor(rating * 100 + 0.5) / 100
