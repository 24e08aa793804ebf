"""Rating Calculator: derived performance score from speed, usage and age.

Invariants:
    - rating = 80 * speed * k / (3020 - year), k = 0.5 for used ships else 1.0
    - Rounded half-up to 2 decimal places
    - Production years after 3019 are rejected (age would be <= 0)
"""

import math
from datetime import date

from ship_catalog.core.domain_types import CURRENT_END_YEAR, MAX_PROD_YEAR
from ship_catalog.core.errors import ShipValidationError
from ship_catalog.core.ship import ShipFields

USED_COEFFICIENT = 0.5
NEW_COEFFICIENT = 1.0


def calculate_rating(speed: float, is_used: bool, prod_date: date) -> float:
    """Compute the rounded rating for the given ship characteristics."""
    if prod_date.year > MAX_PROD_YEAR:
        raise ShipValidationError(
            "prodDate", f"Production year must not exceed {MAX_PROD_YEAR}",
        )
    k = USED_COEFFICIENT if is_used else NEW_COEFFICIENT
    age = CURRENT_END_YEAR - prod_date.year
    rating = 80 * speed * k / age
    return round_half_up(rating)


def rate_ship(fields: ShipFields) -> float:
    return calculate_rating(fields.speed, fields.is_used, fields.prod_date)


def round_half_up(value: float, digits: int = 2) -> float:
    """Round like floor(x * 10^digits + 0.5) / 10^digits (not banker's rounding)."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale
