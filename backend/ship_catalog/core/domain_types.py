"""Domain Types: enums, identity types and field bounds for ships.

Invariants:
    - ShipId wraps int: ids are positive once assigned by the store
    - All valid ship types and sort keys encoded as Enums: no raw string matching
    - Field bounds live here and nowhere else

Design Decisions:
    - NewType for ids and timestamps, no wrapper classes
    - str Enums, serialized to JSON by value
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ShipId = NewType("ShipId", int)

# epoch milliseconds (UTC), the wire format for prodDate and date filters
EpochMillis = NewType("EpochMillis", int)


# ─── Field Bounds ────────────────────────────────────────────────

MAX_TEXT_LENGTH = 50

MIN_PROD_YEAR = 2800
MAX_PROD_YEAR = 3019
CURRENT_END_YEAR = MAX_PROD_YEAR + 1

MIN_SPEED = 0.01
MAX_SPEED = 0.99

MIN_CREW_SIZE = 1
MAX_CREW_SIZE = 9999

# storage integer limits (BIGINT ids and offsets, INTEGER counts)
MAX_BIGINT = 2 ** 63 - 1
MIN_INT = -(2 ** 31)
MAX_INT = 2 ** 31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class ShipType(str, Enum):
    """Ship classification: exact-match filter dimension."""
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class ShipOrder(str, Enum):
    """Sortable fields. Value is the query-string name, field_name the Ship attribute."""
    ID = "ID"
    SPEED = "SPEED"
    DATE = "DATE"
    RATING = "RATING"

    @property
    def field_name(self) -> str:
        return _ORDER_FIELDS[self]


_ORDER_FIELDS = {
    ShipOrder.ID: "id",
    ShipOrder.SPEED: "speed",
    ShipOrder.DATE: "prod_date",
    ShipOrder.RATING: "rating",
}


class SpeedCheck(str, Enum):
    """How speed is checked on partial update.

    STRICT applies the create bounds. LENIENT keeps the legacy
    `speed >= 0.01 or speed <= 0.99` test, which accepts every number.
    """
    STRICT = "strict"
    LENIENT = "lenient"
