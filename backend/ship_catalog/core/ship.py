"""Ship Entity: the catalog record and its validated field set.

Invariants:
    - Ship.id is None until the store assigns it, then never changes
    - Equality is by id once assigned; unsaved ships compare by identity
    - ShipFields is immutable and only ever built from validated input
    - prod_date is a calendar date; the wire format is epoch milliseconds (UTC)

Design Decisions:
    - Plain dataclasses, not ORM models: core stays free of SQLAlchemy
    - rating lives on Ship, not ShipFields: it is derived, never user-supplied
"""

from dataclasses import asdict, dataclass
from datetime import date, datetime, timedelta, timezone

from ship_catalog.core.domain_types import EpochMillis, ShipId, ShipType

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLIS_PER_DAY = 86_400_000


def millis_to_date(millis: int) -> date:
    """UTC calendar date of an epoch-millisecond instant.

    Raises OverflowError or ValueError outside the datetime range.
    """
    return (_EPOCH + timedelta(milliseconds=millis)).date()


def date_to_millis(value: date) -> EpochMillis:
    """Epoch milliseconds of UTC midnight on the given date."""
    midnight = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return EpochMillis((midnight - _EPOCH) // timedelta(milliseconds=1))


def is_midnight(millis: int) -> bool:
    return millis % _MILLIS_PER_DAY == 0


@dataclass(frozen=True)
class ShipFields:
    """Validated, user-settable ship fields."""
    name: str
    planet: str
    ship_type: ShipType
    prod_date: date
    is_used: bool
    speed: float
    crew_size: int


@dataclass(eq=False)
class Ship:
    """Catalog record. rating is always derived from speed, is_used and prod_date."""
    name: str
    planet: str
    ship_type: ShipType
    prod_date: date
    is_used: bool
    speed: float
    crew_size: int
    rating: float
    id: ShipId | None = None

    @classmethod
    def from_fields(
        cls, fields: ShipFields, rating: float, ship_id: ShipId | None = None,
    ) -> "Ship":
        return cls(**asdict(fields), rating=rating, id=ship_id)

    @property
    def fields(self) -> ShipFields:
        return ShipFields(
            name=self.name,
            planet=self.planet,
            ship_type=self.ship_type,
            prod_date=self.prod_date,
            is_used=self.is_used,
            speed=self.speed,
            crew_size=self.crew_size,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ship):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
