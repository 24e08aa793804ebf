"""Ship Schemas: camelCase JSON payloads for the /rest/ships API.

Invariants:
    - ShipPayload fields are all optional: create checks presence, update merges
    - Unknown keys (id, rating, ...) are ignored; clients cannot set derived fields
    - prodDate travels as epoch milliseconds (UTC) in both directions
    - Type errors (e.g. "speed": "fast") fail pydantic validation → 400

Design Decisions:
    - Range checks live in core.validate_ship, not in Field(ge=..., le=...):
      the same rules serve create and update and raise ShipValidationError
"""

from pydantic import BaseModel, ConfigDict, Field

from ship_catalog.core.domain_types import ShipType
from ship_catalog.core.ship import Ship, date_to_millis
from ship_catalog.core.validate_ship import ShipDraft


class ShipPayload(BaseModel):
    """Create/update request body."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = Field(None, alias="shipType")
    prod_date: int | None = Field(None, alias="prodDate")
    is_used: bool | None = Field(None, alias="isUsed")
    speed: float | None = None
    crew_size: int | None = Field(None, alias="crewSize")

    def to_draft(self) -> ShipDraft:
        return ShipDraft(
            name=self.name,
            planet=self.planet,
            ship_type=self.ship_type,
            prod_date=self.prod_date,
            is_used=self.is_used,
            speed=self.speed,
            crew_size=self.crew_size,
        )


class ShipResponse(BaseModel):
    """Public ship representation."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    planet: str
    ship_type: ShipType = Field(alias="shipType")
    prod_date: int = Field(alias="prodDate")
    is_used: bool = Field(alias="isUsed")
    speed: float
    crew_size: int = Field(alias="crewSize")
    rating: float

    @classmethod
    def from_ship(cls, ship: Ship) -> "ShipResponse":
        return cls(
            id=ship.id,
            name=ship.name,
            planet=ship.planet,
            ship_type=ship.ship_type,
            prod_date=date_to_millis(ship.prod_date),
            is_used=ship.is_used,
            speed=ship.speed,
            crew_size=ship.crew_size,
            rating=ship.rating,
        )
