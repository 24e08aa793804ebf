"""Ship Validation: field checks for create and partial update.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Every violation raises ShipValidationError naming the JSON field
    - Create requires every field except isUsed (defaults to False)
    - Update validates ALL supplied fields before building the merged result,
      so a failing field never leaves a partially-applied update
    - Error fields use the JSON names (name, planet, shipType, prodDate, ...)

Design Decisions:
    - Raise, not return error dicts: the service surfaces the first violation
      unchanged and the HTTP layer maps it to 400
    - Update speed check is configurable (SpeedCheck): STRICT or the legacy LENIENT test
"""

from dataclasses import dataclass, fields, replace
from datetime import date
from typing import Any

from ship_catalog.core.domain_types import (
    MAX_CREW_SIZE, MAX_PROD_YEAR, MAX_SPEED, MAX_TEXT_LENGTH,
    MIN_CREW_SIZE, MIN_PROD_YEAR, MIN_SPEED, ShipType, SpeedCheck,
)
from ship_catalog.core.errors import ShipValidationError
from ship_catalog.core.ship import ShipFields, millis_to_date


@dataclass(frozen=True)
class ShipDraft:
    """Candidate field values from a create or update request. prod_date is epoch ms."""
    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    prod_date: int | None = None
    is_used: bool | None = None
    speed: float | None = None
    crew_size: int | None = None


# ─── Field Checks ────────────────────────────────────────────────

def check_text(field: str, value: str) -> str:
    if not value or len(value) > MAX_TEXT_LENGTH:
        raise ShipValidationError(
            field, f"{field} must be 1-{MAX_TEXT_LENGTH} characters",
        )
    return value


def check_ship_type(value: Any) -> ShipType:
    try:
        return ShipType(value)
    except ValueError:
        raise ShipValidationError("shipType", f"Unknown ship type: {value!r}") from None


def check_prod_date(millis: int) -> date:
    """Epoch ms must be non-negative and fall in a year within [2800, 3019]."""
    if millis < 0:
        raise ShipValidationError("prodDate", "prodDate must not be negative")
    try:
        prod_date = millis_to_date(millis)
    except (OverflowError, ValueError):
        raise ShipValidationError("prodDate", "prodDate is out of range") from None
    if not MIN_PROD_YEAR <= prod_date.year <= MAX_PROD_YEAR:
        raise ShipValidationError(
            "prodDate",
            f"Production year must be in [{MIN_PROD_YEAR}, {MAX_PROD_YEAR}]",
        )
    return prod_date


def check_speed(speed: float, speed_check: SpeedCheck = SpeedCheck.STRICT) -> float:
    if speed_check is SpeedCheck.LENIENT:
        valid = speed >= MIN_SPEED or speed <= MAX_SPEED
    else:
        valid = MIN_SPEED <= speed <= MAX_SPEED
    if not valid:
        raise ShipValidationError(
            "speed", f"speed must be in [{MIN_SPEED}, {MAX_SPEED}]",
        )
    return speed


def check_crew_size(crew_size: int) -> int:
    if not MIN_CREW_SIZE <= crew_size <= MAX_CREW_SIZE:
        raise ShipValidationError(
            "crewSize", f"crewSize must be in [{MIN_CREW_SIZE}, {MAX_CREW_SIZE}]",
        )
    return crew_size


# ─── Create ──────────────────────────────────────────────────────

def validate_new_ship(draft: ShipDraft) -> ShipFields:
    """Validate a complete create payload. is_used defaults to False."""
    return ShipFields(
        name=check_text("name", _require(draft.name, "name")),
        planet=check_text("planet", _require(draft.planet, "planet")),
        ship_type=check_ship_type(_require(draft.ship_type, "shipType")),
        prod_date=check_prod_date(_require(draft.prod_date, "prodDate")),
        is_used=bool(draft.is_used) if draft.is_used is not None else False,
        speed=check_speed(_require(draft.speed, "speed")),
        crew_size=check_crew_size(_require(draft.crew_size, "crewSize")),
    )


# ─── Partial Update ──────────────────────────────────────────────

def has_changes(draft: ShipDraft) -> bool:
    """False when the draft supplies no mutable field at all.

    isUsed counts as a change: an update carrying only isUsed is applied
    and re-rated, unlike the legacy service which ignored it.
    """
    return any(getattr(draft, f.name) is not None for f in fields(draft))


def merge_ship_update(
    current: ShipFields,
    draft: ShipDraft,
    speed_check: SpeedCheck = SpeedCheck.STRICT,
) -> ShipFields:
    """Validate every supplied field, then overlay them on the current fields."""
    changes: dict[str, Any] = {}
    if draft.name is not None:
        changes["name"] = check_text("name", draft.name)
    if draft.planet is not None:
        changes["planet"] = check_text("planet", draft.planet)
    if draft.ship_type is not None:
        changes["ship_type"] = check_ship_type(draft.ship_type)
    if draft.prod_date is not None:
        changes["prod_date"] = check_prod_date(draft.prod_date)
    if draft.is_used is not None:
        changes["is_used"] = draft.is_used
    if draft.speed is not None:
        changes["speed"] = check_speed(draft.speed, speed_check)
    if draft.crew_size is not None:
        changes["crew_size"] = check_crew_size(draft.crew_size)
    return replace(current, **changes)


def _require(value: Any, field: str) -> Any:
    if value is None:
        raise ShipValidationError(field, f"{field} is required")
    return value
