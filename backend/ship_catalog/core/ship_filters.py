"""Predicate Builder: composes optional filter inputs into one ship predicate.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Building never raises, for any input combination
    - An absent dimension returns None (no constraint); None and "" are equivalent for text
    - Dimensions combine with logical AND; an empty predicate matches every ship
    - Ranges are inclusive; min > max is not special-cased (matches nothing)

Design Decisions:
    - Constraints are a small tagged variant (Contains, Equals, Between): the same
      value is evaluated in memory via __call__ and translated to SQL by the store
    - Date filters arrive as epoch milliseconds and are normalized to calendar
      dates here, so in-memory and SQL evaluation agree
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Union

from ship_catalog.core.domain_types import ShipType
from ship_catalog.core.ship import Ship, is_midnight, millis_to_date


# ─── Constraint Variants ─────────────────────────────────────────

@dataclass(frozen=True)
class Contains:
    """Case-sensitive substring match on a text field."""
    field: str
    text: str

    def __call__(self, ship: Ship) -> bool:
        return self.text in getattr(ship, self.field)


@dataclass(frozen=True)
class Equals:
    """Exact equality on a field."""
    field: str
    value: Any

    def __call__(self, ship: Ship) -> bool:
        return getattr(ship, self.field) == self.value


@dataclass(frozen=True)
class Between:
    """Inclusive range; a None bound is open on that side."""
    field: str
    low: Any = None
    high: Any = None

    def __call__(self, ship: Ship) -> bool:
        value = getattr(ship, self.field)
        if self.low is not None and value < self.low:
            return False
        if self.high is not None and value > self.high:
            return False
        return True


Constraint = Union[Contains, Equals, Between]


@dataclass(frozen=True)
class ShipPredicate:
    """AND-composition of constraints, evaluable against a Ship."""
    constraints: tuple[Constraint, ...] = ()

    def __call__(self, ship: Ship) -> bool:
        return all(constraint(ship) for constraint in self.constraints)

    @property
    def is_unconstrained(self) -> bool:
        return not self.constraints


# ─── Filter Inputs ───────────────────────────────────────────────

@dataclass(frozen=True)
class ShipFilters:
    """Optional list/count filter inputs. Dates are epoch milliseconds."""
    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    after: int | None = None
    before: int | None = None
    is_used: bool | None = None
    min_speed: float | None = None
    max_speed: float | None = None
    min_crew_size: int | None = None
    max_crew_size: int | None = None
    min_rating: float | None = None
    max_rating: float | None = None


# ─── Per-Dimension Builders ──────────────────────────────────────

def filter_by_name(name: str | None) -> Constraint | None:
    return Contains("name", name) if name else None


def filter_by_planet(planet: str | None) -> Constraint | None:
    return Contains("planet", planet) if planet else None


def filter_by_ship_type(ship_type: ShipType | None) -> Constraint | None:
    return Equals("ship_type", ship_type) if ship_type is not None else None


def filter_by_prod_date(after: int | None, before: int | None) -> Constraint | None:
    """prod_date >= after and/or prod_date <= before, compared as instants."""
    if after is None and before is None:
        return None
    low = _first_date_at_or_after(after) if after is not None else None
    high = _last_date_at_or_before(before) if before is not None else None
    return Between("prod_date", low, high)


def filter_by_using(is_used: bool | None) -> Constraint | None:
    return Equals("is_used", is_used) if is_used is not None else None


def filter_by_speed(min_speed: float | None, max_speed: float | None) -> Constraint | None:
    return _range("speed", min_speed, max_speed)


def filter_by_crew_size(
    min_crew_size: int | None, max_crew_size: int | None,
) -> Constraint | None:
    return _range("crew_size", min_crew_size, max_crew_size)


def filter_by_rating(min_rating: float | None, max_rating: float | None) -> Constraint | None:
    return _range("rating", min_rating, max_rating)


def build_ship_predicate(filters: ShipFilters) -> ShipPredicate:
    """AND all eight filter dimensions into a single predicate."""
    candidates = (
        filter_by_name(filters.name),
        filter_by_planet(filters.planet),
        filter_by_ship_type(filters.ship_type),
        filter_by_prod_date(filters.after, filters.before),
        filter_by_using(filters.is_used),
        filter_by_speed(filters.min_speed, filters.max_speed),
        filter_by_crew_size(filters.min_crew_size, filters.max_crew_size),
        filter_by_rating(filters.min_rating, filters.max_rating),
    )
    return ShipPredicate(tuple(c for c in candidates if c is not None))


# ─── Helpers ─────────────────────────────────────────────────────

def _range(field: str, low: Any, high: Any) -> Constraint | None:
    if low is None and high is None:
        return None
    return Between(field, low, high)


def _last_date_at_or_before(millis: int) -> date:
    """Latest calendar date whose UTC midnight is <= millis (clamped)."""
    try:
        return millis_to_date(millis)
    except (OverflowError, ValueError):
        return date.min if millis < 0 else date.max


def _first_date_at_or_after(millis: int) -> date:
    """Earliest calendar date whose UTC midnight is >= millis (clamped)."""
    floor = _last_date_at_or_before(millis)
    if is_midnight(millis) or floor in (date.min, date.max):
        return floor
    return floor + timedelta(days=1)
