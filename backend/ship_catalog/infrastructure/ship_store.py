"""SQL Ship Store: ShipStore implementation over SQLAlchemy async sessions.

Invariants:
    - One store per request, bound to that request's AsyncSession
    - unit_of_work() commits on success and rolls back on any exception
    - Predicate constraints translate 1:1 to SQL clauses (AND-composed)
    - Sorted queries always break ties by id, so pages are deterministic
    - Returned ships are core.ship.Ship values, never ORM rows

Design Decisions:
    - LIKE with autoescape for substring filters: '%' and '_' in user text match literally
    - save() on an existing id loads and overwrites the row (last writer wins)
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import ColumnElement, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ship_catalog.core.domain_types import ShipId, ShipOrder
from ship_catalog.core.errors import ErrorContext, ResourceNotFoundError
from ship_catalog.core.ship import Ship
from ship_catalog.core.ship_filters import (
    Between, Constraint, Contains, Equals, ShipPredicate,
)
from ship_catalog.models.ship import ShipRecord


class SqlShipStore:
    """Ship persistence backed by the ship table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[None]:
        try:
            yield
        except Exception:
            await self.db.rollback()
            raise
        await self.db.commit()

    async def query_page(
        self,
        predicate: ShipPredicate,
        order: ShipOrder,
        page_number: int,
        page_size: int,
    ) -> list[Ship]:
        query = (
            _filtered(predicate)
            .order_by(*_order_by(order))
            .offset(page_number * page_size)
            .limit(page_size)
        )
        result = await self.db.execute(query)
        return [_to_ship(record) for record in result.scalars().all()]

    async def query_all(self, predicate: ShipPredicate) -> list[Ship]:
        result = await self.db.execute(_filtered(predicate).order_by(ShipRecord.id))
        return [_to_ship(record) for record in result.scalars().all()]

    async def find_by_id(self, ship_id: ShipId) -> Ship | None:
        record = await self.db.get(ShipRecord, ship_id)
        return _to_ship(record) if record else None

    async def exists_by_id(self, ship_id: ShipId) -> bool:
        result = await self.db.execute(
            select(ShipRecord.id).where(ShipRecord.id == ship_id),
        )
        return result.scalar_one_or_none() is not None

    async def save(self, ship: Ship) -> Ship:
        """Insert when ship.id is None, otherwise overwrite the stored row."""
        if ship.id is None:
            record = ShipRecord()
            self.db.add(record)
        else:
            record = await self.db.get(ShipRecord, ship.id)
            if record is None:
                raise ResourceNotFoundError(
                    "Ship", str(ship.id), ErrorContext(ship_id=ship.id),
                )
        _copy_onto(ship, record)
        await self.db.flush()
        return _to_ship(record)

    async def delete_by_id(self, ship_id: ShipId) -> None:
        await self.db.execute(delete(ShipRecord).where(ShipRecord.id == ship_id))


# ─── Predicate → SQL ─────────────────────────────────────────────

def to_sql_clause(constraint: Constraint) -> ColumnElement[bool]:
    column = getattr(ShipRecord, constraint.field)
    if isinstance(constraint, Contains):
        return column.contains(constraint.text, autoescape=True)
    if isinstance(constraint, Equals):
        return column == constraint.value
    if isinstance(constraint, Between):
        if constraint.low is None:
            return column <= constraint.high
        if constraint.high is None:
            return column >= constraint.low
        return column.between(constraint.low, constraint.high)
    raise TypeError(f"Unsupported constraint: {constraint!r}")


def _filtered(predicate: ShipPredicate):
    query = select(ShipRecord)
    if predicate.is_unconstrained:
        return query
    return query.where(*(to_sql_clause(c) for c in predicate.constraints))


def _order_by(order: ShipOrder) -> tuple:
    column = getattr(ShipRecord, order.field_name)
    if order is ShipOrder.ID:
        return (column,)
    return (column, ShipRecord.id)


# ─── Row Mapping ─────────────────────────────────────────────────

def _to_ship(record: ShipRecord) -> Ship:
    return Ship(
        id=ShipId(record.id),
        name=record.name,
        planet=record.planet,
        ship_type=record.ship_type,
        prod_date=record.prod_date,
        is_used=record.is_used,
        speed=record.speed,
        crew_size=record.crew_size,
        rating=record.rating,
    )


def _copy_onto(ship: Ship, record: ShipRecord) -> None:
    record.name = ship.name
    record.planet = ship.planet
    record.ship_type = ship.ship_type
    record.prod_date = ship.prod_date
    record.is_used = ship.is_used
    record.speed = ship.speed
    record.crew_size = ship.crew_size
    record.rating = ship.rating
