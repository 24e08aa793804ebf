"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol, not ABC: the SQL store and test fakes share no base class
    - Async in Protocol: store methods do IO, but the core functions that feed
      them (predicate building, validation, rating) are never async themselves
    - unit_of_work() is an explicit transaction scope opened by the service
      around each operation (commit on success, rollback on exception)
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from ship_catalog.core.domain_types import ShipId, ShipOrder
from ship_catalog.core.ship import Ship
from ship_catalog.core.ship_filters import ShipPredicate


class ShipStore(Protocol):
    """Contract for ship persistence: implemented by shell."""
    def unit_of_work(self) -> AbstractAsyncContextManager[None]: ...
    async def query_page(
        self,
        predicate: ShipPredicate,
        order: ShipOrder,
        page_number: int,
        page_size: int,
    ) -> list[Ship]: ...
    async def query_all(self, predicate: ShipPredicate) -> list[Ship]: ...
    async def find_by_id(self, ship_id: ShipId) -> Ship | None: ...
    async def exists_by_id(self, ship_id: ShipId) -> bool: ...
    async def save(self, ship: Ship) -> Ship: ...
    async def delete_by_id(self, ship_id: ShipId) -> None: ...
