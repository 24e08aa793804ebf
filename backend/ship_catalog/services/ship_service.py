"""Ship Service: list/count queries and single-ship create/read/update/delete.

Invariants:
    - Every operation opens exactly one store.unit_of_work()
    - Validation and rating happen before any write; a failure means no save
    - Ids <= 0 raise InvalidShipIdError before the store is touched
    - Page offsets beyond the BIGINT range raise BadRequestError
    - Update with no supplied fields returns the stored ship without saving
    - count_ships counts the same predicate list_ships pages through

Design Decisions:
    - Store injected at construction (no module-level singleton)
    - Speed check for updates comes from configuration (see SpeedCheck)
"""

import logging

from ship_catalog.core.domain_types import MAX_BIGINT, ShipId, ShipOrder, SpeedCheck
from ship_catalog.core.errors import (
    BadRequestError, ErrorContext, InvalidShipIdError, ResourceNotFoundError,
)
from ship_catalog.core.rating import rate_ship
from ship_catalog.core.repository_protocols import ShipStore
from ship_catalog.core.ship import Ship
from ship_catalog.core.ship_filters import ShipFilters, build_ship_predicate
from ship_catalog.core.validate_ship import (
    ShipDraft, has_changes, merge_ship_update, validate_new_ship,
)

logger = logging.getLogger(__name__)


class ShipService:
    """Query orchestrator over an injected ShipStore."""

    def __init__(self, store: ShipStore, speed_check: SpeedCheck = SpeedCheck.STRICT):
        self.store = store
        self.speed_check = speed_check

    async def list_ships(
        self,
        filters: ShipFilters,
        order: ShipOrder = ShipOrder.ID,
        page_number: int = 0,
        page_size: int = 3,
    ) -> list[Ship]:
        """One page of matching ships, sorted by order (ties broken by id)."""
        _check_page(page_number, page_size)
        predicate = build_ship_predicate(filters)
        async with self.store.unit_of_work():
            return await self.store.query_page(
                predicate, order, page_number, page_size,
            )

    async def count_ships(self, filters: ShipFilters) -> int:
        """Number of ships matching filters, ignoring pagination."""
        predicate = build_ship_predicate(filters)
        async with self.store.unit_of_work():
            ships = await self.store.query_all(predicate)
        return len(ships)

    async def create_ship(self, draft: ShipDraft) -> Ship:
        fields = validate_new_ship(draft)
        ship = Ship.from_fields(fields, rating=rate_ship(fields))
        async with self.store.unit_of_work():
            saved = await self.store.save(ship)
        logger.info(
            f"Ship {saved.id} created", extra={"ship_id": saved.id, "operation": "create"},
        )
        return saved

    async def get_ship(self, ship_id: int) -> Ship:
        _check_id(ship_id)
        async with self.store.unit_of_work():
            return await self._get_or_404(ShipId(ship_id))

    async def update_ship(self, ship_id: int, draft: ShipDraft) -> Ship:
        """Partial update: supplied fields overwrite, rating is recomputed."""
        _check_id(ship_id)
        async with self.store.unit_of_work():
            ship = await self._get_or_404(ShipId(ship_id))
            if not has_changes(draft):
                logger.debug(
                    f"Ship {ship_id} update carries no fields, skipping",
                    extra={"ship_id": ship_id, "operation": "update"},
                )
                return ship
            fields = merge_ship_update(ship.fields, draft, self.speed_check)
            updated = Ship.from_fields(fields, rating=rate_ship(fields), ship_id=ship.id)
            saved = await self.store.save(updated)
        logger.info(
            f"Ship {ship_id} updated", extra={"ship_id": ship_id, "operation": "update"},
        )
        return saved

    async def delete_ship(self, ship_id: int) -> None:
        _check_id(ship_id)
        async with self.store.unit_of_work():
            if not await self.store.exists_by_id(ShipId(ship_id)):
                raise _not_found(ship_id)
            await self.store.delete_by_id(ShipId(ship_id))
        logger.info(
            f"Ship {ship_id} deleted", extra={"ship_id": ship_id, "operation": "delete"},
        )

    async def _get_or_404(self, ship_id: ShipId) -> Ship:
        ship = await self.store.find_by_id(ship_id)
        if ship is None:
            raise _not_found(ship_id)
        return ship


def _check_id(ship_id: int) -> None:
    if ship_id <= 0:
        raise InvalidShipIdError(ship_id)


def _check_page(page_number: int, page_size: int) -> None:
    if page_number < 0:
        raise BadRequestError(
            f"pageNumber must be >= 0, got {page_number}", "INVALID_PAGE",
        )
    if page_size < 1:
        raise BadRequestError(
            f"pageSize must be >= 1, got {page_size}", "INVALID_PAGE",
        )
    if page_number * page_size > MAX_BIGINT:
        raise BadRequestError(
            f"Page {page_number} of size {page_size} is out of range", "INVALID_PAGE",
        )


def _not_found(ship_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError("Ship", str(ship_id), ErrorContext(ship_id=ship_id))
