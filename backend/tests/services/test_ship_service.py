"""Ship Service: orchestration over the store: pages, counts and CRUD rules.

Tests cover:
    - list pages are sorted and paged; count ignores paging
    - count(F) == len(list(F, order, 0, total)) for several F
    - id <= 0 is BadRequest, unknown id is NotFound
    - create validates, defaults isUsed, rates and saves
    - update merges, re-rates, and is a no-op without fields
    - every operation runs in exactly one unit of work
"""

from datetime import date

import pytest

from ship_catalog.core.domain_types import ShipOrder, ShipType, SpeedCheck
from ship_catalog.core.errors import (
    BadRequestError, InvalidShipIdError, ResourceNotFoundError, ShipValidationError,
)
from ship_catalog.core.ship_filters import ShipFilters
from ship_catalog.core.validate_ship import ShipDraft
from ship_catalog.services.ship_service import ShipService
from tests.factories import make_draft, millis


# ─── list / count ────────────────────────────────────────────────

async def test_list_without_filters_returns_first_page_by_id(service):
    ships = await service.list_ships(ShipFilters(), ShipOrder.ID, 0, 2)
    assert [s.id for s in ships] == [1, 2]


async def test_list_second_page(service):
    ships = await service.list_ships(ShipFilters(), ShipOrder.ID, 1, 2)
    assert [s.id for s in ships] == [3]


async def test_list_sorted_by_speed(service):
    ships = await service.list_ships(ShipFilters(), ShipOrder.SPEED, 0, 3)
    assert [s.speed for s in ships] == [0.2, 0.7, 0.99]


async def test_list_sorted_by_date(service):
    ships = await service.list_ships(ShipFilters(), ShipOrder.DATE, 0, 3)
    assert [s.prod_date for s in ships] == sorted(s.prod_date for s in ships)


async def test_list_applies_filters(service):
    ships = await service.list_ships(ShipFilters(planet="Earth"), ShipOrder.ID, 0, 10)
    assert [s.id for s in ships] == [1, 3]


async def test_count_ignores_pagination(service):
    assert await service.count_ships(ShipFilters()) == 3
    assert await service.count_ships(ShipFilters(name="Orion")) == 2


@pytest.mark.parametrize("filters", [
    ShipFilters(),
    ShipFilters(planet="Earth"),
    ShipFilters(is_used=True),
    ShipFilters(min_speed=0.9, max_speed=0.1),
    ShipFilters(after=millis(2900), ship_type=ShipType.MERCHANT),
])
async def test_count_matches_list_length(service, filters):
    total = await service.count_ships(ShipFilters())
    listed = await service.list_ships(filters, ShipOrder.RATING, 0, total)
    assert await service.count_ships(filters) == len(listed)


async def test_inverted_range_lists_nothing(service):
    assert await service.list_ships(ShipFilters(min_crew_size=600, max_crew_size=5)) == []


@pytest.mark.parametrize("page_number, page_size", [(-1, 3), (0, 0)])
async def test_invalid_page_parameters(service, store, page_number, page_size):
    with pytest.raises(BadRequestError):
        await service.list_ships(ShipFilters(), ShipOrder.ID, page_number, page_size)
    assert store.units_opened == 0


# ─── get / delete ────────────────────────────────────────────────

@pytest.mark.parametrize("ship_id", [0, -5])
async def test_get_non_positive_id_is_bad_request(service, store, ship_id):
    with pytest.raises(InvalidShipIdError):
        await service.get_ship(ship_id)
    assert store.units_opened == 0


async def test_get_unknown_id_is_not_found(service):
    with pytest.raises(ResourceNotFoundError):
        await service.get_ship(999999)


async def test_get_existing(service):
    ship = await service.get_ship(2)
    assert ship.name == "Orion II"


async def test_delete_removes_ship(service, store):
    await service.delete_ship(1)
    assert 1 not in store.ships
    assert store.commits == 1


async def test_delete_unknown_is_not_found(service, store):
    with pytest.raises(ResourceNotFoundError):
        await service.delete_ship(42)
    assert store.deleted == []
    assert store.rollbacks == 1


async def test_delete_non_positive_id_is_bad_request(service):
    with pytest.raises(BadRequestError):
        await service.delete_ship(0)


# ─── create ──────────────────────────────────────────────────────

async def test_create_assigns_id_rating_and_default_is_used(service, store):
    ship = await service.create_ship(
        make_draft(speed=0.5, prod_date=millis(2800)),
    )
    assert ship.id == 4
    assert ship.is_used is False
    assert ship.rating == 0.18
    assert store.ships[4].rating == 0.18
    assert store.units_opened == 1


async def test_create_used_ship_rating(service):
    ship = await service.create_ship(
        make_draft(speed=0.99, is_used=True, prod_date=millis(3019, 7, 1)),
    )
    assert ship.rating == 39.6


async def test_create_invalid_ship_saves_nothing(service, store):
    with pytest.raises(ShipValidationError):
        await service.create_ship(make_draft(name=""))
    with pytest.raises(ShipValidationError):
        await service.create_ship(make_draft(crew_size=10000))
    assert store.saved == []
    assert len(store.ships) == 3


# ─── update ──────────────────────────────────────────────────────

async def test_update_without_fields_is_a_no_op(service, store):
    before = store.ships[1]
    ship = await service.update_ship(1, ShipDraft())
    assert ship.name == before.name
    assert ship.rating == before.rating
    assert store.saved == []


async def test_update_merges_and_recomputes_rating(service, store):
    ship = await service.update_ship(
        1, ShipDraft(speed=0.99, is_used=True, prod_date=millis(3019)),
    )
    assert ship.id == 1
    assert ship.rating == 39.6
    assert ship.name == "Orion"
    assert store.ships[1].rating == 39.6
    assert len(store.saved) == 1


async def test_update_is_used_only_is_applied(service, store):
    ship = await service.update_ship(1, ShipDraft(is_used=True))
    assert ship.is_used is True
    assert ship.rating == round(80 * 0.2 * 0.5 / 170, 2)


async def test_failed_update_leaves_stored_ship_unchanged(service, store):
    with pytest.raises(ShipValidationError):
        await service.update_ship(1, ShipDraft(name="Renamed", crew_size=0))
    assert store.ships[1].name == "Orion"
    assert store.saved == []
    assert store.rollbacks == 1


async def test_update_unknown_id_is_not_found(service):
    with pytest.raises(ResourceNotFoundError):
        await service.update_ship(77, ShipDraft(name="Ghost"))


async def test_update_non_positive_id_is_bad_request(service):
    with pytest.raises(BadRequestError):
        await service.update_ship(-1, ShipDraft(name="Ghost"))


async def test_strict_update_rejects_out_of_range_speed(service):
    with pytest.raises(ShipValidationError):
        await service.update_ship(1, ShipDraft(speed=1.5))


async def test_lenient_update_accepts_out_of_range_speed(store):
    service = ShipService(store, speed_check=SpeedCheck.LENIENT)
    ship = await service.update_ship(1, ShipDraft(speed=1.5))
    assert ship.speed == 1.5


async def test_update_keeps_prod_date_when_absent(service):
    ship = await service.update_ship(3, ShipDraft(planet="Venus"))
    assert ship.planet == "Venus"
    assert ship.prod_date == date(3010, 12, 31)


async def test_page_offset_beyond_bigint_is_bad_request(service, store):
    with pytest.raises(BadRequestError):
        await service.list_ships(ShipFilters(), ShipOrder.ID, 2 ** 62, 100)
    assert store.units_opened == 0
