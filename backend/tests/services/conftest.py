"""Service test fixtures: ShipService over an in-memory store.

Invariants:
    - Every test gets a fresh store seeded with the same three ships
"""

from datetime import date

import pytest

from ship_catalog.core.domain_types import ShipType
from ship_catalog.services.ship_service import ShipService
from tests.factories import make_ship
from tests.services.fake_store import InMemoryShipStore


@pytest.fixture
def store():
    return InMemoryShipStore([
        make_ship(1, name="Orion", planet="Earth", ship_type=ShipType.TRANSPORT,
                  prod_date=date(2850, 6, 1), speed=0.2, crew_size=10),
        make_ship(2, name="Orion II", planet="Mars", ship_type=ShipType.MILITARY,
                  prod_date=date(2950, 1, 1), is_used=True, speed=0.7, crew_size=500),
        make_ship(3, name="Nebula", planet="Earth", ship_type=ShipType.MERCHANT,
                  prod_date=date(3010, 12, 31), speed=0.99, crew_size=9999),
    ])


@pytest.fixture
def service(store):
    return ShipService(store)
