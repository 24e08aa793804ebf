"""API test fixtures: FastAPI app over a fresh in-memory SQLite database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - Background lifespan is not run; tables come from test_engine
"""

import pytest
from httpx import ASGITransport, AsyncClient

from ship_catalog.infrastructure.database import get_db, DatabaseSessionManager
import ship_catalog.infrastructure.database as db_module
from ship_catalog.main import app
from tests.factories import SHIP_BODY


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager



@pytest.fixture
async def created(client):
    """Three ships created through the API; returns their JSON."""
    bodies = [
        {**SHIP_BODY, "name": "Orion", "planet": "Earth", "speed": 0.2},
        {**SHIP_BODY, "name": "Orion II", "planet": "Mars", "shipType": "MILITARY",
         "isUsed": True, "speed": 0.7},
        {**SHIP_BODY, "name": "Nebula", "planet": "Earth", "shipType": "MERCHANT",
         "speed": 0.99, "crewSize": 9999},
    ]
    ships = []
    for body in bodies:
        res = await client.post("/rest/ships", json=body)
        assert res.status_code == 200, res.text
        ships.append(res.json())
    return ships
