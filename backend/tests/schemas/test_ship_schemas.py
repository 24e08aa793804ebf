"""Ship Schemas: camelCase parsing, ignored derived fields and response shape."""

from datetime import date

import pytest
from pydantic import ValidationError

from ship_catalog.core.domain_types import ShipType
from ship_catalog.schemas.ship import ShipPayload, ShipResponse
from tests.factories import make_ship, millis


def test_payload_parses_camel_case():
    payload = ShipPayload.model_validate({
        "name": "Orion", "shipType": "MERCHANT", "prodDate": millis(2900),
        "isUsed": True, "crewSize": 12,
    })
    draft = payload.to_draft()
    assert draft.ship_type is ShipType.MERCHANT
    assert draft.prod_date == millis(2900)
    assert draft.is_used is True
    assert draft.crew_size == 12
    assert draft.planet is None


def test_payload_ignores_id_and_rating():
    payload = ShipPayload.model_validate({"id": 5, "rating": 3.3})
    assert payload.to_draft() == ShipPayload().to_draft()


def test_payload_rejects_wrong_types():
    with pytest.raises(ValidationError):
        ShipPayload.model_validate({"crewSize": "many"})
    with pytest.raises(ValidationError):
        ShipPayload.model_validate({"shipType": "YACHT"})


def test_response_serializes_camel_case_with_epoch_millis():
    ship = make_ship(9, prod_date=date(2900, 1, 1), is_used=True)
    data = ShipResponse.from_ship(ship).model_dump(by_alias=True, mode="json")
    assert data["id"] == 9
    assert data["prodDate"] == millis(2900)
    assert data["isUsed"] is True
    assert data["shipType"] == "TRANSPORT"
    assert data["crewSize"] == 100
    assert data["rating"] == ship.rating
