from __future__ import annotations

from decimal import Decimal

import pytest

from src.timeclock_payroll.timeclock_payroll.core.exceptions import NotFoundError, ValidationError
from src.timeclock_payroll.timeclock_payroll.stores.service import StoreService


@pytest.fixture
def service(stores_repo):
    return StoreService(stores_repo)


def test_create_and_update_store(service, stores_repo):
    store_id = service.create({"name": "Riverside", "latitude": "13.70", "longitude": 100.49})

    service.update(store_id, {"name": "Riverside North", "latitude": 13.71, "longitude": 100.49})

    store = stores_repo.get_by_id(store_id)
    assert store.name == "Riverside North"
    assert store.latitude == Decimal("13.71")


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "latitude": 1, "longitude": 1},
        {"name": "X", "latitude": 91, "longitude": 1},
        {"name": "X", "latitude": 1, "longitude": -180.5},
        {"name": "X", "latitude": "north", "longitude": 1},
        {"name": "X", "latitude": 1},
    ],
)
def test_create_rejects_bad_payload(service, payload):
    with pytest.raises(ValidationError):
        service.create(payload)


def test_update_and_delete_unknown_store(service):
    with pytest.raises(NotFoundError):
        service.update(42, {"name": "X", "latitude": 1, "longitude": 1})
    with pytest.raises(NotFoundError):
        service.delete(42)


def test_resolve_branch_hit_and_miss(service):
    hit = service.resolve_branch("Central")
    miss = service.resolve_branch("Uptown")

    assert hit.found and not hit.ambiguous
    assert hit.store.name == "Central"
    assert not miss.found
    assert not service.resolve_branch("").found


def test_resolve_branch_is_case_sensitive(service):
    assert not service.resolve_branch("central").found


def test_ambiguous_branch_uses_lowest_id(service, stores_repo, caplog):
    first = stores_repo.get_by_id(1)
    stores_repo.add("Central", "0", "0")

    match = service.resolve_branch("Central")

    assert match.ambiguous
    assert match.store == first
    assert "matches 2 stores" in caplog.text


def test_store_endpoints(client, admin_headers):
    assert client.post("/api/stores", json={"name": "Uptown", "latitude": 1, "longitude": 2}).status_code == 401

    created = client.post("/api/stores", json={"name": "Uptown", "latitude": 1, "longitude": 2}, headers=admin_headers)
    assert created.status_code == 201
    store_id = created.get_json()["id"]

    names = [s["name"] for s in client.get("/api/stores").get_json()]
    assert names == ["Central", "Uptown"]

    assert client.delete(f"/api/stores/{store_id}", headers=admin_headers).status_code == 200
    assert client.delete(f"/api/stores/{store_id}", headers=admin_headers).status_code == 404
