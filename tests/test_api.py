"""API tests against a fresh in-memory service per test."""

import pytest
from fastapi.testclient import TestClient

from api import main as api_main
from api.main import app
from connectify.infrastructure import Settings


@pytest.fixture
def client():
    app.state.service = api_main.build_service(Settings(default_region="US"))
    return TestClient(app)


def _add_person(client, name="John Doe", email="johndoe@example.com", **extra):
    return client.post("/persons", json={"name": name, "email": email, **extra})


def test_health(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_add_and_list_persons(client) -> None:
    r = _add_person(client, tags=["colleague"])
    assert r.status_code == 201
    assert r.json()["tags"] == ["colleague"]

    listed = client.get("/persons").json()
    assert listed["count"] == 1
    assert listed["persons"][0]["name"] == "John Doe"


def test_empty_listing(client) -> None:
    assert client.get("/entities").json() == {
        "kind": "entities",
        "count": 0,
        "persons": [],
        "companies": [],
    }


def test_duplicate_and_invalid_person(client) -> None:
    _add_person(client)
    assert _add_person(client, email="other@example.com").status_code == 409
    r = _add_person(client, name="Jane", email="jane")
    assert r.status_code == 400
    assert r.json()["detail"].startswith("email:")


def test_delete_person(client) -> None:
    _add_person(client)
    assert client.delete("/persons/1").status_code == 200
    assert client.delete("/persons/1").status_code == 404
    assert client.delete("/persons/0").status_code == 400


def test_edit_person(client) -> None:
    _add_person(client, phone="11111111")
    r = client.patch("/persons/1", json={"phone": "91234567"})
    assert r.status_code == 200
    assert r.json()["phone"] == "91234567"
    assert r.json()["email"] == "johndoe@example.com"
    assert client.patch("/persons/1", json={}).status_code == 400


def test_company_flow(client) -> None:
    _add_person(client)
    r = client.post("/companies", json={"name": "Acme", "phone": "202 555 1234"})
    assert r.status_code == 201
    assert r.json()["phone"] == "+12025551234"
    assert client.post("/companies", json={"name": "Acme"}).status_code == 409

    linked = client.post("/companies/1/persons/1")
    assert linked.status_code == 200
    assert [p["name"] for p in linked.json()["persons"]] == ["John Doe"]

    edited = client.patch("/companies/1/persons/1", json={"priority": 4})
    assert edited.status_code == 200
    assert edited.json()["priority"] == 4

    assert client.patch("/companies/1", json={"industry": "Logistics"}).json()["industry"] == "Logistics"
    assert client.get("/companies").json()["count"] == 1
    assert client.delete("/companies/1").status_code == 200


def test_rank(client) -> None:
    _add_person(client, name="Low", email="low@example.com", priority=1)
    _add_person(client, name="High", email="high@example.com", priority=5)
    assert client.post("/rank").json() == {"persons": 2, "companies": 0}
    assert [p["name"] for p in client.get("/persons").json()["persons"]] == ["High", "Low"]
