from fastapi.testclient import TestClient

from serial_validator.api.deps import get_store
from serial_validator.main import app
from serial_validator.stores.memory import InMemorySerialStore
from tests.helpers import create_assets


def test_validate_valid_serial(db_session):
    create_assets(db_session, "serial1")
    client = TestClient(app)
    r = client.post("/validate", json={"serialNumber": "a12345bbc"})
    assert r.status_code == 200
    assert r.json() == {"isValid": True, "errors": []}


def test_validate_existing_serial(db_session):
    create_assets(db_session, "serial1", "serial2", "serial3")
    client = TestClient(app)
    r = client.post("/validate", json={"serialNumber": "serial1"})
    assert r.status_code == 200
    assert r.json() == {"isValid": False, "errors": ["already_exists"]}


def test_validate_too_short(db_session):
    client = TestClient(app)
    r = client.post("/validate", json={"serialNumber": "i234"})
    assert r.status_code == 200
    assert r.json() == {"isValid": False, "errors": ["invalid_format"]}


def test_validate_keeps_duplicate_format_codes(db_session):
    """Length and charset failures both map to invalid_format and are not collapsed"""
    client = TestClient(app)
    r = client.post("/validate", json={"serialNumber": "i234@"})
    assert r.status_code == 200
    assert r.json() == {"isValid": False, "errors": ["invalid_format", "invalid_format"]}


def test_validate_unicode_serial(db_session):
    client = TestClient(app)
    r = client.post("/validate", json={"serialNumber": "абвгдежзийюя1234"})
    assert r.status_code == 200
    assert r.json() == {"isValid": True, "errors": []}


def test_validate_all_three_codes(db_session):
    create_assets(db_session, "a!")
    client = TestClient(app)
    r = client.post("/validate", json={"serialNumber": "a!"})
    assert r.status_code == 200
    assert r.json()["errors"] == ["invalid_format", "invalid_format", "already_exists"]


def test_validate_rejects_malformed_body(db_session):
    client = TestClient(app)
    assert client.post("/validate", json={}).status_code == 422
    assert client.post("/validate", json={"serialNumber": 123456}).status_code == 422


def test_validate_store_unavailable_returns_503(db_session):
    store = InMemorySerialStore(fail_with=ConnectionError("connection refused"))
    app.dependency_overrides[get_store] = lambda: store

    client = TestClient(app)
    r = client.post("/validate", json={"serialNumber": "a12345bbc"})
    assert r.status_code == 503
    body = r.json()
    assert body["detail"]["store"] == "memory"
    assert "isValid" not in body
    assert store.reads == 1


def test_validate_does_not_write(db_session):
    from serial_validator.models.asset import Asset

    client = TestClient(app)
    r = client.post("/validate", json={"serialNumber": "newserial1"})
    assert r.json()["isValid"] is True
    assert db_session.get(Asset, "newserial1") is None
