"""Tests for the builder session endpoints."""
import pytest
from fastapi.testclient import TestClient
from app.builder.session import sessions
from app.main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def clear_sessions():
    sessions.clear()
    yield
    sessions.clear()


def _create() -> dict:
    resp = client.post("/v1/sessions")
    assert resp.status_code == 201
    return resp.json()


def test_create_session_has_defaults():
    body = _create()
    assert body["featureConfig"]["name"] == "Product"
    assert [f["id"] for f in body["entityFields"]] == ["id", "name", "status", "created_at"]
    assert body["entityRelations"] == []
    assert body["activeFieldId"] is None


def test_get_and_delete_session():
    session_id = _create()["id"]
    assert client.get(f"/v1/sessions/{session_id}").status_code == 200

    assert client.delete(f"/v1/sessions/{session_id}").status_code == 204
    assert client.get(f"/v1/sessions/{session_id}").status_code == 404
    assert client.delete(f"/v1/sessions/{session_id}").status_code == 404


def test_update_config():
    session_id = _create()["id"]
    resp = client.patch(f"/v1/sessions/{session_id}/config", json={"name": "Order", "hasCustomApi": True})
    assert resp.status_code == 200
    config = resp.json()["featureConfig"]
    assert config["name"] == "Order"
    assert config["hasCustomApi"] is True

    resp = client.patch(f"/v1/sessions/{session_id}/config", json={"name": "   "})
    assert resp.status_code == 422


def test_field_lifecycle():
    session_id = _create()["id"]

    resp = client.post(f"/v1/sessions/{session_id}/fields", json={"label": "Price", "type": "number"})
    assert resp.status_code == 201
    field = resp.json()
    assert field["type"] == "number"
    assert field["name"] == "field_5"

    session = client.get(f"/v1/sessions/{session_id}").json()
    assert session["activeFieldId"] == field["id"]

    resp = client.patch(f"/v1/sessions/{session_id}/fields/{field['id']}", json={"type": "select"})
    assert resp.status_code == 200
    assert len(resp.json()["options"]) == 3

    resp = client.post(f"/v1/sessions/{session_id}/fields/reorder", json={"startIndex": 4, "endIndex": 0})
    assert resp.json()["entityFields"][0]["id"] == field["id"]

    assert client.delete(f"/v1/sessions/{session_id}/fields/{field['id']}").status_code == 204
    assert client.delete(f"/v1/sessions/{session_id}/fields/{field['id']}").status_code == 404


def test_field_errors():
    session_id = _create()["id"]
    assert client.patch(f"/v1/sessions/{session_id}/fields/missing", json={"label": "x"}).status_code == 404
    assert client.patch(f"/v1/sessions/{session_id}/fields/name", json={"type": "color"}).status_code == 422
    resp = client.post(f"/v1/sessions/{session_id}/fields/reorder", json={"startIndex": 0, "endIndex": 9})
    assert resp.status_code == 422


def test_relation_lifecycle():
    session_id = _create()["id"]

    resp = client.post(f"/v1/sessions/{session_id}/relations", json={})
    assert resp.status_code == 201
    relation = resp.json()
    assert relation["type"] == "oneToMany"
    assert relation["fieldName"] == ""

    resp = client.patch(
        f"/v1/sessions/{session_id}/relations/{relation['id']}",
        json={"targetEntity": "Order"},
    )
    assert resp.json()["fieldName"] == "orders"

    resp = client.get(f"/v1/sessions/{session_id}/code")
    assert resp.status_code == 200
    assert "relations.ts" in resp.json()["files"]

    assert client.delete(f"/v1/sessions/{session_id}/relations/{relation['id']}").status_code == 204
    assert client.get(f"/v1/sessions/{session_id}").json()["entityRelations"] == []


def test_reset_session():
    session_id = _create()["id"]
    client.patch(f"/v1/sessions/{session_id}/config", json={"name": "Order"})
    client.post(f"/v1/sessions/{session_id}/relations", json={"targetEntity": "Tag"})

    resp = client.post(f"/v1/sessions/{session_id}/reset")
    body = resp.json()
    assert body["featureConfig"]["name"] == "Product"
    assert body["entityRelations"] == []


def test_explicit_null_rejected_without_touching_session():
    session_id = _create()["id"]

    for payload in ({"displayName": None}, {"viewModes": None}, {"name": None}):
        resp = client.patch(f"/v1/sessions/{session_id}/config", json=payload)
        assert resp.status_code == 422, payload

    assert client.patch(f"/v1/sessions/{session_id}/fields/name", json={"label": None}).status_code == 422

    resp = client.post(f"/v1/sessions/{session_id}/relations", json={"targetEntity": None})
    assert resp.status_code == 422

    resp = client.get(f"/v1/sessions/{session_id}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["featureConfig"]["displayName"] == "Product"
    assert body["featureConfig"]["viewModes"] == ["table", "grid", "kanban"]
    assert body["entityFields"][1]["label"] == "Name"
    assert body["entityRelations"] == []


def test_nullable_field_attributes_accept_null():
    session_id = _create()["id"]
    resp = client.patch(
        f"/v1/sessions/{session_id}/fields/name",
        json={"validation": None, "defaultValue": None},
    )
    assert resp.status_code == 200
    assert resp.json()["validation"] is None
