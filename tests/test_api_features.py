"""Tests for the stateless feature endpoints."""
import io
import zipfile
from fastapi.testclient import TestClient
from app.core.config import settings
from app.main import app

client = TestClient(app)


def test_health():
    resp = client.get("/v1/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_generate_returns_files_in_order(product_definition):
    resp = client.post("/v1/features/generate", json=product_definition)
    assert resp.status_code == 200

    body = resp.json()
    assert body["feature"] == "Product"
    paths = [f["path"] for f in body["files"]]
    assert paths[:4] == ["product.d.ts", "apis.ts", "service.ts", "relations.ts"]
    assert paths[-1] == "routes.tsx"
    assert "config/query.tsx" in paths

    entity = next(f["content"] for f in body["files"] if f["path"] == "product.d.ts")
    assert "reviews" in entity


def test_generate_accepts_snake_case_keys():
    payload = {
        "feature_config": {"name": "Order"},
        "entity_fields": [{"name": "total", "type": "number"}],
    }
    resp = client.post("/v1/features/generate", json=payload)
    assert resp.status_code == 200
    assert resp.json()["files"][0]["path"] == "order.d.ts"


def test_generate_rejects_invalid_definition():
    resp = client.post("/v1/features/generate", json={"featureConfig": {"name": "1bad"}})
    assert resp.status_code == 422

    resp = client.post(
        "/v1/features/generate",
        json={"featureConfig": {"name": "Product"}, "entityFields": [{"name": "x", "type": "color"}]},
    )
    assert resp.status_code == 422


def test_download_returns_zip(product_definition):
    resp = client.post("/v1/features/download", json=product_definition)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/zip"
    assert resp.headers["content-disposition"] == 'attachment; filename="product-feature.zip"'

    with zipfile.ZipFile(io.BytesIO(resp.content)) as zf:
        names = zf.namelist()
    assert names[0] == "product/"
    assert "product/routes.tsx" in names


def test_type_catalogs():
    resp = client.get("/v1/features/field-types")
    assert resp.status_code == 200
    values = [t["value"] for t in resp.json()]
    assert values[0] == "text"
    assert "multi-select" in values

    resp = client.get("/v1/features/relation-types")
    assert [t["value"] for t in resp.json()] == ["oneToOne", "oneToMany", "manyToMany"]

    resp = client.get("/v1/features/view-modes")
    assert [t["value"] for t in resp.json()] == ["table", "grid", "kanban", "calendar"]


def test_validation_types_catalog():
    resp = client.get("/v1/features/validation-types")
    assert resp.status_code == 200
    assert resp.json()[:3] == ["required", "minLength", "maxLength"]
    assert "pattern" in resp.json()


def test_generate_rejects_non_identifier_names():
    base = {"featureConfig": {"name": "Order"}}
    bad_parts = [
        {"entityFields": [{"name": "first name"}]},
        {"entityFields": [{"name": "total\n"}]},
        {"entityRelations": [{"name": "line items", "targetEntity": "OrderItem"}]},
        {"entityRelations": [{"name": "items", "targetEntity": "Order Item"}]},
    ]
    for part in bad_parts:
        resp = client.post("/v1/features/generate", json={**base, **part})
        assert resp.status_code == 422, part

    resp = client.post(
        "/v1/features/generate",
        json={**base, "entityRelations": [{"name": "items", "targetEntity": ""}]},
    )
    assert resp.status_code == 200


def test_default_api_prefix_comes_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "default_api_prefix", "/v2")
    resp = client.post("/v1/features/generate", json={"featureConfig": {"name": "Order"}})
    apis = next(f["content"] for f in resp.json()["files"] if f["path"] == "apis.ts")
    assert "'/v2/orders'" in apis

    resp = client.post(
        "/v1/features/generate",
        json={"featureConfig": {"name": "Order", "apiPrefix": "/api"}},
    )
    apis = next(f["content"] for f in resp.json()["files"] if f["path"] == "apis.ts")
    assert "'/api/orders'" in apis
