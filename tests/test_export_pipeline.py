"""Tests for the export job pipeline and its endpoints."""
import io
import zipfile
from unittest.mock import patch
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.core.config import settings
from app.core.workflow import ExportStage, ExportStatus
from app.db.models import ExportJob
from app.db.session import Base, get_db
from app.main import app
from app.tasks.exports import execute_export


@pytest.fixture
def db_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False)
    engine.dispose()


def _add_job(db, definition) -> str:
    job = ExportJob(feature_name="Product", definition=definition, artifacts={})
    db.add(job)
    db.commit()
    return job.id


def test_execute_export_builds_archive(db_factory, product_definition, tmp_path):
    db = db_factory()
    job_id = _add_job(db, product_definition)

    execute_export(db, job_id, base_dir=tmp_path)

    job = db.get(ExportJob, job_id)
    assert job.status == ExportStatus.DONE
    assert job.stage == ExportStage.DONE
    assert job.error_message is None
    assert job.artifacts["files"][0] == "product.d.ts"
    assert job.artifacts["archive"] == "archive/product-feature.zip"

    archive = tmp_path / job_id / job.artifacts["archive"]
    with zipfile.ZipFile(archive) as zf:
        assert "product/routes.tsx" in zf.namelist()
    assert (tmp_path / job_id / "files" / "service.ts").exists()
    db.close()


def test_execute_export_records_invalid_definition(db_factory, tmp_path):
    db = db_factory()
    job_id = _add_job(db, {"featureConfig": {"name": ""}})

    execute_export(db, job_id, base_dir=tmp_path)

    job = db.get(ExportJob, job_id)
    assert job.status == ExportStatus.FAILED
    assert job.stage == ExportStage.FAILED
    assert job.error_message.startswith("Invalid feature definition")
    assert "archive" not in job.artifacts
    db.close()


def test_execute_export_unknown_job_is_ignored(db_factory, tmp_path):
    db = db_factory()
    execute_export(db, "missing", base_dir=tmp_path)
    assert db.get(ExportJob, "missing") is None
    db.close()


@pytest.fixture
def client(db_factory, tmp_path, monkeypatch):
    def override_get_db():
        db = db_factory()
        try:
            yield db
        finally:
            db.close()

    monkeypatch.setattr(settings, "exports_dir", str(tmp_path))
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_export_endpoints(client, db_factory, product_definition):
    with patch("app.api.routes_exports.run_export_job") as task:
        resp = client.post("/v1/exports", json=product_definition)
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "QUEUED"
    assert body["featureName"] == "Product"
    task.delay.assert_called_once_with(body["id"])

    # Not built yet
    assert client.get(f"/v1/exports/{body['id']}/archive").status_code == 404

    db = db_factory()
    execute_export(db, body["id"])
    db.close()

    resp = client.get(f"/v1/exports/{body['id']}")
    assert resp.json()["status"] == "DONE"

    resp = client.get(f"/v1/exports/{body['id']}/archive")
    assert resp.status_code == 200
    with zipfile.ZipFile(io.BytesIO(resp.content)) as zf:
        assert zf.namelist()[0] == "product/"


def test_export_not_found(client):
    assert client.get("/v1/exports/missing").status_code == 404
    assert client.get("/v1/exports/missing/archive").status_code == 404
