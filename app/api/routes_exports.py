from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session
from app.core.workflow import ExportStatus
from app.db.session import get_db
from app.db.models import ExportJob
from app.schemas.exports import ExportResponse
from app.schemas.features import FeatureDefinition
from app.tasks.exports import run_export_job
from app.workspace.manager import ExportWorkspace

router = APIRouter(prefix="/exports")

def _to_response(job: ExportJob) -> ExportResponse:
    return ExportResponse(
        id=job.id,
        feature_name=job.feature_name,
        stage=job.stage,
        status=job.status,
        error_message=job.error_message,
        artifacts=job.artifacts or {},
    )

def _get_job(db: Session, export_id: str) -> ExportJob:
    job = db.get(ExportJob, export_id)
    if not job:
        raise HTTPException(status_code=404, detail="Export job not found")
    return job

@router.post("", response_model=ExportResponse)
def create_export(definition: FeatureDefinition, db: Session = Depends(get_db)):
    job = ExportJob(
        feature_name=definition.feature_config.name,
        definition=definition.model_dump(by_alias=True),
        artifacts={},
    )
    db.add(job)
    db.commit()
    db.refresh(job)

    run_export_job.delay(job.id)

    return _to_response(job)

@router.get("/{export_id}", response_model=ExportResponse)
def get_export(export_id: str, db: Session = Depends(get_db)):
    return _to_response(_get_job(db, export_id))

@router.get("/{export_id}/archive")
def get_export_archive(export_id: str, db: Session = Depends(get_db)):
    job = _get_job(db, export_id)
    archive = (job.artifacts or {}).get("archive")
    if job.status != ExportStatus.DONE or not archive:
        raise HTTPException(status_code=404, detail="Archive not ready")

    path = ExportWorkspace(job_id=job.id).root / archive
    if not path.exists():
        raise HTTPException(status_code=404, detail="Archive file missing")
    return FileResponse(path, media_type="application/zip", filename=path.name)
