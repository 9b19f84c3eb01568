from __future__ import annotations
import logging
from pathlib import Path
from sqlalchemy.orm import Session
from app.tasks.celery_app import celery_app
from app.db.session import SessionLocal
from app.db.models import ExportJob
from app.core.workflow import ExportStage, ExportStatus
from app.workspace.manager import ExportWorkspace
from app.core.engine import ExportEngine

log = logging.getLogger(__name__)

def execute_export(db: Session, job_id: str, base_dir: Path | None = None) -> None:
    """Run the export pipeline for one job; failures are recorded on the job."""
    try:
        job = db.get(ExportJob, job_id)
        if not job:
            log.error("Export job not found", extra={"job_id": job_id, "stage": "-"})
            return

        job.status = ExportStatus.RUNNING
        db.commit()

        ws = ExportWorkspace(job_id=job.id, base_dir=base_dir)
        ws.ensure()

        log.info("Starting export", extra={"job_id": job_id, "stage": job.stage.value})

        engine = ExportEngine(db=db, workspace=ws, job_id=job_id)
        engine.run(job)

        job = db.get(ExportJob, job_id)
        if job and job.status != ExportStatus.FAILED:
            job.status = ExportStatus.DONE
            job.stage = ExportStage.DONE
            db.commit()
            log.info("Export completed successfully", extra={"job_id": job_id, "stage": "DONE"})

    except Exception as e:
        db.rollback()
        job = db.get(ExportJob, job_id)
        stage = job.stage.value if job else "-"
        log.exception("Export failed", extra={"job_id": job_id, "stage": stage})
        if job:
            job.status = ExportStatus.FAILED
            job.stage = ExportStage.FAILED
            job.error_message = job.error_message or str(e)
            db.commit()

@celery_app.task(name="run_export_job")
def run_export_job(job_id: str) -> None:
    db: Session = SessionLocal()
    try:
        execute_export(db, job_id)
    finally:
        db.close()
