from __future__ import annotations
import logging
from sqlalchemy.orm import Session
from app.core.workflow import ExportStage, ExportStatus
from app.db.models import ExportJob
from app.workspace.manager import ExportWorkspace
from app.steps.registry import StepRegistry

log = logging.getLogger(__name__)

class ExportEngine:
    stages = [ExportStage.GENERATE, ExportStage.PACKAGE]

    def __init__(self, db: Session, workspace: ExportWorkspace, job_id: str, registry: StepRegistry | None = None):
        self.db = db
        self.ws = workspace
        self.job_id = job_id
        self.registry = registry or StepRegistry.default()

    def _set_stage(self, job: ExportJob, stage: ExportStage) -> None:
        job.stage = stage
        self.db.commit()

    def _merge_artifacts(self, job: ExportJob, updates: dict) -> None:
        # Reassign a new dict so the JSON column is flagged as modified
        current = dict(job.artifacts or {})
        current.update(updates)
        job.artifacts = current
        self.db.commit()

    def run(self, job: ExportJob) -> None:
        for stage in self.stages:
            self._set_stage(job, stage)
            log.info("Running stage", extra={"job_id": self.job_id, "stage": stage.value})

            step = self.registry.get(stage)
            result = step.run(job=job, ws=self.ws)

            self._merge_artifacts(job, result.artifacts_index)

            if not result.ok:
                log.error("Stage failed: %s", result.message, extra={"job_id": self.job_id, "stage": stage.value})
                job.status = ExportStatus.FAILED
                job.error_message = result.message
                job.stage = ExportStage.FAILED
                self.db.commit()
                raise RuntimeError(result.message)
