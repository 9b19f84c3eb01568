from dataclasses import dataclass
from typing import Dict, Any
from app.core.workflow import ExportStage

@dataclass
class StepResult:
    stage: ExportStage
    ok: bool
    message: str
    artifacts_index: Dict[str, Any]

class BaseStep:
    stage: ExportStage
    def run(self, job, ws) -> StepResult:
        raise NotImplementedError
