from typing import Any, Dict, Optional
from app.core.workflow import ExportStage, ExportStatus
from app.schemas.features import CamelModel


class ExportResponse(CamelModel):
    id: str
    feature_name: str
    stage: ExportStage
    status: ExportStatus
    error_message: Optional[str] = None
    artifacts: Dict[str, Any] = {}
