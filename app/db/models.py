from __future__ import annotations
import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, Enum, JSON, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base
from app.core.workflow import ExportStage, ExportStatus

class ExportJob(Base):
    __tablename__ = "export_jobs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    feature_name: Mapped[str] = mapped_column(String(100), nullable=False)
    # FeatureDefinition payload as submitted (camelCase keys)
    definition: Mapped[dict] = mapped_column(JSON, nullable=False)

    stage: Mapped[ExportStage] = mapped_column(Enum(ExportStage), default=ExportStage.GENERATE, nullable=False)
    status: Mapped[ExportStatus] = mapped_column(Enum(ExportStatus), default=ExportStatus.QUEUED, nullable=False)

    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)
    artifacts: Mapped[dict] = mapped_column(JSON, default=dict, nullable=False)
