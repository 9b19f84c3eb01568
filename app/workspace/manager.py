from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from app.core.config import settings

@dataclass
class ExportWorkspace:
    job_id: str
    base_dir: Path | None = None

    @property
    def root(self) -> Path:
        return Path(self.base_dir or settings.exports_dir) / self.job_id

    @property
    def files_dir(self) -> Path:
        return self.root / "files"

    @property
    def archive_dir(self) -> Path:
        return self.root / "archive"

    def ensure(self) -> None:
        self.files_dir.mkdir(parents=True, exist_ok=True)
        self.archive_dir.mkdir(parents=True, exist_ok=True)
