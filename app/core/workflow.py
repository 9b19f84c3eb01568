from enum import Enum

class ExportStage(str, Enum):
    GENERATE = "GENERATE"
    PACKAGE = "PACKAGE"
    DONE = "DONE"
    FAILED = "FAILED"

class ExportStatus(str, Enum):
    QUEUED = "QUEUED"
    RUNNING = "RUNNING"
    DONE = "DONE"
    FAILED = "FAILED"
