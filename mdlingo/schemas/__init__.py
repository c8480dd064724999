from .language import Language
from .placeholder import Placeholder, PlaceholderCategory, PlaceholderSet
from .report import (
    CheckLevel,
    CheckResult,
    CleanResult,
    ProjectConfig,
    QAReport,
    ValidationCheck,
    ValidationReport,
)
from .segment import Segment, SegmentKind
from .task import FileTask, RunSummary, TaskStatus

__all__ = [
    "CheckLevel",
    "CheckResult",
    "CleanResult",
    "FileTask",
    "Language",
    "Placeholder",
    "PlaceholderCategory",
    "PlaceholderSet",
    "ProjectConfig",
    "QAReport",
    "RunSummary",
    "Segment",
    "SegmentKind",
    "TaskStatus",
    "ValidationCheck",
    "ValidationReport",
]
