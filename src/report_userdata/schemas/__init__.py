"""Schema exports."""

from .base import SchemaBase, Severity
from .config import TaggerConfig
from .errors import AnnotatorError, AnnotatorErrorCode, AnnotatorErrorSource
from .registry import SCHEMA_REGISTRY, get_schema_json
from .report import ReportStatus, RunReport
from .tags import ClassTags

__all__ = [
    "SchemaBase",
    "Severity",
    "TaggerConfig",
    "AnnotatorError",
    "AnnotatorErrorCode",
    "AnnotatorErrorSource",
    "SCHEMA_REGISTRY",
    "get_schema_json",
    "ReportStatus",
    "RunReport",
    "ClassTags",
]
