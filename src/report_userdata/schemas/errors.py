"""Error records returned by loaders and validators."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field

from .base import SchemaBase, Severity


class AnnotatorErrorCode(str, Enum):
    VALIDATION = "validation"
    CONFIG = "config"


class AnnotatorErrorSource(str, Enum):
    CONFIG_LOADER = "config_loader"
    JSON_ENGINE = "json_engine"


class AnnotatorError(SchemaBase):
    error_id: str
    code: AnnotatorErrorCode
    message: str
    source: AnnotatorErrorSource
    severity: Severity = Field(default=Severity.ERROR)
    details: Optional[Dict[str, Any]] = Field(default=None)
