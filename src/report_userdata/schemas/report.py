"""Run report schema.

A ``RunReport`` summarizes one execution run of the configuration agent. The
host fields mirror what the agent records for every run; ``userdata`` is the
open-ended annotation map end users and the class tagger write into.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from .base import SchemaBase


class ReportStatus(str, Enum):
    """Outcome of a run as recorded by the agent."""

    CHANGED = "changed"
    UNCHANGED = "unchanged"
    FAILED = "failed"


class RunReport(SchemaBase):
    host: str = Field(..., description="Certname of the node that produced the report")
    time: Optional[str] = Field(default=None, description="ISO-8601 timestamp of the run")
    status: ReportStatus = Field(default=ReportStatus.UNCHANGED)
    configuration_version: Optional[str] = Field(default=None)
    transaction_uuid: Optional[str] = Field(default=None)
    environment: str = Field(default="production")
    report_format: int = Field(default=1)
    resource_statuses: Dict[str, Any] = Field(default_factory=dict)
    logs: List[Dict[str, Any]] = Field(default_factory=list)
    # User specified data; values must be JSON-compatible.
    userdata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("userdata", mode="before")
    @classmethod
    def _null_userdata_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value
