"""Schema registry and JSON Schema export."""

from __future__ import annotations

from typing import Dict, Type

from .config import TaggerConfig
from .errors import AnnotatorError
from .report import RunReport
from .tags import ClassTags

SchemaType = Type


SCHEMA_REGISTRY: Dict[str, SchemaType] = {
    "run_report": RunReport,
    "class_tags": ClassTags,
    "tagger_config": TaggerConfig,
    "annotator_error": AnnotatorError,
}


def get_schema_json(name: str) -> Dict:
    """Return JSON Schema for a registered schema name."""
    if name not in SCHEMA_REGISTRY:
        raise KeyError(f"Schema '{name}' is not registered")
    model = SCHEMA_REGISTRY[name]
    return model.model_json_schema()
