"""JSON Engine for schema validation."""

from __future__ import annotations

from typing import Any, Tuple

from pydantic import ValidationError

from report_userdata.schemas import (
    AnnotatorError,
    AnnotatorErrorCode,
    AnnotatorErrorSource,
    SCHEMA_REGISTRY,
    Severity,
)


def _make_error(code: AnnotatorErrorCode, message: str, details: Any = None) -> AnnotatorError:
    return AnnotatorError(
        error_id="validation_error",
        code=code,
        message=message,
        source=AnnotatorErrorSource.JSON_ENGINE,
        severity=Severity.ERROR,
        details=details if isinstance(details, dict) else {"details": details} if details else {},
    )


def validate(schema_name: str, payload: Any) -> Tuple[Any | None, AnnotatorError | None]:
    """Validate payload against a registered schema.

    Returns (validated_object, None) on success, (None, AnnotatorError) on failure.
    """
    model = SCHEMA_REGISTRY.get(schema_name)
    if model is None:
        return None, _make_error(AnnotatorErrorCode.VALIDATION, f"Unknown schema '{schema_name}'")
    try:
        validated = model.model_validate(payload)
        return validated, None
    except ValidationError as exc:
        errors = [{"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]} for err in exc.errors()]
        return None, _make_error(AnnotatorErrorCode.VALIDATION, "Validation failed", errors)
