"""Report annotator.

Owns the ``userdata`` map carried by a ``RunReport`` and serializes it with the
rest of the report. Userdata is always emitted, as ``{}`` when nothing was set,
so consumers can rely on the key being present.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any, Dict

from report_userdata.exceptions import (
    MalformedReportError,
    MalformedUserdataError,
    UnserializableUserdataError,
)
from report_userdata.schemas import RunReport

USERDATA_KEY = "userdata"


def attach_userdata(report: Any) -> Any:
    """Ensure ``report.userdata`` is a mapping, creating an empty one if unset.

    An existing mapping is never replaced. Returns the report for chaining.
    """
    if getattr(report, USERDATA_KEY, None) is None:
        report.userdata = {}
    return report


def is_json_compatible(value: Any) -> bool:
    """Return True if ``value`` can be written to JSON without coercion."""
    try:
        _to_json_value("<value>", value)
    except UnserializableUserdataError:
        return False
    return True


def set_userdata(report: Any, key: str, value: Any) -> None:
    """Store ``value`` under ``key``, rejecting anything JSON cannot represent."""
    if not isinstance(key, str):
        raise UnserializableUserdataError(repr(key), "keys must be strings")
    attach_userdata(report)
    report.userdata[key] = _to_json_value(key, value)


def serialize(report: RunReport) -> Dict[str, Any]:
    """Return the report's data form with ``userdata`` included."""
    data = report.model_dump(mode="json", exclude={USERDATA_KEY})
    userdata = report.userdata if report.userdata is not None else {}
    if not isinstance(userdata, Mapping):
        raise UnserializableUserdataError(USERDATA_KEY, f"expected a mapping, got {type(userdata).__name__}")
    converted = {}
    for key, value in userdata.items():
        if not isinstance(key, str):
            raise UnserializableUserdataError(repr(key), "keys must be strings")
        converted[key] = _to_json_value(key, value)
    data[USERDATA_KEY] = converted
    return data


def deserialize(data: Any) -> RunReport:
    """Rebuild a ``RunReport`` from its data form.

    A missing or null ``userdata`` entry yields an empty map. Any other
    non-mapping value raises ``MalformedUserdataError``.
    """
    if not isinstance(data, Mapping):
        raise MalformedReportError(f"expected an object, got {type(data).__name__}")

    raw = data.get(USERDATA_KEY)
    if raw is None:
        userdata: Dict[str, Any] = {}
    elif isinstance(raw, Mapping):
        userdata = dict(raw)
    else:
        raise MalformedUserdataError(type(raw).__name__)

    payload = {key: value for key, value in data.items() if key != USERDATA_KEY}
    report = RunReport.model_validate(payload)
    report.userdata = userdata
    return report


def dumps(report: RunReport, **kwargs: Any) -> str:
    """Serialize a report to JSON text. Extra kwargs go to ``json.dumps``."""
    return json.dumps(serialize(report), **kwargs)


def loads(text: str) -> RunReport:
    """Parse JSON text produced by ``dumps`` back into a ``RunReport``."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedReportError(str(exc)) from exc
    return deserialize(data)


def _to_json_value(key: str, value: Any) -> Any:
    # Returns a plain-JSON copy; tuples are rejected.
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise UnserializableUserdataError(key, f"non-finite number {value!r}")
        return value
    if isinstance(value, list):
        return [_to_json_value(key, item) for item in value]
    if isinstance(value, Mapping):
        result = {}
        for sub_key, sub_value in value.items():
            if not isinstance(sub_key, str):
                raise UnserializableUserdataError(key, f"nested key {sub_key!r} is not a string")
            result[sub_key] = _to_json_value(key, sub_value)
        return result
    raise UnserializableUserdataError(key, f"{type(value).__name__} is not JSON-compatible")
