"""report_userdata package root.

Attaches a JSON-serializable ``userdata`` map to run reports and fills it with
the classes, roles and profiles applied during the run. The public API is
re-exported here; callers should not need to import submodules.
"""

__version__ = "0.1.0"

from report_userdata.class_tagger import (  # noqa: F401
    derive_tags,
    extract_applied_classes,
    tag_report,
    tag_report_from_catalog,
)
from report_userdata.exceptions import (  # noqa: F401
    MalformedReportError,
    MalformedUserdataError,
    MissingClassListWarning,
    ReportUserdataError,
    UnserializableUserdataError,
    UserdataNotAttachedError,
)
from report_userdata.report_annotator import (  # noqa: F401
    attach_userdata,
    deserialize,
    dumps,
    is_json_compatible,
    loads,
    serialize,
    set_userdata,
)
from report_userdata.run_hooks import finalize_run, new_report  # noqa: F401
from report_userdata.schemas import *  # noqa: F401,F403
from report_userdata.schemas import __all__ as SCHEMA_EXPORTS

__all__ = [
    "__version__",
    "attach_userdata",
    "serialize",
    "deserialize",
    "dumps",
    "loads",
    "set_userdata",
    "is_json_compatible",
    "derive_tags",
    "tag_report",
    "extract_applied_classes",
    "tag_report_from_catalog",
    "finalize_run",
    "new_report",
    "ReportUserdataError",
    "MalformedUserdataError",
    "MalformedReportError",
    "UnserializableUserdataError",
    "UserdataNotAttachedError",
    "MissingClassListWarning",
] + SCHEMA_EXPORTS
