"""
Exception classes for report_userdata.

Errors raised while attaching, tagging, or (de)serializing report userdata.
``MissingClassListWarning`` is a warning category, not an error: tagging is
skipped and the run continues.
"""


class ReportUserdataError(Exception):
    """Base exception for all report_userdata errors."""
    pass


class MalformedUserdataError(ReportUserdataError):
    """Serialized userdata is present but is not a mapping."""

    def __init__(self, value_type: str):
        self.value_type = value_type
        super().__init__(f"userdata must be a mapping, got {value_type}")


class MalformedReportError(ReportUserdataError):
    """Serialized report text does not decode to a JSON object."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Malformed report: {message}")


class UnserializableUserdataError(ReportUserdataError):
    """Userdata holds a key or value that cannot be represented as JSON."""

    def __init__(self, key: str, message: str):
        self.key = key
        self.message = message
        super().__init__(f"userdata[{key!r}]: {message}")


class UserdataNotAttachedError(ReportUserdataError):
    """Tagging was attempted before the report's userdata was attached."""

    def __init__(self, host: str = None):
        self.host = host
        if host:
            super().__init__(f"userdata is not attached to the report for {host}")
        else:
            super().__init__("userdata is not attached to the report")


class MissingClassListWarning(UserWarning):
    """The host did not supply a usable applied-class list for the run."""
    pass
