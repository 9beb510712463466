"""Configuration loader for the class tagger."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Tuple

import yaml

from report_userdata.json_engine import validate
from report_userdata.schemas import (
    AnnotatorError,
    AnnotatorErrorCode,
    AnnotatorErrorSource,
    Severity,
    TaggerConfig,
)

# Name of the opt-in marker file; load_run_config disables tagging without it.
ENABLED_MARKER = "enabled"
CONFIG_FILE = "tagger.yaml"


def load_tagger_config(path: Optional[Path]) -> Tuple[Optional[TaggerConfig], Optional[AnnotatorError]]:
    """Load tagger settings from a YAML or JSON file.

    A missing path or file yields the default ``TaggerConfig``. An empty file
    does too.
    """
    if path is None or not path.exists():
        return TaggerConfig(), None

    text = path.read_text()
    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            payload = yaml.safe_load(text)
        else:
            payload = json.loads(text) if text.strip() else None
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        return None, _error(f"Failed to parse config {path.name}", {"error": str(exc)})

    if payload is None:
        return TaggerConfig(), None
    if not isinstance(payload, dict):
        return None, _error(f"Config {path.name} must contain a mapping", {"type": type(payload).__name__})

    config, validation_err = validate("tagger_config", payload)
    if validation_err:
        return None, _from_validation_error(path.name, validation_err)
    return config, None


def is_enabled(directory: Path) -> bool:
    """Return True when the opt-in marker file exists in ``directory``."""
    return (Path(directory) / ENABLED_MARKER).is_file()


def load_run_config(directory: Path) -> Tuple[Optional[TaggerConfig], Optional[AnnotatorError]]:
    """Load ``tagger.yaml`` from ``directory`` and apply the opt-in marker.

    Without the ``enabled`` marker the returned config has ``enabled=False``,
    whatever the file says.
    """
    directory = Path(directory)
    config, err = load_tagger_config(directory / CONFIG_FILE)
    if err:
        return None, err
    if not is_enabled(directory):
        config = config.model_copy(update={"enabled": False})
    return config, None


def _error(message: str, details=None) -> AnnotatorError:
    return AnnotatorError(
        error_id="config_error",
        code=AnnotatorErrorCode.CONFIG,
        message=message,
        source=AnnotatorErrorSource.CONFIG_LOADER,
        severity=Severity.ERROR,
        details=details,
    )


def _from_validation_error(file_name: str, validation_error: AnnotatorError) -> AnnotatorError:
    details = validation_error.details or {}
    merged_details = {"file": file_name, **details} if isinstance(details, dict) else {"file": file_name}
    return _error(f"{file_name} validation failed", merged_details)
