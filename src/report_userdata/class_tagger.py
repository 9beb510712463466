"""Class tagger.

Stores the classes enforced during a run in the report so that queries over
many reports can select by role, profile, or class.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any, List, Optional, Sequence

from report_userdata.exceptions import MissingClassListWarning, UserdataNotAttachedError
from report_userdata.schemas import ClassTags, TaggerConfig

logger = logging.getLogger(__name__)


def derive_tags(applied_classes: Sequence[str], config: Optional[TaggerConfig] = None) -> ClassTags:
    """Sort applied classes and pick out roles and profiles.

    Both prefix checks run against the same sorted list, so a name is only
    excluded from a subset by its own prefix.

    Args:
        applied_classes: Class names applied during the run, in any order
        config: Tagger settings; defaults select ``role::`` and ``profile::``

    Returns:
        ClassTags with the sorted classes and the two filtered subsets

    Raises:
        TypeError: If given a bare string or a sequence holding non-strings
    """
    if isinstance(applied_classes, (str, bytes)):
        raise TypeError("applied_classes must be a sequence of class names, not a single string")
    classes = list(applied_classes)
    for name in classes:
        if not isinstance(name, str):
            raise TypeError(f"class names must be strings, got {type(name).__name__}")

    config = config or TaggerConfig()
    classes.sort()
    return ClassTags(
        classes=classes,
        roles=[name for name in classes if name.startswith(config.role_prefix)],
        profiles=[name for name in classes if name.startswith(config.profile_prefix)],
    )


def tag_report(report: Any, applied_classes: Sequence[str], config: Optional[TaggerConfig] = None) -> ClassTags:
    """Write ``classes``, ``roles`` and ``profiles`` into ``report.userdata``.

    Other userdata keys are left alone. Re-tagging with the same input
    overwrites the three keys with identical values.
    """
    userdata = getattr(report, "userdata", None)
    if not isinstance(userdata, MutableMapping):
        raise UserdataNotAttachedError(getattr(report, "host", None))

    tags = derive_tags(applied_classes, config)
    userdata["classes"] = list(tags.classes)
    userdata["roles"] = list(tags.roles)
    userdata["profiles"] = list(tags.profiles)
    return tags


def extract_applied_classes(catalog: Any) -> Optional[List[str]]:
    """Read the applied class names from a host catalog.

    Accepts a catalog object exposing ``classes`` as an attribute or a
    zero-argument method, or a catalog in data form with a ``classes`` key.
    Returns None when the interface is missing or has an unexpected shape.
    """
    if isinstance(catalog, Mapping):
        classes = catalog.get("classes")
    else:
        classes = getattr(catalog, "classes", None)

    if classes is None:
        return None
    if callable(classes):
        try:
            classes = classes()
        except TypeError:
            # Signature changed on the host side
            return None

    if isinstance(classes, (str, bytes)) or not isinstance(classes, Iterable):
        return None
    classes = list(classes)
    if not all(isinstance(name, str) for name in classes):
        return None
    return classes


def tag_report_from_catalog(
    report: Any,
    catalog: Any,
    config: Optional[TaggerConfig] = None,
) -> Optional[ClassTags]:
    """Tag ``report`` with the classes in ``catalog``.

    If the catalog does not expose a usable class list, a
    ``MissingClassListWarning`` is issued, the report is left untouched and
    None is returned.
    """
    classes = extract_applied_classes(catalog)
    if classes is None:
        message = (
            f"Could not extract classes from catalog of type {type(catalog).__name__}; "
            "report will not carry role, profile or class tags."
        )
        logger.warning(message)
        warnings.warn(message, MissingClassListWarning, stacklevel=2)
        return None

    tags = tag_report(report, classes, config)
    logger.debug(
        "Tagged report with %d classes (%d roles, %d profiles)",
        len(tags.classes),
        len(tags.roles),
        len(tags.profiles),
    )
    return tags
