"""Tags derived from the classes applied during a run."""

from __future__ import annotations

from typing import List

from pydantic import Field

from .base import SchemaBase


class ClassTags(SchemaBase):
    """Sorted applied classes plus the role and profile subsets.

    ``classes`` holds every applied class name in codepoint order. ``roles`` and
    ``profiles`` are filtered from that sorted list and keep its order.
    """

    classes: List[str] = Field(default_factory=list)
    roles: List[str] = Field(default_factory=list)
    profiles: List[str] = Field(default_factory=list)
