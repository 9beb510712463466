"""Tagger configuration schema."""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import SchemaBase


class TaggerConfig(SchemaBase):
    """Settings for the class tagger.

    ``enabled`` turns tagging off without removing the hook. The prefixes select
    which applied classes are reported as roles and profiles.
    """

    enabled: bool = Field(default=True)
    role_prefix: str = Field(default="role::")
    profile_prefix: str = Field(default="profile::")

    @field_validator("role_prefix", "profile_prefix")
    @classmethod
    def _prefix_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("prefix must be a non-empty string")
        return value
