"""Shared enums for models."""

from enum import Enum


class RecordStatus(str, Enum):
    """Listing filter over the soft-delete flag.

    ``ACTIVE`` and ``ARCHIVED`` partition every table: a row is in exactly one.
    """

    ACTIVE = "active"
    ARCHIVED = "archived"

    @property
    def is_active(self) -> bool:
        return self is RecordStatus.ACTIVE
