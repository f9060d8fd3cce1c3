"""Per-field format validators shared by the record schemas."""

import re
from datetime import date
from typing import Any, Final

ISO_DATE_REGEX: Final[str] = r"^\d{4}-\d{2}-\d{2}$"

_ISO_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(ISO_DATE_REGEX)


def validate_not_blank(value: str | None) -> str | None:
    """Reject empty or whitespace-only text. ``None`` means "not provided"."""
    if value is not None and not value.strip():
        raise ValueError("must not be empty")
    return value


def validate_iso_date_format(value: Any) -> Any:
    """Require dates to arrive exactly as ``YYYY-MM-DD``.

    Runs before pydantic's own date parsing, which would otherwise accept
    timestamps and other shapes. Calendar validity is left to pydantic.
    """
    if value is None or isinstance(value, date):
        return value
    if not isinstance(value, str) or not _ISO_DATE_PATTERN.match(value):
        raise ValueError("must be a date in YYYY-MM-DD format")
    return value


def parse_iso_date(value: Any) -> date | None:
    """Best-effort parse used for cross-field checks; None when not a valid date."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _ISO_DATE_PATTERN.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None
