"""Field normalization for loosely-typed client input.

Clients send the same logical field under several historical names and in
locale formats (``"50,5"``, ``"05/03/2024"``, ``"true"``). Everything here is
pure: raw mapping in, canonical mapping out. Only logical fields that are
present in the input appear in the output, which is what lets partial updates
tell "absent" apart from "cleared".
"""

import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Final

_ISO_DATE: Final[re.Pattern[str]] = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_ISO_DATETIME_PREFIX: Final[re.Pattern[str]] = re.compile(r"^(\d{4}-\d{2}-\d{2})[T ]\d{2}:\d{2}")
_DMY_DATE: Final[re.Pattern[str]] = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_TRUE_STRINGS: Final[frozenset[str]] = frozenset({"true", "1", "yes", "si", "sí", "on"})


def _is_scalar_text(value: Any) -> bool:
    return isinstance(value, str | int | float) and not isinstance(value, bool)


def optional_text(value: Any) -> Any:
    """Trim text; empty or missing becomes None.

    Objects, arrays and booleans are passed through unchanged so the schema
    rejects them instead of storing their repr.
    """
    if value is None:
        return None
    if not _is_scalar_text(value):
        return value
    text = str(value).strip()
    return text or None


def required_text(value: Any) -> Any:
    """Trim text; empty stays empty so validation can reject it."""
    if value is None:
        return ""
    if not _is_scalar_text(value):
        return value
    return str(value).strip()


def parse_locale_number(text: str) -> float | None:
    """Parse a number written with either decimal convention.

    When both separators appear, the last one is the decimal separator and the
    other is dropped as a thousands separator. A separator repeated on its own
    is a thousands separator. A single lone separator is the decimal point.

    >>> parse_locale_number("1.234,56")
    1234.56
    >>> parse_locale_number("1,234.56")
    1234.56
    >>> parse_locale_number("50,5")
    50.5
    """
    cleaned = re.sub(r"\s+", "", text)
    # float() would otherwise accept "1_000"
    if not cleaned or "_" in cleaned:
        return None

    has_dot = "." in cleaned
    has_comma = "," in cleaned
    if has_dot and has_comma:
        if cleaned.rfind(",") > cleaned.rfind("."):
            cleaned = cleaned.replace(".", "").replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
    elif has_comma:
        cleaned = cleaned.replace(",", "") if cleaned.count(",") > 1 else cleaned.replace(",", ".")
    elif has_dot and cleaned.count(".") > 1:
        cleaned = cleaned.replace(".", "")

    try:
        number = float(cleaned)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def to_number(value: Any, default: float | None = None) -> float | None:
    """Coerce a raw value to a finite float, falling back to ``default``."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return default
        return number if math.isfinite(number) else default
    if isinstance(value, str):
        parsed = parse_locale_number(value)
        return default if parsed is None else parsed
    return default


def to_iso_date(value: Any) -> str | None:
    """Normalize a date to ``YYYY-MM-DD``.

    Unrecognized strings are returned trimmed so validation can report them.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    text = str(value).strip()
    if not text:
        return None
    if _ISO_DATE.match(text):
        return text
    if match := _DMY_DATE.match(text):
        day, month, year = match.groups()
        return f"{year}-{int(month):02d}-{int(day):02d}"
    if match := _ISO_DATETIME_PREFIX.match(text):
        return match.group(1)
    return text


def to_bool(value: Any) -> bool:
    """Coerce checkbox-ish input to a strict boolean (default False)."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, int | float):
        return value != 0
    return str(value).strip().lower() in _TRUE_STRINGS


@dataclass(frozen=True)
class FieldSpec:
    """How one logical field is read from raw input."""

    name: str
    aliases: tuple[str, ...]
    convert: Callable[[Any], Any]

    def lookup(self, raw: Mapping[str, Any]) -> tuple[bool, Any]:
        """Return (present, raw_value) using the first alias found as a key."""
        for key in (self.name, *self.aliases):
            if key in raw:
                return True, raw[key]
        return False, None


def _number_or(default: float | None) -> Callable[[Any], float | None]:
    return lambda value: to_number(value, default)


PROJECT_FIELDS: Final[tuple[FieldSpec, ...]] = (
    FieldSpec("name", ("nombre",), required_text),
    FieldSpec("country", ("pais",), required_text),
    FieldSpec("consultant", ("consultor",), required_text),
    FieldSpec(
        "opportunity_number",
        ("opportunityNumber", "numeroOportunidad", "numero_oportunidad"),
        optional_text,
    ),
    FieldSpec("client_name", ("clientName", "cliente"), optional_text),
    FieldSpec("project_manager", ("projectManager", "pm"), optional_text),
    FieldSpec(
        "opportunity_amount",
        ("opportunityAmount", "montoOportunidad", "monto_oportunidad"),
        _number_or(0.0),
    ),
    FieldSpec("planned_hours", ("plannedHours",), _number_or(None)),
    FieldSpec("executed_hours", ("executedHours",), _number_or(None)),
    FieldSpec("hourly_rate", ("hourlyRate",), _number_or(None)),
    FieldSpec("start_date", ("startDate",), to_iso_date),
    FieldSpec("end_date", ("endDate",), to_iso_date),
    FieldSpec("observations", ("observaciones", "description", "descripcion"), optional_text),
    FieldSpec("finalized", ("finalizado", "terminado"), to_bool),
)

VISIT_FIELDS: Final[tuple[FieldSpec, ...]] = (
    FieldSpec("product", ("producto",), required_text),
    FieldSpec("client_name", ("clientName", "cliente"), optional_text),
    FieldSpec(
        "opportunity_number",
        ("opportunityNumber", "numeroOportunidad", "numero_oportunidad"),
        optional_text,
    ),
    FieldSpec("country", ("pais",), optional_text),
    FieldSpec("consultant", ("consultor",), optional_text),
    FieldSpec("hours", ("time", "tiempo", "hora"), _number_or(None)),
    FieldSpec("visit_date", ("visitDate", "date", "fecha"), to_iso_date),
    FieldSpec(
        "opportunity_value",
        ("opportunityValue", "valorOportunidad", "valor_oportunidad", "monto_oportunidad"),
        _number_or(0.0),
    ),
)


def normalize(raw: Mapping[str, Any], fields: tuple[FieldSpec, ...]) -> dict[str, Any]:
    """Map raw input onto canonical field names, converting each value.

    Unknown keys are ignored.
    """
    normalized: dict[str, Any] = {}
    for field in fields:
        present, value = field.lookup(raw)
        if present:
            normalized[field.name] = field.convert(value)
    return normalized


def normalize_project(raw: Mapping[str, Any]) -> dict[str, Any]:
    return normalize(raw, PROJECT_FIELDS)


def normalize_visit(raw: Mapping[str, Any]) -> dict[str, Any]:
    return normalize(raw, VISIT_FIELDS)
