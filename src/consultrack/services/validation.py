"""Validation rules for normalized project and visit input.

Each function takes the output of the field normalizer and either returns
the accepted values or raises ``ValidationError`` naming every failing field.
Nothing here touches storage.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.consultrack.core.exceptions import FieldError, ValidationError
from src.consultrack.core.validators import parse_iso_date
from src.consultrack.schemas import ProjectCreate, ProjectUpdate, VisitCreate, VisitUpdate

EMPTY_UPDATE = FieldError("body", "at least one updatable field must be provided")
DATE_ORDER = FieldError("end_date", "must not precede start_date")


def field_errors(exc: PydanticValidationError) -> list[FieldError]:
    """Translate pydantic's error list into one FieldError per failure."""
    errors = []
    for err in exc.errors(include_url=False):
        loc = err.get("loc") or ("body",)
        field = str(loc[0])
        if err["type"] == "missing":
            reason = "is required"
        elif err["type"] == "value_error":
            # Field validators raise ValueError; report its bare message
            reason = str(err["ctx"]["error"])
        else:
            reason = err["msg"]
        errors.append(FieldError(field, reason))
    return errors


def _run(
    schema: type[BaseModel], data: dict[str, Any], errors: list[FieldError]
) -> BaseModel | None:
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        errors.extend(field_errors(exc))
        return None


def check_date_order(start: Any, end: Any) -> FieldError | None:
    """Return an error when both dates are valid and start is after end."""
    start_date = parse_iso_date(start)
    end_date = parse_iso_date(end)
    if start_date is not None and end_date is not None and start_date > end_date:
        return DATE_ORDER
    return None


def validate_project_create(data: dict[str, Any]) -> dict[str, Any]:
    errors: list[FieldError] = []
    model = _run(ProjectCreate, data, errors)
    if date_error := check_date_order(data.get("start_date"), data.get("end_date")):
        errors.append(date_error)
    if errors or model is None:
        raise ValidationError(errors)
    return model.model_dump()


def validate_project_update(data: dict[str, Any]) -> dict[str, Any]:
    """Validate only the fields present in a partial update.

    Date ordering against stored values is checked by the caller once the
    current record is loaded (see ``merged_date_order``).
    """
    if not data:
        raise ValidationError([EMPTY_UPDATE])
    errors: list[FieldError] = []
    model = _run(ProjectUpdate, data, errors)
    if date_error := check_date_order(data.get("start_date"), data.get("end_date")):
        errors.append(date_error)
    if errors or model is None:
        raise ValidationError(errors)
    return model.model_dump(exclude_unset=True)


def merged_date_order(
    changes: dict[str, Any], current_start: date | None, current_end: date | None
) -> None:
    """Reject an update whose dates, merged over the stored ones, are out of order."""
    start = changes.get("start_date", current_start)
    end = changes.get("end_date", current_end)
    if check_date_order(start, end):
        raise ValidationError([DATE_ORDER])


def validate_visit_create(data: dict[str, Any]) -> dict[str, Any]:
    errors: list[FieldError] = []
    model = _run(VisitCreate, data, errors)
    if errors or model is None:
        raise ValidationError(errors)
    return model.model_dump()


def validate_visit_update(data: dict[str, Any]) -> dict[str, Any]:
    if not data:
        raise ValidationError([EMPTY_UPDATE])
    errors: list[FieldError] = []
    model = _run(VisitUpdate, data, errors)
    if errors or model is None:
        raise ValidationError(errors)
    return model.model_dump(exclude_unset=True)
