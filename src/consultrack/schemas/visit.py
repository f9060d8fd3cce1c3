"""Visit schemas for validation and API responses."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.consultrack.core.validators import validate_iso_date_format, validate_not_blank

TEXT_MAX_LENGTH = 200
OPPORTUNITY_NUMBER_MAX_LENGTH = 100


class _VisitRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    @field_validator("product", check_fields=False)
    @classmethod
    def validate_product(cls, v: str | None) -> str | None:
        return validate_not_blank(v)

    @field_validator("visit_date", mode="before", check_fields=False)
    @classmethod
    def validate_date_format(cls, v: object) -> object:
        return validate_iso_date_format(v)


class VisitCreate(_VisitRules):
    """Normalized visit accepted for creation (product and hours required)."""

    product: str = Field(max_length=TEXT_MAX_LENGTH)
    client_name: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    opportunity_number: str | None = Field(default=None, max_length=OPPORTUNITY_NUMBER_MAX_LENGTH)
    country: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    consultant: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    hours: float = Field(gt=0, allow_inf_nan=False)
    visit_date: date | None = None
    opportunity_value: float = Field(default=0, ge=0, allow_inf_nan=False)


class VisitUpdate(_VisitRules):
    """Normalized partial visit update."""

    product: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    client_name: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    opportunity_number: str | None = Field(default=None, max_length=OPPORTUNITY_NUMBER_MAX_LENGTH)
    country: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    consultant: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    hours: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    visit_date: date | None = None
    opportunity_value: float | None = Field(default=None, ge=0, allow_inf_nan=False)

    @field_validator("product", "hours", "opportunity_value")
    @classmethod
    def reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("must not be null")
        return v


class VisitRead(BaseModel):
    """Flat visit record returned by every visit endpoint."""

    id: UUID
    product: str
    client_name: str | None
    opportunity_number: str | None
    country: str | None
    consultant: str | None
    hours: float
    visit_date: date | None
    opportunity_value: float
    active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
