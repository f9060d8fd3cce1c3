"""Project schemas for validation and API responses."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.consultrack.core.validators import validate_iso_date_format, validate_not_blank

TEXT_MAX_LENGTH = 200
OPPORTUNITY_NUMBER_MAX_LENGTH = 100
OBSERVATIONS_MAX_LENGTH = 5000


class _ProjectRules(BaseModel):
    """Per-field rules shared by create and update."""

    model_config = ConfigDict(extra="forbid")

    @field_validator("name", "country", "consultant", check_fields=False)
    @classmethod
    def validate_required_text(cls, v: str | None) -> str | None:
        return validate_not_blank(v)

    @field_validator("start_date", "end_date", mode="before", check_fields=False)
    @classmethod
    def validate_date_format(cls, v: object) -> object:
        return validate_iso_date_format(v)


class ProjectCreate(_ProjectRules):
    """Normalized project accepted for creation."""

    name: str = Field(max_length=TEXT_MAX_LENGTH)
    country: str = Field(max_length=TEXT_MAX_LENGTH)
    consultant: str = Field(max_length=TEXT_MAX_LENGTH)
    opportunity_number: str | None = Field(default=None, max_length=OPPORTUNITY_NUMBER_MAX_LENGTH)
    client_name: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    project_manager: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    opportunity_amount: float = Field(default=0, ge=0, allow_inf_nan=False)
    planned_hours: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    executed_hours: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    hourly_rate: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    start_date: date | None = None
    end_date: date | None = None
    observations: str | None = Field(default=None, max_length=OBSERVATIONS_MAX_LENGTH)
    finalized: bool = False


class ProjectUpdate(_ProjectRules):
    """Normalized partial update. Only explicitly set fields are applied."""

    name: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    country: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    consultant: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    opportunity_number: str | None = Field(default=None, max_length=OPPORTUNITY_NUMBER_MAX_LENGTH)
    client_name: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    project_manager: str | None = Field(default=None, max_length=TEXT_MAX_LENGTH)
    opportunity_amount: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    planned_hours: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    executed_hours: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    hourly_rate: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    start_date: date | None = None
    end_date: date | None = None
    observations: str | None = Field(default=None, max_length=OBSERVATIONS_MAX_LENGTH)
    finalized: bool | None = None

    @field_validator("name", "country", "consultant", "opportunity_amount", "finalized")
    @classmethod
    def reject_null(cls, v: object) -> object:
        # These columns are NOT NULL; the normalizer never produces None for them
        if v is None:
            raise ValueError("must not be null")
        return v


class ProjectRead(BaseModel):
    """Flat project record returned by every project endpoint."""

    id: UUID
    name: str
    country: str
    consultant: str
    opportunity_number: str | None
    client_name: str | None
    project_manager: str | None
    opportunity_amount: float
    planned_hours: float | None
    executed_hours: float | None
    hourly_rate: float | None
    start_date: date | None
    end_date: date | None
    observations: str | None
    finalized: bool
    active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
