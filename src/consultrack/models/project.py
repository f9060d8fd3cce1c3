"""Project model - consulting engagement record."""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.consultrack.models.base import utc_now


class Project(SQLModel, table=True):
    """Consulting project.

    ``finalized`` is the business "work is complete" flag; ``active`` is the
    soft-delete flag. A project can only be archived (``active=False``) once it
    is finalized, and it is never physically deleted.
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    country: str = Field(max_length=200)
    consultant: str = Field(max_length=200)
    opportunity_number: str | None = Field(default=None, max_length=100, index=True)
    client_name: str | None = Field(default=None, max_length=200)
    project_manager: str | None = Field(default=None, max_length=200)
    opportunity_amount: float = Field(default=0)
    planned_hours: float | None = Field(default=None)
    executed_hours: float | None = Field(default=None)
    hourly_rate: float | None = Field(default=None)
    start_date: date | None = Field(default=None)
    end_date: date | None = Field(default=None)
    observations: str | None = Field(default=None, max_length=5000)
    finalized: bool = Field(default=False)
    active: bool = Field(default=True, index=True)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
