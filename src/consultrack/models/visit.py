"""Visit model - commercial visit event."""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.consultrack.models.base import utc_now


class Visit(SQLModel, table=True):
    """Commercial visit.

    Client name and opportunity number are denormalized copies used for
    correlation only; there is no foreign key to ``projects`` so a visit can
    reference an opportunity before any project exists for it.
    """

    __tablename__ = "visits"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    product: str = Field(max_length=200)
    client_name: str | None = Field(default=None, max_length=200)
    opportunity_number: str | None = Field(default=None, max_length=100, index=True)
    country: str | None = Field(default=None, max_length=200)
    consultant: str | None = Field(default=None, max_length=200)
    hours: float
    visit_date: date | None = Field(default=None)
    opportunity_value: float = Field(default=0)
    active: bool = Field(default=True, index=True)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
