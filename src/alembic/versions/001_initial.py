"""Initial migration

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # 1. Projects table
    op.create_table(
        "projects",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("country", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("consultant", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column(
            "opportunity_number", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True
        ),
        sa.Column("client_name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=True),
        sa.Column("project_manager", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=True),
        sa.Column("opportunity_amount", sa.Float(), nullable=False, server_default="0"),
        sa.Column("planned_hours", sa.Float(), nullable=True),
        sa.Column("executed_hours", sa.Float(), nullable=True),
        sa.Column("hourly_rate", sa.Float(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("observations", sqlmodel.sql.sqltypes.AutoString(length=5000), nullable=True),
        sa.Column("finalized", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_opportunity_number", "projects", ["opportunity_number"])
    op.create_index("ix_projects_active", "projects", ["active"])
    op.create_index("ix_projects_created_at", "projects", ["created_at"])

    # 2. Visits table (no foreign key to projects)
    op.create_table(
        "visits",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("product", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("client_name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=True),
        sa.Column(
            "opportunity_number", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True
        ),
        sa.Column("country", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=True),
        sa.Column("consultant", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=True),
        sa.Column("hours", sa.Float(), nullable=False),
        sa.Column("visit_date", sa.Date(), nullable=True),
        sa.Column("opportunity_value", sa.Float(), nullable=False, server_default="0"),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_visits_opportunity_number", "visits", ["opportunity_number"])
    op.create_index("ix_visits_active", "visits", ["active"])
    op.create_index("ix_visits_created_at", "visits", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_visits_created_at", table_name="visits")
    op.drop_index("ix_visits_active", table_name="visits")
    op.drop_index("ix_visits_opportunity_number", table_name="visits")
    op.drop_table("visits")

    op.drop_index("ix_projects_created_at", table_name="projects")
    op.drop_index("ix_projects_active", table_name="projects")
    op.drop_index("ix_projects_opportunity_number", table_name="projects")
    op.drop_table("projects")
