"""Initial schema: users, venues, events

Learn: Ids are 24-char hex strings generated by the application.
References between tables (events.venue_id, events.created_by,
events.coordinators) are deliberately not foreign keys.

Revision ID: 3f1c2a9d7e10
Revises:
Create Date: 2026-10-19 10:12:41.503211
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7e10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("department", sa.String(100)),
        sa.Column("student_id", sa.String(50)),
        sa.Column("faculty_id", sa.String(50)),
        sa.Column("course", sa.String(100)),
        sa.Column("branch", sa.String(100)),
        sa.Column("created_at", sa.DateTime(timezone=True)),
    )

    op.create_table(
        "venues",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("location", sa.String(200)),
        sa.Column("capacity", sa.Integer()),
        sa.Column("address", sa.Text()),
        sa.Column("map_link", sa.Text()),
        sa.Column("created_at", sa.DateTime(timezone=True)),
    )

    op.create_table(
        "events",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("type", sa.String(50)),
        sa.Column("start_date", sa.DateTime(timezone=True)),
        sa.Column("end_date", sa.DateTime(timezone=True)),
        sa.Column("registration_deadline", sa.DateTime(timezone=True)),
        sa.Column("max_participants", sa.Integer()),
        sa.Column("registered_count", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("venue_id", sa.String(24)),
        sa.Column("coordinators", sa.JSON(), nullable=False),
        sa.Column("created_by", sa.String(24)),
        sa.Column("updated_by", sa.String(24)),
        sa.Column("created_at", sa.DateTime(timezone=True)),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
    )
    op.create_index("ix_events_venue_id", "events", ["venue_id"])


def downgrade() -> None:
    op.drop_index("ix_events_venue_id", table_name="events")
    op.drop_table("events")
    op.drop_table("venues")
    op.drop_table("users")
