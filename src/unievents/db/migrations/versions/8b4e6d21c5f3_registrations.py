"""Registrations: one row per (event, user)

Revision ID: 8b4e6d21c5f3
Revises: 3f1c2a9d7e10
Create Date: 2026-10-19 15:40:08.114927
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8b4e6d21c5f3'
down_revision: Union[str, None] = '3f1c2a9d7e10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "registrations",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("event_id", sa.String(24), nullable=False),
        sa.Column("user_id", sa.String(24), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("form_data", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True)),
        sa.UniqueConstraint(
            "event_id", "user_id", name="uq_registrations_event_user"
        ),
    )
    op.create_index("ix_registrations_event_id", "registrations", ["event_id"])


def downgrade() -> None:
    op.drop_index("ix_registrations_event_id", table_name="registrations")
    op.drop_table("registrations")
