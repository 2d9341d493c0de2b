"""Initial clinic schema.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "owners",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(length=30), nullable=False),
        sa.Column("last_name", sa.String(length=30), nullable=False),
        sa.Column("address", sa.String(length=255)),
        sa.Column("city", sa.String(length=80)),
        sa.Column("telephone", sa.String(length=20)),
    )
    op.create_index("ix_owners_last_name", "owners", ["last_name"])

    op.create_table(
        "types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=80), nullable=False, unique=True),
    )

    op.create_table(
        "pets",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=30), nullable=False),
        sa.Column("birth_date", sa.Date()),
        sa.Column(
            "type_id",
            sa.Integer(),
            sa.ForeignKey("types.id", ondelete="RESTRICT"),
        ),
        sa.Column(
            "owner_id",
            sa.Integer(),
            sa.ForeignKey("owners.id", ondelete="CASCADE"),
        ),
    )
    op.create_index("ix_pets_name", "pets", ["name"])

    op.create_table(
        "visits",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "pet_id",
            sa.Integer(),
            sa.ForeignKey("pets.id", ondelete="CASCADE"),
        ),
        sa.Column("visit_date", sa.Date()),
        sa.Column("description", sa.String(length=255)),
    )


def downgrade() -> None:
    op.drop_table("visits")
    op.drop_index("ix_pets_name", table_name="pets")
    op.drop_table("pets")
    op.drop_table("types")
    op.drop_index("ix_owners_last_name", table_name="owners")
    op.drop_table("owners")
