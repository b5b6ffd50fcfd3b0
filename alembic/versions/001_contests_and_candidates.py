"""Initial migration: contests and candidates tables.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "contests",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("type", sa.String(50), nullable=True),
        sa.Column("office", sa.String(300), nullable=True),
        sa.Column("district_name", sa.String(300), nullable=True),
        sa.Column("district_scope", sa.String(50), nullable=True),
        sa.Column("ballot_placement", sa.Integer, nullable=True),
        sa.Column("election_name", sa.String(500), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("office", "district_name", name="uq_contest_office_district"),
    )
    op.create_index("idx_contests_ballot_placement", "contests", ["ballot_placement"])

    op.create_table(
        "candidates",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column(
            "contest_id",
            sa.Uuid,
            sa.ForeignKey("contests.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("name", sa.String(300), nullable=True),
        sa.Column("party", sa.String(200), nullable=True),
        sa.Column("order_on_ballot", sa.Integer, nullable=True),
        sa.Column("candidate_url", sa.Text, nullable=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("photo", sa.LargeBinary, nullable=True),
        sa.Column("photo_url", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("idx_candidates_contest_id", "candidates", ["contest_id"])


def downgrade() -> None:
    op.drop_table("candidates")
    op.drop_table("contests")
