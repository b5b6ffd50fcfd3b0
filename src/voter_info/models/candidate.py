"""Candidate ORM model.

Every column is nullable, including ``name``: the voterinfo feed does not
guarantee any candidate attribute, so the schema stays permissive and
display code supplies its own fallback.
"""

import uuid

from sqlalchemy import ForeignKey, Index, Integer, LargeBinary, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from voter_info.models.base import Base, TimestampMixin, UUIDMixin


class Candidate(Base, UUIDMixin, TimestampMixin):
    """A single candidate standing in a contest."""

    __tablename__ = "candidates"

    contest_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("contests.id", ondelete="CASCADE"),
        nullable=True,
    )
    name: Mapped[str | None] = mapped_column(String(300), nullable=True)
    party: Mapped[str | None] = mapped_column(String(200), nullable=True)
    order_on_ballot: Mapped[int | None] = mapped_column(Integer, nullable=True)
    candidate_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    photo: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
    photo_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    contest: Mapped["Contest | None"] = relationship(back_populates="candidates")  # noqa: F821

    __table_args__ = (Index("idx_candidates_contest_id", "contest_id"),)
