"""Contest ORM model.

A contest is one race or referendum on a ballot. It owns its candidates:
removing a contest removes every candidate attached to it.
"""

from sqlalchemy import Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from voter_info.models.base import Base, TimestampMixin, UUIDMixin


class Contest(Base, UUIDMixin, TimestampMixin):
    """A race or referendum whose candidates are imported from a voterinfo feed."""

    __tablename__ = "contests"

    type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    office: Mapped[str | None] = mapped_column(String(300), nullable=True)
    district_name: Mapped[str | None] = mapped_column(String(300), nullable=True)
    district_scope: Mapped[str | None] = mapped_column(String(50), nullable=True)
    ballot_placement: Mapped[int | None] = mapped_column(Integer, nullable=True)
    election_name: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Relationships
    candidates: Mapped[list["Candidate"]] = relationship(  # noqa: F821
        back_populates="contest",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("office", "district_name", name="uq_contest_office_district"),
        Index("idx_contests_ballot_placement", "ballot_placement"),
    )
