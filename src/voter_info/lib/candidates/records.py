"""Plain value records for candidates and contests.

Records are what the record store hands out. They carry no behaviour:
no validation, normalization or derived values. The store-assigned ``id``
is identity only and is excluded from equality, so two records with the
same visible fields compare equal.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CandidateRecord:
    """One candidate's attributes plus a non-owning contest back-reference."""

    name: str | None = None
    party: str | None = None
    order_on_ballot: int | None = None
    candidate_url: str | None = None
    email: str | None = None
    phone: str | None = None
    photo: bytes | None = field(default=None, repr=False)
    photo_url: str | None = None
    contest_id: uuid.UUID | None = None
    id: uuid.UUID | None = field(default=None, compare=False)

    @property
    def has_photo(self) -> bool:
        return self.photo is not None

    @classmethod
    def from_model(cls, obj: Any) -> "CandidateRecord":
        """Copy attributes off an ORM instance (or any attribute bag)."""
        return cls(
            id=obj.id,
            contest_id=obj.contest_id,
            name=obj.name,
            party=obj.party,
            order_on_ballot=obj.order_on_ballot,
            candidate_url=obj.candidate_url,
            email=obj.email,
            phone=obj.phone,
            photo=obj.photo,
            photo_url=obj.photo_url,
        )


@dataclass(frozen=True)
class ContestRecord:
    """A race or referendum; holds no candidate list of its own."""

    type: str | None = None
    office: str | None = None
    district_name: str | None = None
    district_scope: str | None = None
    ballot_placement: int | None = None
    election_name: str | None = None
    id: uuid.UUID | None = field(default=None, compare=False)

    @classmethod
    def from_model(cls, obj: Any) -> "ContestRecord":
        return cls(
            id=obj.id,
            type=obj.type,
            office=obj.office,
            district_name=obj.district_name,
            district_scope=obj.district_scope,
            ballot_placement=obj.ballot_placement,
            election_name=obj.election_name,
        )
