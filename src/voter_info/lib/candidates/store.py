"""Record store interface and an in-process implementation.

The store owns the lifetime of candidate and contest records. A candidate's
``contest_id`` is a non-owning back-reference: deleting a candidate never
touches its contest, while deleting a contest (or resetting the store)
removes every candidate attached to it.

A store instance expects a single writer. Callers that share one across
tasks must serialize mutations themselves.
"""

import dataclasses
import uuid
from typing import Protocol

from voter_info.lib.candidates.ordering import sort_candidates, sort_contests
from voter_info.lib.candidates.records import CandidateRecord, ContestRecord
from voter_info.schemas.candidate import CandidateCreate, CandidateUpdate
from voter_info.schemas.contest import ContestCreate


class RecordNotFoundError(LookupError):
    """Raised when an operation requires a record that does not exist.

    Args:
        kind: Record kind, e.g. ``"candidate"`` or ``"contest"``.
        record_id: The id that was not found.
    """

    def __init__(self, kind: str, record_id: uuid.UUID) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id} not found")


class DuplicateContestError(ValueError):
    """Raised when a contest would share its (office, district name) key with another.

    ``None`` matches ``None`` on both parts of the key.
    """

    def __init__(self, office: str | None, district_name: str | None) -> None:
        self.office = office
        self.district_name = district_name
        super().__init__(f"contest {office!r} in district {district_name!r} already exists")


class RecordStore(Protocol):
    """CRUD over contest and candidate value records."""

    async def create_contest(self, data: ContestCreate) -> ContestRecord: ...

    async def get_contest(self, contest_id: uuid.UUID) -> ContestRecord | None: ...

    async def find_contest(self, office: str | None, district_name: str | None) -> ContestRecord | None: ...

    async def list_contests(self) -> list[ContestRecord]: ...

    async def update_contest(self, contest_id: uuid.UUID, data: ContestCreate) -> ContestRecord | None: ...

    async def delete_contest(self, contest_id: uuid.UUID) -> bool: ...

    async def create_candidate(
        self,
        data: CandidateCreate,
        contest_id: uuid.UUID | None = None,
    ) -> CandidateRecord: ...

    async def get_candidate(self, candidate_id: uuid.UUID) -> CandidateRecord | None: ...

    async def list_candidates(self, contest_id: uuid.UUID) -> list[CandidateRecord]: ...

    async def update_candidate(self, candidate_id: uuid.UUID, data: CandidateUpdate) -> CandidateRecord | None: ...

    async def assign_contest(self, candidate_id: uuid.UUID, contest_id: uuid.UUID) -> CandidateRecord: ...

    async def delete_candidate(self, candidate_id: uuid.UUID) -> bool: ...

    async def reset(self) -> None: ...


class InMemoryRecordStore:
    """Dictionary-backed record store.

    Suitable for tests and for short-lived imports that never touch a
    database. Implements the same semantics as the SQL-backed store.
    """

    def __init__(self) -> None:
        self._contests: dict[uuid.UUID, ContestRecord] = {}
        self._candidates: dict[uuid.UUID, CandidateRecord] = {}

    async def create_contest(self, data: ContestCreate) -> ContestRecord:
        if await self.find_contest(data.office, data.district_name) is not None:
            raise DuplicateContestError(data.office, data.district_name)
        record = ContestRecord(id=uuid.uuid4(), **data.model_dump())
        self._contests[record.id] = record
        return record

    async def get_contest(self, contest_id: uuid.UUID) -> ContestRecord | None:
        return self._contests.get(contest_id)

    async def find_contest(self, office: str | None, district_name: str | None) -> ContestRecord | None:
        for record in self._contests.values():
            if record.office == office and record.district_name == district_name:
                return record
        return None

    async def list_contests(self) -> list[ContestRecord]:
        return sort_contests(self._contests.values())

    async def update_contest(self, contest_id: uuid.UUID, data: ContestCreate) -> ContestRecord | None:
        existing = self._contests.get(contest_id)
        if existing is None:
            return None
        clash = await self.find_contest(data.office, data.district_name)
        if clash is not None and clash.id != contest_id:
            raise DuplicateContestError(data.office, data.district_name)
        updated = dataclasses.replace(existing, **data.model_dump())
        self._contests[contest_id] = updated
        return updated

    async def delete_contest(self, contest_id: uuid.UUID) -> bool:
        if self._contests.pop(contest_id, None) is None:
            return False
        orphaned = [cid for cid, rec in self._candidates.items() if rec.contest_id == contest_id]
        for cid in orphaned:
            del self._candidates[cid]
        return True

    async def create_candidate(
        self,
        data: CandidateCreate,
        contest_id: uuid.UUID | None = None,
    ) -> CandidateRecord:
        if contest_id is not None and contest_id not in self._contests:
            raise RecordNotFoundError("contest", contest_id)
        record = CandidateRecord(id=uuid.uuid4(), contest_id=contest_id, **data.model_dump())
        self._candidates[record.id] = record
        return record

    async def get_candidate(self, candidate_id: uuid.UUID) -> CandidateRecord | None:
        return self._candidates.get(candidate_id)

    async def list_candidates(self, contest_id: uuid.UUID) -> list[CandidateRecord]:
        return sort_candidates(rec for rec in self._candidates.values() if rec.contest_id == contest_id)

    async def update_candidate(self, candidate_id: uuid.UUID, data: CandidateUpdate) -> CandidateRecord | None:
        existing = self._candidates.get(candidate_id)
        if existing is None:
            return None
        updated = dataclasses.replace(existing, **data.model_dump(exclude_unset=True))
        self._candidates[candidate_id] = updated
        return updated

    async def assign_contest(self, candidate_id: uuid.UUID, contest_id: uuid.UUID) -> CandidateRecord:
        existing = self._candidates.get(candidate_id)
        if existing is None:
            raise RecordNotFoundError("candidate", candidate_id)
        if contest_id not in self._contests:
            raise RecordNotFoundError("contest", contest_id)
        updated = dataclasses.replace(existing, contest_id=contest_id)
        self._candidates[candidate_id] = updated
        return updated

    async def delete_candidate(self, candidate_id: uuid.UUID) -> bool:
        return self._candidates.pop(candidate_id, None) is not None

    async def reset(self) -> None:
        self._candidates.clear()
        self._contests.clear()
