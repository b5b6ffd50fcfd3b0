"""Candidate service: SQLAlchemy-backed record store for contests and candidates."""

import uuid

from loguru import logger
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from voter_info.lib.candidates import (
    CandidateRecord,
    ContestRecord,
    DuplicateContestError,
    RecordNotFoundError,
    sort_candidates,
    sort_contests,
)
from voter_info.models.candidate import Candidate
from voter_info.models.contest import Contest
from voter_info.schemas.candidate import CandidateCreate, CandidateUpdate
from voter_info.schemas.contest import ContestCreate


class SqlRecordStore:
    """Record store over one async session.

    The session is the single writer for this store; every mutating call
    commits before returning.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_contest(self, data: ContestCreate) -> ContestRecord:
        if await self.find_contest(data.office, data.district_name) is not None:
            raise DuplicateContestError(data.office, data.district_name)
        contest = Contest(**data.model_dump())
        self.session.add(contest)
        await self.session.commit()
        return ContestRecord.from_model(contest)

    async def get_contest(self, contest_id: uuid.UUID) -> ContestRecord | None:
        contest = await self.session.get(Contest, contest_id)
        return ContestRecord.from_model(contest) if contest else None

    async def find_contest(self, office: str | None, district_name: str | None) -> ContestRecord | None:
        office_clause = Contest.office.is_(None) if office is None else Contest.office == office
        district_clause = (
            Contest.district_name.is_(None) if district_name is None else Contest.district_name == district_name
        )
        result = await self.session.execute(select(Contest).where(office_clause, district_clause))
        contest = result.scalars().first()
        return ContestRecord.from_model(contest) if contest else None

    async def list_contests(self) -> list[ContestRecord]:
        result = await self.session.execute(select(Contest))
        return sort_contests(ContestRecord.from_model(c) for c in result.scalars().all())

    async def update_contest(self, contest_id: uuid.UUID, data: ContestCreate) -> ContestRecord | None:
        contest = await self.session.get(Contest, contest_id)
        if contest is None:
            return None
        clash = await self.find_contest(data.office, data.district_name)
        if clash is not None and clash.id != contest_id:
            raise DuplicateContestError(data.office, data.district_name)
        for key, value in data.model_dump().items():
            setattr(contest, key, value)
        await self.session.commit()
        return ContestRecord.from_model(contest)

    async def delete_contest(self, contest_id: uuid.UUID) -> bool:
        contest = await self.session.get(Contest, contest_id)
        if contest is None:
            return False
        await self.session.execute(delete(Candidate).where(Candidate.contest_id == contest_id))
        await self.session.delete(contest)
        await self.session.commit()
        logger.info(f"Deleted contest {contest_id} and its candidates")
        return True

    async def create_candidate(
        self,
        data: CandidateCreate,
        contest_id: uuid.UUID | None = None,
    ) -> CandidateRecord:
        if contest_id is not None and await self.session.get(Contest, contest_id) is None:
            raise RecordNotFoundError("contest", contest_id)
        candidate = Candidate(contest_id=contest_id, **data.model_dump())
        self.session.add(candidate)
        await self.session.commit()
        return CandidateRecord.from_model(candidate)

    async def get_candidate(self, candidate_id: uuid.UUID) -> CandidateRecord | None:
        candidate = await self.session.get(Candidate, candidate_id)
        return CandidateRecord.from_model(candidate) if candidate else None

    async def list_candidates(self, contest_id: uuid.UUID) -> list[CandidateRecord]:
        result = await self.session.execute(select(Candidate).where(Candidate.contest_id == contest_id))
        return sort_candidates(CandidateRecord.from_model(c) for c in result.scalars().all())

    async def update_candidate(self, candidate_id: uuid.UUID, data: CandidateUpdate) -> CandidateRecord | None:
        candidate = await self.session.get(Candidate, candidate_id)
        if candidate is None:
            return None
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(candidate, key, value)
        await self.session.commit()
        return CandidateRecord.from_model(candidate)

    async def assign_contest(self, candidate_id: uuid.UUID, contest_id: uuid.UUID) -> CandidateRecord:
        candidate = await self.session.get(Candidate, candidate_id)
        if candidate is None:
            raise RecordNotFoundError("candidate", candidate_id)
        if await self.session.get(Contest, contest_id) is None:
            raise RecordNotFoundError("contest", contest_id)
        candidate.contest_id = contest_id
        await self.session.commit()
        return CandidateRecord.from_model(candidate)

    async def delete_candidate(self, candidate_id: uuid.UUID) -> bool:
        candidate = await self.session.get(Candidate, candidate_id)
        if candidate is None:
            return False
        await self.session.delete(candidate)
        await self.session.commit()
        logger.info(f"Deleted candidate {candidate_id}")
        return True

    async def reset(self) -> None:
        await self.session.execute(delete(Candidate))
        await self.session.execute(delete(Contest))
        await self.session.commit()
        logger.warning("Record store reset: all contests and candidates removed")
