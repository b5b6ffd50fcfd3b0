"""Contest API endpoints."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from voter_info.core.dependencies import get_record_store
from voter_info.lib.candidates import RecordStore
from voter_info.schemas.candidate import CandidateListResponse, CandidateResponse
from voter_info.schemas.contest import ContestResponse

contests_router = APIRouter(
    prefix="/contests",
    tags=["contests"],
)


@contests_router.get("")
async def list_all_contests(
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> dict:
    """List contests by ballot placement, then office."""
    contests = await store.list_contests()
    return {"items": [ContestResponse.model_validate(c) for c in contests]}


@contests_router.get("/{contest_id}")
async def get_contest(
    contest_id: uuid.UUID,
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> ContestResponse:
    contest = await store.get_contest(contest_id)
    if contest is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contest not found")
    return ContestResponse.model_validate(contest)


@contests_router.get("/{contest_id}/candidates")
async def list_contest_candidates(
    contest_id: uuid.UUID,
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> CandidateListResponse:
    """List a contest's candidates in ballot order, alphabetical where no order is set."""
    if await store.get_contest(contest_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contest not found")
    candidates = await store.list_candidates(contest_id)
    return CandidateListResponse(
        contest_id=contest_id,
        items=[CandidateResponse.model_validate(c) for c in candidates],
    )


@contests_router.delete("/{contest_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contest(
    contest_id: uuid.UUID,
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> None:
    """Delete a contest together with its candidates."""
    if not await store.delete_contest(contest_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contest not found")
    logger.info(f"Contest {contest_id} deleted via API")
