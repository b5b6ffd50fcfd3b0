"""Candidate API endpoints."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from loguru import logger

from voter_info.core.dependencies import get_record_store
from voter_info.lib.candidates import CandidateRecord, RecordStore
from voter_info.schemas.candidate import CandidateResponse, CandidateUpdate

candidates_router = APIRouter(
    prefix="/candidates",
    tags=["candidates"],
)


async def _require_candidate(store: RecordStore, candidate_id: uuid.UUID) -> CandidateRecord:
    candidate = await store.get_candidate(candidate_id)
    if candidate is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Candidate not found")
    return candidate


@candidates_router.get("/{candidate_id}")
async def get_candidate(
    candidate_id: uuid.UUID,
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> CandidateResponse:
    candidate = await _require_candidate(store, candidate_id)
    return CandidateResponse.model_validate(candidate)


@candidates_router.get("/{candidate_id}/photo")
async def get_candidate_photo(
    candidate_id: uuid.UUID,
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> Response:
    """Raw photo bytes, when the feed supplied an image."""
    candidate = await _require_candidate(store, candidate_id)
    if candidate.photo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Candidate has no photo")
    return Response(content=candidate.photo, media_type="application/octet-stream")


@candidates_router.patch("/{candidate_id}")
async def update_candidate(
    candidate_id: uuid.UUID,
    body: CandidateUpdate,
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> CandidateResponse:
    """Apply a partial update; omitted fields are left unchanged."""
    candidate = await store.update_candidate(candidate_id, body)
    if candidate is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Candidate not found")
    return CandidateResponse.model_validate(candidate)


@candidates_router.delete("/{candidate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_candidate(
    candidate_id: uuid.UUID,
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> None:
    """Delete a candidate. Its contest is left in place."""
    if not await store.delete_candidate(candidate_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Candidate not found")
    logger.info(f"Candidate {candidate_id} deleted via API")
