"""Pydantic v2 schemas for candidate operations."""

import uuid

from pydantic import BaseModel, Field


class CandidateCreate(BaseModel):
    """Attributes for a new candidate.

    ``name`` is optional on purpose: it is required for a sensible display
    but the record store accepts whatever the feed supplies.
    """

    name: str | None = Field(default=None, max_length=300)
    party: str | None = Field(default=None, max_length=200)
    order_on_ballot: int | None = None
    candidate_url: str | None = None
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    photo: bytes | None = None
    photo_url: str | None = None


class CandidateUpdate(BaseModel):
    """Partial update; only fields explicitly set are applied."""

    name: str | None = Field(default=None, max_length=300)
    party: str | None = Field(default=None, max_length=200)
    order_on_ballot: int | None = None
    candidate_url: str | None = None
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    photo: bytes | None = None
    photo_url: str | None = None


class CandidateResponse(BaseModel):
    """A candidate as returned by the API (photo bytes are not inlined)."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    contest_id: uuid.UUID | None = None
    name: str | None = None
    party: str | None = None
    order_on_ballot: int | None = None
    candidate_url: str | None = None
    email: str | None = None
    phone: str | None = None
    photo_url: str | None = None
    has_photo: bool = False


class CandidateListResponse(BaseModel):
    """Candidates of one contest in display order."""

    contest_id: uuid.UUID
    items: list[CandidateResponse]
