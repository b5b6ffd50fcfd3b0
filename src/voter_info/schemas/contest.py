"""Pydantic v2 schemas for contest operations."""

import uuid

from pydantic import BaseModel, Field


class ContestCreate(BaseModel):
    """Attributes for a new contest."""

    type: str | None = Field(default=None, max_length=50)
    office: str | None = Field(default=None, max_length=300)
    district_name: str | None = Field(default=None, max_length=300)
    district_scope: str | None = Field(default=None, max_length=50)
    ballot_placement: int | None = None
    election_name: str | None = Field(default=None, max_length=500)


class ContestResponse(BaseModel):
    """A contest as returned by the API."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    type: str | None = None
    office: str | None = None
    district_name: str | None = None
    district_scope: str | None = None
    ballot_placement: int | None = None
    election_name: str | None = None
