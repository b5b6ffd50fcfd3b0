"""Voterinfo feed JSON parser and Pydantic validation models.

Parses a voterinfo document (the shape returned by the Google Civic
Information ``voterinfo`` query) into validated Pydantic models. Only the
parts needed to populate contests, candidates and polling place popups
are modelled; unknown keys are ignored.

Field names use camelCase to match the feed JSON structure.
"""

# ruff: noqa: N815

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from voter_info.schemas.polling_location import PollingLocationWrapper


class FeedParseError(Exception):
    """Raised when a voterinfo document cannot be read or validated."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


def _coerce_null_to_list(v: Any) -> Any:
    """Coerce explicit JSON null to empty list."""
    return v if v is not None else []


def _coerce_optional_int(v: Any) -> Any:
    """Accept numeric strings (the feed encodes positions as strings); blank becomes None."""
    if isinstance(v, str):
        v = v.strip()
        return int(v) if v else None
    return v


class FeedElection(BaseModel):
    """The election the document describes."""

    id: str | None = None
    name: str | None = None
    electionDay: str | None = None


class FeedDistrict(BaseModel):
    """Electoral district a contest is held in."""

    name: str | None = None
    scope: str | None = None
    id: str | None = None


class FeedCandidate(BaseModel):
    """A candidate entry inside a contest."""

    name: str | None = None
    party: str | None = None
    candidateUrl: str | None = None
    phone: str | None = None
    photoUrl: str | None = None
    email: str | None = None
    orderOnBallot: int | None = None

    @field_validator("orderOnBallot", mode="before")
    @classmethod
    def _coerce_order(cls, v: Any) -> Any:
        return _coerce_optional_int(v)


class FeedContest(BaseModel):
    """A race or referendum on the ballot."""

    type: str | None = None
    office: str | None = None
    referendumTitle: str | None = None
    ballotPlacement: int | None = None
    district: FeedDistrict | None = None
    candidates: list[FeedCandidate] = Field(default_factory=list)

    @field_validator("ballotPlacement", mode="before")
    @classmethod
    def _coerce_placement(cls, v: Any) -> Any:
        return _coerce_optional_int(v)

    @field_validator("candidates", mode="before")
    @classmethod
    def _coerce_candidates(cls, v: Any) -> Any:
        return _coerce_null_to_list(v)

    @property
    def title(self) -> str | None:
        """Office for races, referendum title for referendums."""
        return self.office or self.referendumTitle

    @property
    def district_name(self) -> str | None:
        return self.district.name if self.district else None


class FeedAddress(BaseModel):
    """Postal address of a polling place."""

    locationName: str | None = None
    line1: str | None = None
    line2: str | None = None
    line3: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None

    def lines(self) -> list[str]:
        """Street lines followed by a ``City, ST 12345`` line."""
        result = [line for line in (self.line1, self.line2, self.line3) if line and line.strip()]
        locality = ", ".join(part for part in (self.city, self.state) if part and part.strip())
        last = " ".join(part for part in (locality, self.zip) if part and part.strip())
        if last:
            result.append(last)
        return result


class FeedPollingLocation(BaseModel):
    """A polling place, early vote site or drop-off location."""

    name: str | None = None
    address: FeedAddress | None = None
    pollingHours: str | None = None
    notes: str | None = None

    def to_wrapper(self) -> PollingLocationWrapper:
        """Build the popup display wrapper for this location."""
        address = self.address or FeedAddress()
        name = self.name or address.locationName or (address.line1 or "Polling location")
        return PollingLocationWrapper.from_polling_location(
            name=name,
            address_lines=address.lines(),
            polling_hours=self.pollingHours,
            notes=self.notes,
        )


class VoterInfoFeed(BaseModel):
    """Top-level voterinfo document."""

    election: FeedElection | None = None
    contests: list[FeedContest] = Field(default_factory=list)
    pollingLocations: list[FeedPollingLocation] = Field(default_factory=list)
    earlyVoteSites: list[FeedPollingLocation] = Field(default_factory=list)

    @field_validator("contests", "pollingLocations", "earlyVoteSites", mode="before")
    @classmethod
    def _coerce_lists(cls, v: Any) -> Any:
        return _coerce_null_to_list(v)


def parse_voter_info_feed(raw_json: dict) -> VoterInfoFeed:
    """Parse and validate a raw voterinfo JSON dict.

    Args:
        raw_json: The decoded JSON document.

    Returns:
        A validated VoterInfoFeed instance.

    Raises:
        pydantic.ValidationError: If the JSON structure is invalid.
    """
    return VoterInfoFeed.model_validate(raw_json)


def load_voter_info_feed(path: Path) -> VoterInfoFeed:
    """Read and parse a voterinfo JSON file.

    Raises:
        FeedParseError: If the file cannot be read, is not JSON, or fails validation.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        msg = f"Cannot read feed file: {e}"
        raise FeedParseError(msg, source=str(path)) from e
    except json.JSONDecodeError as e:
        msg = f"Feed file is not valid JSON: {e}"
        raise FeedParseError(msg, source=str(path)) from e
    if not isinstance(raw, dict):
        msg = "Feed document must be a JSON object"
        raise FeedParseError(msg, source=str(path))
    try:
        return parse_voter_info_feed(raw)
    except ValidationError as e:
        msg = f"Feed document failed validation: {e.error_count()} error(s)"
        raise FeedParseError(msg, source=str(path)) from e
