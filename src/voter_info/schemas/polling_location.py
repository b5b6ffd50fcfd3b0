"""Read-only display wrapper consumed by the info popup.

The wrapper bundles already-validated, display-ready strings for either a
polling place or a candidate. The popup reads it; nothing writes it.
"""

from collections.abc import Sequence
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from voter_info.lib.candidates.records import CandidateRecord

UNNAMED_CANDIDATE = "Unnamed candidate"


class PollingLocationWrapper(BaseModel):
    """Display fields for one popup, title first."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    DISPLAY_ORDER: ClassVar[tuple[str, ...]] = (
        "name",
        "party",
        "address",
        "polling_hours",
        "phone",
        "email",
        "website",
        "notes",
    )

    name: str
    address: str | None = None
    polling_hours: str | None = None
    notes: str | None = None
    party: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None

    def display_fields(self) -> list[tuple[str, str]]:
        """Populated fields in display order; blank values are skipped."""
        fields: list[tuple[str, str]] = []
        for field in self.DISPLAY_ORDER:
            value = getattr(self, field)
            if value is not None and value.strip():
                fields.append((field, value.strip()))
        return fields

    @classmethod
    def from_candidate(cls, record: CandidateRecord) -> "PollingLocationWrapper":
        """Wrap a candidate record, substituting a label for a missing name."""
        name = record.name if record.name and record.name.strip() else UNNAMED_CANDIDATE
        return cls(
            name=name,
            party=record.party,
            phone=record.phone,
            email=record.email,
            website=record.candidate_url,
        )

    @classmethod
    def from_polling_location(
        cls,
        name: str,
        address_lines: Sequence[str] = (),
        polling_hours: str | None = None,
        notes: str | None = None,
    ) -> "PollingLocationWrapper":
        """Wrap a polling place; each address line stays on its own row."""
        address = "\n".join(line.strip() for line in address_lines if line and line.strip()) or None
        return cls(name=name, address=address, polling_hours=polling_hours, notes=notes)
