"""Display ordering for candidates and contests.

Candidates with a ballot position come first, ascending. Candidates
without one follow in alphabetical order by name (case-insensitive,
exact case as tie-break), and nameless candidates go last. Ties on the
ballot position use the same alphabetical order. ``sorted`` is stable,
so fully equal keys keep their input order.
"""

from collections.abc import Iterable

from voter_info.lib.candidates.records import CandidateRecord, ContestRecord


def _name_key(name: str | None) -> tuple[bool, str, str]:
    if name is None or not name.strip():
        return (True, "", "")
    stripped = name.strip()
    return (False, stripped.casefold(), stripped)


def candidate_sort_key(record: CandidateRecord) -> tuple:
    """Sort key implementing ballot order first, then alphabetical fallback."""
    has_order = record.order_on_ballot is not None
    return (
        not has_order,
        record.order_on_ballot if has_order else 0,
        _name_key(record.name),
    )


def sort_candidates(records: Iterable[CandidateRecord]) -> list[CandidateRecord]:
    """Return candidates in deterministic display order."""
    return sorted(records, key=candidate_sort_key)


def contest_sort_key(record: ContestRecord) -> tuple:
    has_placement = record.ballot_placement is not None
    return (
        not has_placement,
        record.ballot_placement if has_placement else 0,
        _name_key(record.office),
    )


def sort_contests(records: Iterable[ContestRecord]) -> list[ContestRecord]:
    """Return contests by ballot placement, then office name."""
    return sorted(records, key=contest_sort_key)
