"""Candidate library: value records, display ordering, and the record store.

Public API:
    - CandidateRecord / ContestRecord: frozen value records
    - sort_candidates: ballot order first, alphabetical fallback
    - RecordStore: async CRUD protocol implemented by every store
    - InMemoryRecordStore: dictionary-backed store
    - RecordNotFoundError: unknown id in an operation that requires one
    - DuplicateContestError: a second contest with the same office and district
"""

from voter_info.lib.candidates.ordering import candidate_sort_key, sort_candidates, sort_contests
from voter_info.lib.candidates.records import CandidateRecord, ContestRecord
from voter_info.lib.candidates.store import (
    DuplicateContestError,
    InMemoryRecordStore,
    RecordNotFoundError,
    RecordStore,
)

__all__ = [
    "CandidateRecord",
    "ContestRecord",
    "DuplicateContestError",
    "InMemoryRecordStore",
    "RecordNotFoundError",
    "RecordStore",
    "candidate_sort_key",
    "sort_candidates",
    "sort_contests",
]
