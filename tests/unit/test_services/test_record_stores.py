"""Behavioural tests run against both the in-memory and the SQL record store."""

import uuid

import pytest

from voter_info.lib.candidates import ContestRecord, DuplicateContestError, RecordNotFoundError, RecordStore
from voter_info.schemas.candidate import CandidateCreate, CandidateUpdate
from voter_info.schemas.contest import ContestCreate


@pytest.fixture(params=["memory_store", "sql_store"])
def store(request: pytest.FixtureRequest) -> RecordStore:
    """Each test runs once per store implementation."""
    return request.getfixturevalue(request.param)


async def _governor(store: RecordStore) -> ContestRecord:
    return await store.create_contest(
        ContestCreate(type="General", office="Governor", district_name="Ohio", ballot_placement=1)
    )


class TestContests:
    async def test_create_and_get(self, store: RecordStore) -> None:
        contest = await _governor(store)
        assert contest.id is not None
        fetched = await store.get_contest(contest.id)
        assert fetched == contest
        assert fetched is not None
        assert fetched.office == "Governor"

    async def test_get_unknown_returns_none(self, store: RecordStore) -> None:
        assert await store.get_contest(uuid.uuid4()) is None

    async def test_find_by_office_and_district(self, store: RecordStore) -> None:
        contest = await _governor(store)
        found = await store.find_contest("Governor", "Ohio")
        assert found is not None
        assert found.id == contest.id
        assert await store.find_contest("Governor", "Texas") is None

    async def test_find_with_missing_district(self, store: RecordStore) -> None:
        contest = await store.create_contest(ContestCreate(office="Issue 1"))
        found = await store.find_contest("Issue 1", None)
        assert found is not None
        assert found.id == contest.id

    async def test_list_orders_by_placement(self, store: RecordStore) -> None:
        await store.create_contest(ContestCreate(office="Issue 1"))
        await _governor(store)
        await store.create_contest(ContestCreate(office="Auditor", ballot_placement=2))
        assert [c.office for c in await store.list_contests()] == ["Governor", "Auditor", "Issue 1"]

    async def test_update_contest(self, store: RecordStore) -> None:
        contest = await _governor(store)
        assert contest.id is not None
        updated = await store.update_contest(
            contest.id,
            ContestCreate(type="General", office="Governor", district_name="Ohio", ballot_placement=3),
        )
        assert updated is not None
        assert updated.id == contest.id
        assert updated.ballot_placement == 3

    async def test_update_unknown_contest(self, store: RecordStore) -> None:
        assert await store.update_contest(uuid.uuid4(), ContestCreate(office="X")) is None

    async def test_duplicate_key_rejected(self, store: RecordStore) -> None:
        await _governor(store)
        with pytest.raises(DuplicateContestError):
            await store.create_contest(ContestCreate(type="Primary", office="Governor", district_name="Ohio"))
        assert len(await store.list_contests()) == 1

    async def test_duplicate_key_with_missing_parts_rejected(self, store: RecordStore) -> None:
        await store.create_contest(ContestCreate(type="Referendum", district_name="Ohio"))
        with pytest.raises(DuplicateContestError):
            await store.create_contest(ContestCreate(type="Referendum", district_name="Ohio"))

    async def test_update_onto_existing_key_rejected(self, store: RecordStore) -> None:
        await _governor(store)
        auditor = await store.create_contest(ContestCreate(office="Auditor", district_name="Ohio"))
        assert auditor.id is not None
        with pytest.raises(DuplicateContestError):
            await store.update_contest(auditor.id, ContestCreate(office="Governor", district_name="Ohio"))
        unchanged = await store.get_contest(auditor.id)
        assert unchanged is not None
        assert unchanged.office == "Auditor"

    async def test_delete_contest_removes_its_candidates(self, store: RecordStore) -> None:
        contest = await _governor(store)
        assert contest.id is not None
        candidate = await store.create_candidate(CandidateCreate(name="Jane Doe"), contest_id=contest.id)
        assert candidate.id is not None

        assert await store.delete_contest(contest.id) is True
        assert await store.get_contest(contest.id) is None
        assert await store.get_candidate(candidate.id) is None

    async def test_delete_unknown_contest(self, store: RecordStore) -> None:
        assert await store.delete_contest(uuid.uuid4()) is False


class TestCandidates:
    async def test_create_without_contest(self, store: RecordStore) -> None:
        candidate = await store.create_candidate(CandidateCreate(name="Jane Doe"))
        assert candidate.id is not None
        assert candidate.contest_id is None

    async def test_create_accepts_missing_name(self, store: RecordStore) -> None:
        """The schema stays permissive about name."""
        candidate = await store.create_candidate(CandidateCreate(party="Independent"))
        assert candidate.name is None
        assert candidate.party == "Independent"

    async def test_create_for_unknown_contest_raises(self, store: RecordStore) -> None:
        with pytest.raises(RecordNotFoundError):
            await store.create_candidate(CandidateCreate(name="Jane Doe"), contest_id=uuid.uuid4())

    async def test_round_trip_all_fields(self, store: RecordStore) -> None:
        contest = await _governor(store)
        data = CandidateCreate(
            name="Jane Doe",
            party="Independent",
            order_on_ballot=1,
            candidate_url="https://jane.example.org",
            email="jane@example.org",
            phone="(614) 555-0100",
            photo=b"\x89PNG\r\n",
            photo_url="https://jane.example.org/photo.png",
        )
        created = await store.create_candidate(data, contest_id=contest.id)
        assert created.id is not None
        fetched = await store.get_candidate(created.id)
        assert fetched == created
        assert fetched is not None
        assert fetched.photo == b"\x89PNG\r\n"
        assert fetched.contest_id == contest.id

    async def test_list_candidates_sorted(self, store: RecordStore) -> None:
        contest = await _governor(store)
        for name, order in [("X", None), ("Y", 1), ("B", None), ("Z", 2)]:
            await store.create_candidate(CandidateCreate(name=name, order_on_ballot=order), contest_id=contest.id)
        other = await store.create_contest(ContestCreate(office="Auditor"))
        await store.create_candidate(CandidateCreate(name="Elsewhere"), contest_id=other.id)

        assert contest.id is not None
        names = [c.name for c in await store.list_candidates(contest.id)]
        assert names == ["Y", "Z", "B", "X"]

    async def test_partial_update_leaves_other_fields(self, store: RecordStore) -> None:
        created = await store.create_candidate(CandidateCreate(name="Jane Doe", party="Independent"))
        assert created.id is not None
        updated = await store.update_candidate(created.id, CandidateUpdate(phone="555-0100"))
        assert updated is not None
        assert updated.name == "Jane Doe"
        assert updated.party == "Independent"
        assert updated.phone == "555-0100"

    async def test_update_can_clear_a_field(self, store: RecordStore) -> None:
        created = await store.create_candidate(CandidateCreate(name="Jane Doe", party="Independent"))
        assert created.id is not None
        updated = await store.update_candidate(created.id, CandidateUpdate(party=None))
        assert updated is not None
        assert updated.party is None

    async def test_update_unknown_returns_none(self, store: RecordStore) -> None:
        assert await store.update_candidate(uuid.uuid4(), CandidateUpdate(name="X")) is None

    async def test_assign_contest(self, store: RecordStore) -> None:
        contest = await _governor(store)
        created = await store.create_candidate(CandidateCreate(name="Jane Doe"))
        assert created.id is not None and contest.id is not None
        assigned = await store.assign_contest(created.id, contest.id)
        assert assigned.contest_id == contest.id
        assert [c.name for c in await store.list_candidates(contest.id)] == ["Jane Doe"]

    async def test_assign_unknown_ids_raise(self, store: RecordStore) -> None:
        contest = await _governor(store)
        created = await store.create_candidate(CandidateCreate(name="Jane Doe"))
        assert created.id is not None and contest.id is not None
        with pytest.raises(RecordNotFoundError) as exc_info:
            await store.assign_contest(uuid.uuid4(), contest.id)
        assert exc_info.value.kind == "candidate"
        with pytest.raises(RecordNotFoundError) as exc_info:
            await store.assign_contest(created.id, uuid.uuid4())
        assert exc_info.value.kind == "contest"

    async def test_delete_candidate_keeps_contest(self, store: RecordStore) -> None:
        contest = await _governor(store)
        created = await store.create_candidate(CandidateCreate(name="Jane Doe"), contest_id=contest.id)
        assert created.id is not None and contest.id is not None

        assert await store.delete_candidate(created.id) is True
        assert await store.get_candidate(created.id) is None
        assert await store.get_contest(contest.id) is not None
        assert await store.delete_candidate(created.id) is False


class TestReset:
    async def test_reset_removes_everything(self, store: RecordStore) -> None:
        contest = await _governor(store)
        await store.create_candidate(CandidateCreate(name="Jane Doe"), contest_id=contest.id)
        await store.create_candidate(CandidateCreate(name="Unassigned"))

        await store.reset()

        assert await store.list_contests() == []
        assert contest.id is not None
        assert await store.list_candidates(contest.id) == []
