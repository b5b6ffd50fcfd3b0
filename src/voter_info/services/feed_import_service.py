"""Feed import service: populate contests and candidates from a voterinfo feed.

Import is the only routine process that mutates candidate records. Each
contest in the feed is matched to a stored contest by (office, district
name); a match has its candidate list replaced wholesale, otherwise a new
contest is created. A feed that lists the same key twice has the later
entry merged into the contest already imported, keeping every candidate.
"""

import uuid
from dataclasses import asdict, dataclass

from loguru import logger

from voter_info.lib.candidates import RecordStore
from voter_info.lib.voter_info_feed import FeedCandidate, FeedContest, VoterInfoFeed
from voter_info.schemas.candidate import CandidateCreate
from voter_info.schemas.contest import ContestCreate


@dataclass
class ImportResult:
    """Counts from one feed import."""

    contests_created: int = 0
    contests_updated: int = 0
    contests_merged: int = 0
    candidates_imported: int = 0


def _contest_create(contest: FeedContest, election_name: str | None) -> ContestCreate:
    return ContestCreate(
        type=contest.type,
        office=contest.title,
        district_name=contest.district_name,
        district_scope=contest.district.scope if contest.district else None,
        ballot_placement=contest.ballotPlacement,
        election_name=election_name,
    )


def _candidate_create(candidate: FeedCandidate) -> CandidateCreate:
    return CandidateCreate(
        name=candidate.name,
        party=candidate.party,
        order_on_ballot=candidate.orderOnBallot,
        candidate_url=candidate.candidateUrl,
        email=candidate.email,
        phone=candidate.phone,
        photo_url=candidate.photoUrl,
    )


async def import_voter_info(store: RecordStore, feed: VoterInfoFeed) -> ImportResult:
    """Upsert every contest in ``feed`` and replace its candidates.

    Args:
        store: Record store to write into.
        feed: Parsed voterinfo document.

    Returns:
        ImportResult with contest and candidate counts.
    """
    election_name = feed.election.name if feed.election else None
    logger.info(f"Importing {len(feed.contests)} contests from voterinfo feed ({election_name or 'unnamed election'})")

    result = ImportResult()
    imported: set[uuid.UUID] = set()
    for feed_contest in feed.contests:
        data = _contest_create(feed_contest, election_name)
        existing = await store.find_contest(data.office, data.district_name)
        if existing is not None and existing.id in imported:
            logger.warning(
                f"Feed lists contest {data.office!r} in {data.district_name!r} more than once; "
                "merging its candidates into the first entry"
            )
            contest = existing
            result.contests_merged += 1
        elif existing is not None and existing.id is not None:
            contest = await store.update_contest(existing.id, data) or existing
            for stale in await store.list_candidates(existing.id):
                if stale.id is not None:
                    await store.delete_candidate(stale.id)
            result.contests_updated += 1
        else:
            contest = await store.create_contest(data)
            result.contests_created += 1
        if contest.id is not None:
            imported.add(contest.id)

        for feed_candidate in feed_contest.candidates:
            await store.create_candidate(_candidate_create(feed_candidate), contest_id=contest.id)
            result.candidates_imported += 1

    logger.bind(json_output=True, **asdict(result)).info(
        f"Feed import complete: {result.contests_created} created, {result.contests_updated} updated, "
        f"{result.contests_merged} merged, {result.candidates_imported} candidates"
    )
    return result
