"""Shared test fixtures for settings, async database sessions, and record stores."""

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from voter_info.core.config import Settings
from voter_info.lib.candidates import InMemoryRecordStore
from voter_info.models.base import Base
from voter_info.services.candidate_service import SqlRecordStore


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
    )


@pytest.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory async SQLite engine with foreign keys enforced."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    @event.listens_for(engine.sync_engine, "connect")
    def _fk_pragma(dbapi_connection, _record) -> None:  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def async_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create a per-test async session."""
    session_factory = async_sessionmaker(async_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def sql_store(async_session: AsyncSession) -> SqlRecordStore:
    """SQL-backed record store on the per-test session."""
    return SqlRecordStore(async_session)


@pytest.fixture
def memory_store() -> InMemoryRecordStore:
    """Empty in-memory record store."""
    return InMemoryRecordStore()


@pytest.fixture
def voter_info_document() -> dict:
    """A small voterinfo document with one race, one referendum and one polling place."""
    return {
        "kind": "civicinfo#voterInfoResponse",
        "election": {"id": "2000", "name": "VIP Test Election", "electionDay": "2026-11-03"},
        "contests": [
            {
                "type": "General",
                "office": "Governor",
                "ballotPlacement": "1",
                "district": {"name": "Ohio", "scope": "statewide", "id": "ocd-division/country:us/state:oh"},
                "candidates": [
                    {"name": "Zed Zimmerman", "party": "Green", "orderOnBallot": "2"},
                    {
                        "name": "Amy Adams",
                        "party": "Independent",
                        "orderOnBallot": "1",
                        "candidateUrl": "https://amy.example.org",
                        "phone": "(614) 555-0100",
                        "email": "amy@example.org",
                        "photoUrl": "https://amy.example.org/photo.jpg",
                        "channels": [{"type": "Twitter", "id": "amy"}],
                    },
                ],
            },
            {
                "type": "Referendum",
                "referendumTitle": "Issue 1",
                "district": {"name": "Ohio", "scope": "statewide"},
                "candidates": None,
            },
        ],
        "pollingLocations": [
            {
                "address": {
                    "locationName": "Lincoln Elementary",
                    "line1": "123 Main St",
                    "city": "Columbus",
                    "state": "OH",
                    "zip": "43215",
                },
                "pollingHours": "6:30am - 7:30pm",
                "notes": "Enter through the gym doors",
            },
        ],
        "earlyVoteSites": None,
    }
