"""FastAPI dependency injection for database sessions and the record store."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from voter_info.core.database import get_session_factory
from voter_info.lib.candidates import RecordStore
from voter_info.services.candidate_service import SqlRecordStore


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Yield an async database session with per-request lifecycle."""
    factory = get_session_factory()
    async with factory() as session:
        yield session


async def get_record_store(
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> RecordStore:
    """Record store bound to the request's session."""
    return SqlRecordStore(session)
