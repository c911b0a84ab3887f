"""
Status transition engine.

Every transition resolves the id first, then writes to the one store that
owns it. Nothing here ever touches the other store. Writes are single-row
commits with last-write-wins semantics; there is no locking.
"""

from typing import Callable
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.pipeline import PipelineEntry
from api.services.pipeline import project_candidate, project_direct
from api.services.resolver import ResolvedEntry, resolve
from api.services.status import (
    EntrySource,
    PipelineStatus,
    parse_onboarding_status,
    to_store,
)
from core.exceptions import TransientStoreError
from database.models.applications import OnboardingState

logger = logging.getLogger(__name__)


def to_entry(handle: ResolvedEntry) -> PipelineEntry:
    """Project a resolved record into the unified shape."""
    if handle.source is EntrySource.DIRECT:
        return project_direct(handle.record)
    return project_candidate(handle.record)


async def _apply(
    session: AsyncSession,
    entry_id: str,
    action: str,
    mutate: Callable[[ResolvedEntry], None],
) -> PipelineEntry:
    handle = await resolve(session, entry_id)
    mutate(handle)

    try:
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.error(f"Failed to {action} {handle.source.value} record {entry_id}", exc_info=True)
        raise TransientStoreError(f"Could not {action} record; please retry") from exc

    logger.info(
        f"Pipeline {action}: {handle.source.value} record {entry_id} "
        f"-> status={handle.record.status}, onboarding={handle.record.onboarding_status}"
    )
    return to_entry(handle)


def _set_status(handle: ResolvedEntry, status: PipelineStatus) -> None:
    handle.record.status = to_store(handle.source, status)


async def review(session: AsyncSession, entry_id: str) -> PipelineEntry:
    """Move an entry to its store's "Under Review" status."""
    return await _apply(
        session, entry_id, "review",
        lambda handle: _set_status(handle, PipelineStatus.UNDER_REVIEW),
    )


async def reject(session: AsyncSession, entry_id: str) -> PipelineEntry:
    """Reject an entry. Allowed from any state; rejecting twice is a no-op."""
    return await _apply(
        session, entry_id, "reject",
        lambda handle: _set_status(handle, PipelineStatus.REJECTED),
    )


def _hire(handle: ResolvedEntry) -> None:
    already_hired = handle.record.status == to_store(handle.source, PipelineStatus.HIRED)
    _set_status(handle, PipelineStatus.HIRED)
    # re-hiring must not regress onboarding that has already advanced
    if not already_hired:
        handle.record.onboarding_status = OnboardingState.PENDING.value


async def hire(session: AsyncSession, entry_id: str) -> PipelineEntry:
    """
    Hire an entry and start onboarding in the same write.

    Args:
        session: Active database session
        entry_id: Id of a DirectApplication or Candidate

    Returns:
        The updated pipeline entry

    Raises:
        RecordNotFound: if no store owns the id
        TransientStoreError: if the write fails
    """
    return await _apply(session, entry_id, "hire", _hire)


async def set_onboarding_status(
    session: AsyncSession,
    entry_id: str,
    value: str,
) -> PipelineEntry:
    """
    Write onboarding progress.

    Not gated on the entry being hired; non-hired records accept the write.
    """
    onboarding = parse_onboarding_status(value)

    def _write(handle: ResolvedEntry) -> None:
        handle.record.onboarding_status = onboarding.value

    return await _apply(session, entry_id, "set onboarding for", _write)
