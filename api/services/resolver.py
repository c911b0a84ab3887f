"""
Entity resolution across the two pipeline stores.

A pipeline entry id belongs either to a DirectApplication or to a Candidate.
``resolve`` looks in both (direct first) and returns a tagged handle so
callers never have to guess which store they are talking to.
"""

from dataclasses import dataclass
from typing import Union
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.services.status import EntrySource, PipelineStatus, to_canonical
from core.exceptions import RecordNotFound
from core.utils.formatting import format_name
from database.models.applications import DirectApplication
from database.models.candidates import Candidate

logger = logging.getLogger(__name__)

PipelineRecord = Union[DirectApplication, Candidate]


@dataclass(frozen=True)
class ResolvedEntry:
    """A pipeline entry together with the store that owns it."""

    source: EntrySource
    record: PipelineRecord

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def status(self) -> PipelineStatus:
        return to_canonical(self.source, self.record.status)

    @property
    def onboarding_status(self) -> str:
        return self.record.onboarding_status

    @property
    def email(self) -> str | None:
        return self.record.email

    @property
    def display_name(self) -> str:
        if self.source is EntrySource.DIRECT:
            return self.record.candidate_name or ""
        return format_name(self.record.first_name, self.record.last_name)


async def resolve(session: AsyncSession, entry_id: str) -> ResolvedEntry:
    """
    Locate the store that owns ``entry_id``.

    Args:
        session: Active database session
        entry_id: Opaque pipeline entry id

    Returns:
        ResolvedEntry tagged with the owning store

    Raises:
        RecordNotFound: if neither store holds the id
    """
    direct = await session.get(DirectApplication, entry_id)
    candidate = await session.get(Candidate, entry_id)

    if direct is not None and candidate is not None:
        logger.warning(
            f"Pipeline id {entry_id} exists in both applications and candidates; "
            "using the direct application"
        )
        return ResolvedEntry(source=EntrySource.DIRECT, record=direct)

    if direct is not None:
        return ResolvedEntry(source=EntrySource.DIRECT, record=direct)
    if candidate is not None:
        return ResolvedEntry(source=EntrySource.CANDIDATE, record=candidate)

    raise RecordNotFound(record_id=entry_id)
