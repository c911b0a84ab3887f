"""
Unified pipeline views.

Merges direct applications and recruiter submissions into one list of
``PipelineEntry`` projections, newest first. Filtering and pagination are
plain post-processing over the merged list and are recomputed per query.
"""

from datetime import datetime, timezone
from typing import Iterable, Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from api.schemas.common import PaginatedResponse, PaginationParams
from api.schemas.pipeline import OnboardingEntry, PipelineEntry
from api.services.status import EntrySource, to_canonical
from core.utils.formatting import format_name
from database.models.applications import ApplicationStatus, DirectApplication, OnboardingState
from database.models.candidates import Candidate, CandidateStatus
from database.models.submissions import Submission
from database.models.users import User

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


# ==================== Projections ===================== #

def project_direct(application: DirectApplication) -> PipelineEntry:
    """Project a direct application into the unified shape."""
    return PipelineEntry(
        id=application.id,
        source=EntrySource.DIRECT,
        candidate_name=application.candidate_name or "",
        email=application.email,
        phone=application.phone,
        position=application.position,
        status=to_canonical(EntrySource.DIRECT, application.status).value,
        onboarding_status=application.onboarding_status or OnboardingState.PENDING.value,
        resume_url=application.resume_url,
        applied_at=application.applied_at,
        job_id=application.job_id,
    )


def project_candidate(candidate: Candidate) -> PipelineEntry:
    """Project a candidate record on its own (no submission context)."""
    return PipelineEntry(
        id=candidate.id,
        source=EntrySource.CANDIDATE,
        candidate_name=format_name(candidate.first_name, candidate.last_name),
        email=candidate.email,
        phone=candidate.phone,
        position=candidate.position,
        status=to_canonical(EntrySource.CANDIDATE, candidate.status).value,
        onboarding_status=candidate.onboarding_status or OnboardingState.PENDING.value,
        resume_url=candidate.resume_path,
        applied_at=candidate.created_at,
        is_recruiter_submission=True,
    )


def project_submission(submission: Submission) -> Optional[PipelineEntry]:
    """
    Project a submission through its candidate and position.

    Returns None for orphans (candidate or position deleted).
    """
    candidate = submission.candidate
    position = submission.position
    if candidate is None or position is None:
        return None

    entry = project_candidate(candidate)
    return entry.model_copy(
        update={
            # the candidate id owns the status, so actions target it
            "position": position.title,
            "applied_at": submission.created_at,
            "submission_id": submission.id,
            "job_id": position.id,
        }
    )


# ==================== Ordering ===================== #

def _timestamp_key(entry: PipelineEntry) -> datetime:
    ts = entry.applied_at
    if ts is None:
        return _EPOCH
    # SQLite hands back naive datetimes; treat them as UTC
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def sort_newest_first(entries: Iterable[PipelineEntry]) -> list:
    """Stable sort, newest first. Ties keep their input order."""
    return sorted(entries, key=_timestamp_key, reverse=True)


# ==================== Queries ===================== #

async def _load_submissions(session: AsyncSession) -> list[Submission]:
    result = await session.execute(
        select(Submission).options(
            selectinload(Submission.candidate),
            selectinload(Submission.position),
        )
    )
    return list(result.scalars().all())


async def list_pipeline(session: AsyncSession) -> list[PipelineEntry]:
    """
    Build the unified pipeline.

    Args:
        session: Active database session

    Returns:
        Direct applications plus every resolvable recruiter submission,
        sorted newest first
    """
    result = await session.execute(select(DirectApplication))
    direct_entries = [project_direct(app) for app in result.scalars().all()]

    submission_entries = []
    orphans = 0
    for submission in await _load_submissions(session):
        entry = project_submission(submission)
        if entry is None:
            orphans += 1
            continue
        submission_entries.append(entry)

    if orphans:
        logger.debug(f"Skipped {orphans} orphaned submissions")

    return sort_newest_first(direct_entries + submission_entries)


async def history_by_email(session: AsyncSession, email: str) -> list[PipelineEntry]:
    """
    Every pipeline entry an email address has produced, across both stores.

    Args:
        session: Active database session
        email: Exact email to match

    Returns:
        Entries sorted newest first; empty when the email has no history
    """
    apps = await session.execute(
        select(DirectApplication).where(DirectApplication.email == email)
    )
    candidates = await session.execute(
        select(Candidate).where(Candidate.email == email)
    )

    entries = [project_direct(app) for app in apps.scalars().all()]
    entries.extend(project_candidate(c) for c in candidates.scalars().all())
    return sort_newest_first(entries)


async def _onboarding_name(session: AsyncSession, application: DirectApplication) -> str:
    """Candidate name, else the creator's profile name, else their email."""
    if application.candidate_name and application.candidate_name.strip():
        return application.candidate_name
    creator = None
    if application.created_by:
        creator = await session.get(User, application.created_by)
    if creator is None:
        return "Unknown Candidate"
    return format_name(creator.first_name, creator.last_name) or creator.email or "Unknown Candidate"


async def list_onboarding(session: AsyncSession) -> list[OnboardingEntry]:
    """Hired entries from both paths, with department, newest first."""
    apps = await session.execute(
        select(DirectApplication)
        .options(selectinload(DirectApplication.job))
        .where(DirectApplication.status == ApplicationStatus.HIRED.value)
    )

    entries: list[OnboardingEntry] = []
    for app in apps.scalars().all():
        base = project_direct(app).model_dump()
        base["candidate_name"] = await _onboarding_name(session, app)
        entries.append(
            OnboardingEntry(
                **base,
                department=(app.job.department if app.job and app.job.department else "-"),
                type="Direct",
            )
        )

    for submission in await _load_submissions(session):
        candidate = submission.candidate
        if candidate is None or candidate.status != CandidateStatus.HIRED.value:
            continue
        base = project_submission(submission)
        if base is None:
            continue
        entries.append(
            OnboardingEntry(
                **base.model_dump(),
                department=submission.position.department or "-",
                type="Agency",
            )
        )

    return sort_newest_first(entries)


# ==================== Post-processing ===================== #

def filter_entries(
    entries: Iterable[PipelineEntry],
    status: Optional[str] = None,
    search: Optional[str] = None,
) -> list:
    """
    Filter a unified list by exact status and free-text search.

    Args:
        entries: Already unified and sorted entries
        status: Exact status to keep; None or "All" keeps everything
        search: Case-insensitive substring over name, email and position

    Returns:
        Matching entries in their original order
    """
    needle = (search or "").strip().lower()
    wanted = None if status in (None, "", "All") else status

    matched = []
    for entry in entries:
        if wanted is not None and entry.status != wanted:
            continue
        if needle:
            haystacks = (entry.candidate_name, entry.email or "", entry.position or "")
            if not any(needle in value.lower() for value in haystacks):
                continue
        matched.append(entry)
    return matched


def paginate(entries: list, pagination: PaginationParams) -> PaginatedResponse:
    """
    Slice one page out of a filtered list.

    A page beyond the end falls back to page 1.
    """
    total = len(entries)
    if pagination.page > 1 and pagination.offset >= total:
        pagination = PaginationParams(page=1, page_size=pagination.page_size)
    start = pagination.offset
    return PaginatedResponse.create(
        items=entries[start:start + pagination.page_size],
        total=total,
        pagination=pagination,
    )
