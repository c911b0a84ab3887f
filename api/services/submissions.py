"""
Entry-path services.

Direct applications are created by candidates themselves. Recruiter
submissions create a Candidate (the person) plus a Submission join row
linking them to a Position.
"""

from typing import Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from api.schemas.submissions import (
    CandidateSummary,
    DirectApplicationRequest,
    DirectApplicationResponse,
    PositionSummary,
    RecruiterSubmissionRequest,
    SubmissionFilters,
    SubmissionResponse,
)
from core.exceptions import RecordNotFound
from core.utils.formatting import format_name
from database.models.applications import ApplicationStatus, DirectApplication
from database.models.candidates import Candidate, CandidateStatus
from database.models.positions import Position
from database.models.submissions import Submission

logger = logging.getLogger(__name__)


async def apply_to_position(
    session: AsyncSession,
    data: DirectApplicationRequest,
    applicant_id: str,
) -> DirectApplicationResponse:
    """
    Create a direct application.

    The position title is denormalized from the Position when it exists,
    otherwise the caller-supplied title is kept.
    """
    position = await session.get(Position, data.job_id)
    title = position.title if position is not None else data.position_title

    application = DirectApplication(
        job_id=position.id if position is not None else None,
        position=title,
        candidate_name=data.candidate_name,
        email=data.email,
        phone=data.phone,
        resume_url=data.resume_url,
        status=ApplicationStatus.APPLIED.value,
        created_by=applicant_id,
    )
    session.add(application)
    await session.commit()

    logger.info(f"Direct application {application.id} submitted for {title!r}")
    return DirectApplicationResponse.model_validate(application)


async def list_my_applications(session: AsyncSession, applicant_id: str) -> list[DirectApplicationResponse]:
    result = await session.execute(
        select(DirectApplication)
        .where(DirectApplication.created_by == applicant_id)
        .order_by(DirectApplication.applied_at.desc())
    )
    return [DirectApplicationResponse.model_validate(a) for a in result.scalars().all()]


async def submit_candidate(
    session: AsyncSession,
    data: RecruiterSubmissionRequest,
    recruiter_id: str,
) -> SubmissionResponse:
    """
    Create a Candidate and attach it to a Position.

    Raises:
        RecordNotFound: if the position does not exist
    """
    position = await session.get(Position, data.position_id)
    if position is None:
        raise RecordNotFound("Position not found", record_id=data.position_id)

    candidate = Candidate(
        **data.model_dump(exclude={"position_id"}),
        position=position.title,
        status=CandidateStatus.SUBMITTED.value,
        submitted_by_recruiter=recruiter_id,
    )
    session.add(candidate)
    await session.flush()

    submission = Submission(
        candidate_id=candidate.id,
        position_id=position.id,
        submitted_by=recruiter_id,
    )
    session.add(submission)
    await session.commit()

    logger.info(f"Recruiter {recruiter_id} submitted candidate {candidate.id} for position {position.id}")
    return SubmissionResponse(
        id=submission.id,
        candidate_id=candidate.id,
        position_id=position.id,
        submitted_by=recruiter_id,
        created_at=submission.created_at,
        candidate=CandidateSummary.model_validate(candidate),
        position=PositionSummary.model_validate(position),
    )


def _contains(value: Optional[str], needle: Optional[str]) -> bool:
    if not needle:
        return True
    return bool(value) and needle.lower() in value.lower()


def _matches(candidate: Candidate, filters: SubmissionFilters) -> bool:
    name = format_name(candidate.first_name, candidate.last_name)
    phone_ok = not filters.phone or bool(candidate.phone and filters.phone in candidate.phone)
    return (
        _contains(name, filters.candidate_name)
        and _contains(candidate.email, filters.email)
        and phone_ok
        and _contains(candidate.hiring_manager, filters.hiring_manager)
        and _contains(candidate.company, filters.company)
    )


async def list_recruiter_submissions(
    session: AsyncSession,
    recruiter_id: str,
    filters: Optional[SubmissionFilters] = None,
) -> list[SubmissionResponse]:
    """
    A recruiter's own submissions, newest first.

    When candidate filters are given, submissions whose candidate has been
    deleted are dropped as well.
    """
    filters = filters or SubmissionFilters()
    query = (
        select(Submission)
        .options(selectinload(Submission.candidate), selectinload(Submission.position))
        .where(Submission.submitted_by == recruiter_id)
        .order_by(Submission.created_at.desc())
    )
    if filters.submission_id:
        query = query.where(Submission.id == filters.submission_id)

    result = await session.execute(query)
    submissions = list(result.scalars().all())

    if filters.has_candidate_filters():
        submissions = [
            s for s in submissions
            if s.candidate is not None and _matches(s.candidate, filters)
        ]

    return [SubmissionResponse.model_validate(s) for s in submissions]


async def delete_submission(session: AsyncSession, submission_id: str, recruiter_id: str) -> bool:
    """Delete a submission; only the recruiter who made it may do so."""
    result = await session.execute(
        select(Submission).where(
            Submission.id == submission_id,
            Submission.submitted_by == recruiter_id,
        )
    )
    submission = result.scalars().first()
    if submission is None:
        return False
    await session.delete(submission)
    await session.commit()
    return True
