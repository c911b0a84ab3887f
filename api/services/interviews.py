"""Interview service functions."""

from typing import Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.interviews import InterviewCreate, InterviewResponse, InterviewUpdate
from api.services.notifications import notify_hiring_manager
from core.exceptions import RecordNotFound
from database.models.interviews import Interview

logger = logging.getLogger(__name__)


async def create_interview(session: AsyncSession, data: InterviewCreate) -> InterviewResponse:
    """Record an interview, then notify the hiring manager if asked to."""
    interview = Interview(**data.model_dump(exclude={"notify_manager"}))
    session.add(interview)
    await session.commit()

    response = InterviewResponse.model_validate(interview)
    logger.info(f"Interview {interview.id} recorded for {interview.job_position!r}")

    await notify_hiring_manager(session, interview, data.notify_manager)
    return response


async def list_interviews(session: AsyncSession) -> list[InterviewResponse]:
    """All interviews, newest first."""
    result = await session.execute(select(Interview).order_by(Interview.created_at.desc()))
    return [InterviewResponse.model_validate(i) for i in result.scalars().all()]


async def get_interview(session: AsyncSession, interview_id: str) -> Optional[InterviewResponse]:
    interview = await session.get(Interview, interview_id)
    if interview is None:
        return None
    return InterviewResponse.model_validate(interview)


async def update_interview(
    session: AsyncSession,
    interview_id: str,
    data: InterviewUpdate,
) -> InterviewResponse:
    """
    Apply a partial update, then notify the hiring manager if asked to.

    The notification summarizes the interview as stored after the update.

    Raises:
        RecordNotFound: if the interview does not exist
    """
    interview = await session.get(Interview, interview_id)
    if interview is None:
        raise RecordNotFound("Interview not found", record_id=interview_id)

    for field, value in data.model_dump(exclude_unset=True, exclude_none=True, exclude={"notify_manager"}).items():
        setattr(interview, field, value)
    await session.commit()

    response = InterviewResponse.model_validate(interview)
    await notify_hiring_manager(session, interview, data.notify_manager)
    return response


async def delete_interview(session: AsyncSession, interview_id: str) -> bool:
    interview = await session.get(Interview, interview_id)
    if interview is None:
        return False
    await session.delete(interview)
    await session.commit()
    return True
