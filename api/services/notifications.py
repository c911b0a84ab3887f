"""
Hiring-manager notifications for interview updates.

Best-effort side effect: the parent interview write never fails because of
anything that happens here.
"""

from typing import Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.utils.formatting import format_name
from database.models.interviews import Interview
from database.models.messages import Message, MessageStatus
from database.models.positions import Position
from database.models.users import User

logger = logging.getLogger(__name__)


def build_interview_summary(interview: Interview) -> tuple[str, str]:
    """Return (subject, body) for an interview update message."""
    candidate = format_name(interview.candidate_first_name, interview.candidate_last_name)
    subject = f"Interview Update: {candidate}"
    body = "\n".join([
        "Interview Status Update",
        "-----------------------",
        f"Candidate: {candidate}",
        f"Position: {interview.job_position}",
        f"Interviewer: {interview.interviewer_name}",
        "",
        f"Status: {interview.status}",
        f"Result: {interview.result}",
        f"Rating: {interview.rating}/5",
        "",
        f"Feedback: {interview.feedback or 'No feedback provided.'}",
    ])
    return subject, body


async def _find_position_by_title(session: AsyncSession, title: Optional[str]) -> Optional[Position]:
    # Free-text title match, not an id reference.
    # TODO: add position_id to Interview and look the position up by id.
    if not title:
        return None
    result = await session.execute(
        select(Position).where(Position.title == title).order_by(Position.created_at).limit(1)
    )
    return result.scalars().first()


async def notify_hiring_manager(
    session: AsyncSession,
    interview: Interview,
    notify: bool,
) -> Optional[Message]:
    """
    Send the owning position's creator a summary of an interview.

    Args:
        session: Active database session
        interview: The interview that was just created or updated
        notify: The caller's notify flag; nothing happens when False

    Returns:
        The created Message, or None when skipped or failed
    """
    if not notify:
        return None

    interview_id = interview.id
    try:
        position = await _find_position_by_title(session, interview.job_position)
        if position is None or not position.created_by:
            logger.warning(
                f"Position {interview.job_position!r} not found or has no creator; "
                "skipping interview notification"
            )
            return None

        manager = await session.get(User, position.created_by)
        if manager is None or not manager.email:
            logger.warning(f"Creator {position.created_by} of position {position.id} not found")
            return None

        subject, body = build_interview_summary(interview)
        message = Message(
            to=manager.email,
            sender=settings.notification_sender,
            subject=subject,
            body=body,
            status=MessageStatus.UNREAD.value,
            related_id=interview_id,
        )
        session.add(message)
        await session.commit()
    except Exception:
        await session.rollback()
        logger.exception(f"Failed to notify hiring manager for interview {interview_id}")
        return None

    logger.info(f"Interview notification queued for {manager.email}")
    return message
