"""Inbox service functions."""

from typing import Optional
import logging

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.messages import MessageResponse
from core.config import settings
from core.exceptions import RecordNotFound, ValidationFailure
from database.models.messages import Message, MessageStatus
from database.models.users import MANAGER_ROLES

logger = logging.getLogger(__name__)

VALID_MESSAGE_STATUSES: tuple[str, ...] = tuple(s.value for s in MessageStatus)


async def list_messages(session: AsyncSession, email: str, role: Optional[str]) -> list[MessageResponse]:
    """
    Messages addressed to ``email``, newest first.

    Managers also see messages addressed to the system sender label.
    """
    condition = Message.to == email
    if role in MANAGER_ROLES:
        condition = or_(Message.to == email, Message.to == settings.notification_sender)

    result = await session.execute(
        select(Message).where(condition).order_by(Message.created_at.desc())
    )
    return [MessageResponse.model_validate(m) for m in result.scalars().all()]


async def set_message_status(session: AsyncSession, message_id: str, status: str) -> MessageResponse:
    """
    Mark a message read or unread.

    Raises:
        ValidationFailure: if status is not "read" or "unread"
        RecordNotFound: if the message does not exist
    """
    if status not in VALID_MESSAGE_STATUSES:
        raise ValidationFailure("Invalid status value")

    message = await session.get(Message, message_id)
    if message is None:
        raise RecordNotFound("Message not found", record_id=message_id)

    message.status = status
    await session.commit()
    return MessageResponse.model_validate(message)
