"""Inbox messages created as notification side effects."""

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, DateTime, Text
from database.engine import Base, new_id, utcnow
from datetime import datetime
from enum import Enum as PyEnum


class MessageStatus(str, PyEnum):
    READ = "read"
    UNREAD = "unread"


class Message(Base):
    """A message record. Only the read flag is ever mutated."""

    __tablename__: str = "messages"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    to: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    sender: Mapped[str] = mapped_column(String(255), default="System", nullable=False)
    subject: Mapped[str] = mapped_column(String(500), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(10), default=MessageStatus.UNREAD.value, nullable=False
    )
    related_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )
