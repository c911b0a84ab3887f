"""Inbox message schemas."""

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, Field

MessageStatusType = Literal["read", "unread"]


class MessageResponse(BaseModel):
    id: str
    to: str
    sender: str
    subject: str
    body: str
    status: MessageStatusType
    related_id: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class MessageStatusUpdate(BaseModel):
    # Plain str so an invalid value reaches the service's own check
    status: str = Field(..., description="read or unread")
