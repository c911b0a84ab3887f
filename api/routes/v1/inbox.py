"""Inbox endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import CallerIdentity, require_caller
from api.schemas.messages import MessageResponse, MessageStatusUpdate
from api.services import inbox as inbox_service
from database.engine import get_db

router = APIRouter(prefix="/inbox", tags=["inbox"])


@router.get("", response_model=list[MessageResponse], summary="List Inbox")
async def list_inbox(
    current_caller: CallerIdentity = Depends(require_caller),
    db: AsyncSession = Depends(get_db),
):
    """Messages addressed to the caller, newest first."""
    if not current_caller.email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Caller email is required to read the inbox",
        )
    return await inbox_service.list_messages(db, current_caller.email, current_caller.role)


@router.put("/{message_id}/status", response_model=MessageResponse, summary="Set Message Status")
async def set_message_status(
    update: MessageStatusUpdate,
    message_id: str = Path(..., description="Message id"),
    current_caller: CallerIdentity = Depends(require_caller),
    db: AsyncSession = Depends(get_db),
):
    return await inbox_service.set_message_status(db, message_id, update.status)
