"""Interview record endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import CallerIdentity, require_hiring_staff
from api.schemas.common import AckResponse
from api.schemas.interviews import InterviewCreate, InterviewResponse, InterviewUpdate
from api.services import interviews as interview_service
from database.engine import get_db

router = APIRouter(prefix="/interviews", tags=["interviews"])


@router.post(
    "",
    response_model=InterviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record Interview",
    description="Record an interview; optionally notify the position's hiring manager.",
)
async def create_interview(
    data: InterviewCreate,
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    return await interview_service.create_interview(db, data)


@router.get("", response_model=list[InterviewResponse], summary="List Interviews")
async def list_interviews(
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    return await interview_service.list_interviews(db)


@router.get("/{interview_id}", response_model=InterviewResponse, summary="Get Interview")
async def get_interview(
    interview_id: str = Path(..., description="Interview id"),
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    interview = await interview_service.get_interview(db, interview_id)
    if not interview:
        raise HTTPException(status_code=404, detail="Interview not found")
    return interview


@router.put("/{interview_id}", response_model=InterviewResponse, summary="Update Interview")
async def update_interview(
    data: InterviewUpdate,
    interview_id: str = Path(..., description="Interview id"),
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    """Partially update an interview and optionally notify the hiring manager."""
    return await interview_service.update_interview(db, interview_id, data)


@router.delete("/{interview_id}", response_model=AckResponse, summary="Delete Interview")
async def delete_interview(
    interview_id: str = Path(..., description="Interview id"),
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    deleted = await interview_service.delete_interview(db, interview_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Interview not found")
    return AckResponse(message="Interview deleted")
