"""
Entry-path endpoints.

Candidates apply directly; recruiters submit candidates against positions.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import CallerIdentity, require_caller, require_recruiter
from api.schemas.common import AckResponse
from api.schemas.submissions import (
    DirectApplicationRequest,
    DirectApplicationResponse,
    RecruiterSubmissionRequest,
    SubmissionFilters,
    SubmissionResponse,
)
from api.services import submissions as submission_service
from database.engine import get_db

router = APIRouter(prefix="/submissions", tags=["submissions"])


@router.post(
    "",
    response_model=DirectApplicationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Apply To Position",
)
async def apply_to_position(
    data: DirectApplicationRequest,
    current_caller: CallerIdentity = Depends(require_caller),
    db: AsyncSession = Depends(get_db),
):
    """Create a direct application on behalf of the caller."""
    return await submission_service.apply_to_position(db, data, current_caller.user_id)


@router.get("/mine", response_model=list[DirectApplicationResponse], summary="List My Applications")
async def list_my_applications(
    current_caller: CallerIdentity = Depends(require_caller),
    db: AsyncSession = Depends(get_db),
):
    return await submission_service.list_my_applications(db, current_caller.user_id)


@router.post(
    "/recruiter",
    response_model=SubmissionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Candidate",
)
async def submit_candidate(
    data: RecruiterSubmissionRequest,
    current_caller: CallerIdentity = Depends(require_recruiter),
    db: AsyncSession = Depends(get_db),
):
    """Create a candidate record and link it to a position."""
    return await submission_service.submit_candidate(db, data, current_caller.user_id)


@router.get("", response_model=list[SubmissionResponse], summary="List My Submissions")
async def list_submissions(
    candidate_name: Optional[str] = Query(None),
    email: Optional[str] = Query(None),
    phone: Optional[str] = Query(None),
    hiring_manager: Optional[str] = Query(None),
    company: Optional[str] = Query(None),
    submission_id: Optional[str] = Query(None),
    current_caller: CallerIdentity = Depends(require_recruiter),
    db: AsyncSession = Depends(get_db),
):
    filters = SubmissionFilters(
        candidate_name=candidate_name,
        email=email,
        phone=phone,
        hiring_manager=hiring_manager,
        company=company,
        submission_id=submission_id,
    )
    return await submission_service.list_recruiter_submissions(db, current_caller.user_id, filters)


@router.delete("/{submission_id}", response_model=AckResponse, summary="Delete Submission")
async def delete_submission(
    submission_id: str = Path(..., description="Submission id"),
    current_caller: CallerIdentity = Depends(require_recruiter),
    db: AsyncSession = Depends(get_db),
):
    deleted = await submission_service.delete_submission(db, submission_id, current_caller.user_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Submission not found")
    return AckResponse(message="Submission deleted")
