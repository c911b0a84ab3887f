"""
Unified pipeline endpoints.

Lists direct applications and recruiter submissions as one pipeline and
moves entries through review, rejection and hiring regardless of which
store owns them.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import (
    CallerIdentity,
    get_pagination_params,
    require_caller,
    require_hiring_staff,
)
from api.schemas.common import PaginatedResponse, PaginationParams
from api.schemas.pipeline import PipelineEntry, TransitionResponse
from api.services import pipeline as pipeline_service
from api.services import transitions as transition_service
from core.exceptions import ValidationFailure
from core.utils.validators import validate_email
from database.engine import get_db

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get(
    "",
    response_model=PaginatedResponse[PipelineEntry],
    summary="List Unified Pipeline",
    description="Direct applications and recruiter submissions, newest first.",
)
async def list_applications(
    status: Optional[str] = Query(None, description="Exact status filter; 'All' disables it"),
    search: Optional[str] = Query(None, description="Search name, email or position"),
    pagination: PaginationParams = Depends(get_pagination_params),
    current_caller: CallerIdentity = Depends(require_caller),
    db: AsyncSession = Depends(get_db),
):
    """Retrieve a filtered, paginated page of the unified pipeline."""
    entries = await pipeline_service.list_pipeline(db)
    filtered = pipeline_service.filter_entries(entries, status=status, search=search)
    return pipeline_service.paginate(filtered, pagination)


@router.get(
    "/history/{email}",
    response_model=list[PipelineEntry],
    summary="Get Candidate History",
    description="Every pipeline entry an email has produced across both entry paths.",
)
async def get_history(
    email: str = Path(..., description="Candidate email"),
    current_caller: CallerIdentity = Depends(require_caller),
    db: AsyncSession = Depends(get_db),
):
    """Retrieve the full cross-store history for an email address."""
    is_valid, result = validate_email(email)
    if not is_valid:
        raise ValidationFailure(f"Invalid email: {result}")
    return await pipeline_service.history_by_email(db, result)


@router.put(
    "/{entry_id}/review",
    response_model=TransitionResponse,
    summary="Mark Under Review",
)
async def review_application(
    entry_id: str = Path(..., description="Application or candidate id"),
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    """Move a pipeline entry to Under Review."""
    entry = await transition_service.review(db, entry_id)
    return TransitionResponse(message="Status updated to Under Review", application=entry)


@router.put(
    "/{entry_id}/reject",
    response_model=TransitionResponse,
    summary="Reject",
)
async def reject_application(
    entry_id: str = Path(..., description="Application or candidate id"),
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    """Reject a pipeline entry."""
    entry = await transition_service.reject(db, entry_id)
    return TransitionResponse(message="Application rejected", application=entry)


@router.put(
    "/{entry_id}/hire",
    response_model=TransitionResponse,
    summary="Hire",
    description="Mark hired and start onboarding.",
)
async def hire_application(
    entry_id: str = Path(..., description="Application or candidate id"),
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    """Hire a pipeline entry and initialize onboarding."""
    entry = await transition_service.hire(db, entry_id)
    return TransitionResponse(message="Candidate hired! Onboarding started.", application=entry)
