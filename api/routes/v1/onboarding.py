"""Onboarding board endpoints."""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import CallerIdentity, require_caller, require_hiring_staff
from api.schemas.pipeline import OnboardingEntry, OnboardingStatusUpdate, PipelineEntry
from api.services import pipeline as pipeline_service
from api.services import transitions as transition_service
from database.engine import get_db

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


@router.get(
    "",
    response_model=list[OnboardingEntry],
    summary="List Hired Candidates",
)
async def list_onboarding(
    current_caller: CallerIdentity = Depends(require_caller),
    db: AsyncSession = Depends(get_db),
):
    """Hired entries from both entry paths, newest first."""
    return await pipeline_service.list_onboarding(db)


@router.put(
    "/{entry_id}/status",
    response_model=PipelineEntry,
    summary="Set Onboarding Status",
)
async def set_onboarding_status(
    update: OnboardingStatusUpdate,
    entry_id: str = Path(..., description="Application or candidate id"),
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    """Write onboarding progress for a pipeline entry."""
    return await transition_service.set_onboarding_status(db, entry_id, update.onboarding_status)
