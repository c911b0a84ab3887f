"""
Position endpoints.

Open positions are public. Everything else is scoped to the creator.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import CallerIdentity, require_hiring_staff
from api.schemas.common import AckResponse
from api.schemas.positions import PositionCreate, PositionResponse, PositionUpdate
from api.services import positions as position_service
from database.engine import get_db

router = APIRouter(prefix="/positions", tags=["positions"])


@router.get(
    "/open",
    response_model=list[PositionResponse],
    summary="List Open Positions",
)
async def list_open_positions(db: AsyncSession = Depends(get_db)):
    """Every open position, newest first. No caller required."""
    return await position_service.list_open_positions(db)


@router.get("", response_model=list[PositionResponse], summary="List My Positions")
async def list_my_positions(
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    return await position_service.list_positions_for_owner(db, current_caller.user_id)


@router.post(
    "",
    response_model=PositionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Position",
)
async def create_position(
    data: PositionCreate,
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    return await position_service.create_position(db, data, current_caller.user_id)


@router.get("/{position_id}", response_model=PositionResponse, summary="Get Position")
async def get_position(
    position_id: str = Path(..., description="Position id"),
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    position = await position_service.get_position(db, position_id, current_caller.user_id)
    if not position:
        raise HTTPException(status_code=404, detail="Position not found")
    return position


@router.put("/{position_id}", response_model=PositionResponse, summary="Update Position")
async def update_position(
    data: PositionUpdate,
    position_id: str = Path(..., description="Position id"),
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    position = await position_service.update_position(db, position_id, current_caller.user_id, data)
    if not position:
        raise HTTPException(status_code=404, detail="Position not found")
    return position


@router.delete("/{position_id}", response_model=AckResponse, summary="Delete Position")
async def delete_position(
    position_id: str = Path(..., description="Position id"),
    current_caller: CallerIdentity = Depends(require_hiring_staff),
    db: AsyncSession = Depends(get_db),
):
    deleted = await position_service.delete_position(db, position_id, current_caller.user_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Position not found")
    return AckResponse(message="Position deleted")
