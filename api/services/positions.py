"""Position service functions."""

from typing import Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.positions import PositionCreate, PositionResponse, PositionUpdate
from database.models.positions import Position, PositionStatus

logger = logging.getLogger(__name__)


async def create_position(
    session: AsyncSession,
    data: PositionCreate,
    created_by: str,
) -> PositionResponse:
    """Create a position owned by ``created_by``."""
    position = Position(**data.model_dump(), created_by=created_by)
    session.add(position)
    await session.commit()

    logger.info(f"Position {position.id} ({position.title!r}) created by {created_by}")
    return PositionResponse.model_validate(position)


async def list_open_positions(session: AsyncSession) -> list[PositionResponse]:
    """Open positions, newest first."""
    result = await session.execute(
        select(Position)
        .where(Position.status == PositionStatus.OPEN.value)
        .order_by(Position.created_at.desc())
    )
    return [PositionResponse.model_validate(p) for p in result.scalars().all()]


async def list_positions_for_owner(session: AsyncSession, owner_id: str) -> list[PositionResponse]:
    """Positions created by ``owner_id``, newest first."""
    result = await session.execute(
        select(Position)
        .where(Position.created_by == owner_id)
        .order_by(Position.created_at.desc())
    )
    return [PositionResponse.model_validate(p) for p in result.scalars().all()]


async def _get_owned(session: AsyncSession, position_id: str, owner_id: str) -> Optional[Position]:
    result = await session.execute(
        select(Position).where(Position.id == position_id, Position.created_by == owner_id)
    )
    return result.scalars().first()


async def get_position(
    session: AsyncSession,
    position_id: str,
    owner_id: str,
) -> Optional[PositionResponse]:
    position = await _get_owned(session, position_id, owner_id)
    if position is None:
        return None
    return PositionResponse.model_validate(position)


async def update_position(
    session: AsyncSession,
    position_id: str,
    owner_id: str,
    data: PositionUpdate,
) -> Optional[PositionResponse]:
    """Update a position; only its creator may do so."""
    position = await _get_owned(session, position_id, owner_id)
    if position is None:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field in ("title", "openings", "status", "required_skills"):
            continue
        setattr(position, field, value)
    await session.commit()
    return PositionResponse.model_validate(position)


async def delete_position(session: AsyncSession, position_id: str, owner_id: str) -> bool:
    """
    Delete a position owned by ``owner_id``.

    Submissions that pointed at it become orphans and drop out of the
    unified pipeline.
    """
    position = await _get_owned(session, position_id, owner_id)
    if position is None:
        return False
    await session.delete(position)
    await session.commit()
    logger.info(f"Position {position_id} deleted by {owner_id}")
    return True
