"""
Positions Module

Job postings owned by the hiring user who created them. Referenced (never
owned) by direct applications and recruiter submissions.
"""

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, DateTime, Integer, Text, JSON, Index
from database.engine import Base, new_id, utcnow
from datetime import datetime
from enum import Enum as PyEnum


class PositionStatus(str, PyEnum):
    """Position posting status."""

    OPEN = "Open"
    CLOSED = "Closed"


class Position(Base):
    """A job posting."""

    __tablename__: str = "positions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    department: Mapped[str | None] = mapped_column(String(255), nullable=True)
    project: Mapped[str | None] = mapped_column(String(255), nullable=True)
    organization: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    required_skills: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    openings: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default=PositionStatus.OPEN.value, nullable=False, index=True
    )

    # Creator (hiring manager / employer)
    created_by: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    __table_args__ = (
        Index("idx_positions_status_created", "status", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Position id={self.id} title={self.title!r} status={self.status}>"
