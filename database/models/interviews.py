"""
Interview Models

Interview feedback records. The job position is kept as free text and is
matched against position titles when notifying the hiring manager.
"""

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, DateTime, Integer, Text
from database.engine import Base, new_id, utcnow
from datetime import datetime


class Interview(Base):
    """An interview and its outcome."""

    __tablename__: str = "interviews"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    candidate_first_name: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    candidate_last_name: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    interviewer_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    job_position: Mapped[str | None] = mapped_column(String(255), nullable=True)
    interview_mode: Mapped[str] = mapped_column(String(50), default="Online", nullable=False)
    status: Mapped[str] = mapped_column(String(50), default="Pending", nullable=False)
    result: Mapped[str] = mapped_column(String(50), default="Pending", nullable=False)
    rating: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    questions_asked: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    feedback: Mapped[str | None] = mapped_column(Text, nullable=True)
    resume: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )
