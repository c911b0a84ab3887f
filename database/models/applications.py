"""
Direct Application Models

Self-service applications. Each record is self-contained: status and
onboarding progress live directly on the row, so no join table is needed.
"""

from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, DateTime, ForeignKey, Text, Index
from database.engine import Base, new_id, utcnow
from datetime import datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from database.models.positions import Position


# ==================== Application Enums ===================== #
class ApplicationStatus(str, PyEnum):
    """Status vocabulary of a direct application."""

    APPLIED = "Applied"
    SCREENING = "Screening"
    UNDER_REVIEW = "Under Review"
    INTERVIEW = "Interview"
    OFFER = "Offer"
    HIRED = "Hired"
    REJECTED = "Rejected"


class OnboardingState(str, PyEnum):
    """Post-hire onboarding progress, shared by both entry paths."""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


# ==================== Application Model ===================== #
class DirectApplication(Base):
    """A candidate's own application against an open position."""

    __tablename__: str = "applications"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    job_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("positions.id", ondelete="SET NULL"), nullable=True, index=True
    )
    # Denormalized position title at application time
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)

    candidate_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    resume_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    status: Mapped[str] = mapped_column(
        String(32), default=ApplicationStatus.APPLIED.value, nullable=False, index=True
    )
    onboarding_status: Mapped[str] = mapped_column(
        String(32), default=OnboardingState.PENDING.value, nullable=False
    )

    created_by: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    applied_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )

    job: Mapped["Position | None"] = relationship("Position", lazy="raise")

    __table_args__ = (
        Index("idx_applications_status_applied", "status", "applied_at"),
    )

    def __repr__(self) -> str:
        return f"<DirectApplication id={self.id} email={self.email} status={self.status}>"
