"""
Candidate Models

The person behind recruiter submissions. Status and onboarding progress are
carried here, shared across every position the candidate is submitted for.
"""

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, DateTime, Text
from database.engine import Base, new_id, utcnow
from database.models.applications import OnboardingState
from datetime import datetime
from enum import Enum as PyEnum


class CandidateStatus(str, PyEnum):
    """Status vocabulary of a recruiter-submitted candidate."""

    SUBMITTED = "Submitted"
    UNDER_REVIEW = "Under Review"
    PHONE_SCREEN_SCHEDULED = "Phone Screen Scheduled"
    SHORTLISTED = "Shortlisted"
    INTERVIEW = "Interview"
    REJECTED = "Rejected"
    ONSITE_SCHEDULED = "Onsite Scheduled"
    HIRED = "Hired"


class Candidate(Base):
    """A candidate submitted by a recruiter or agency."""

    __tablename__: str = "candidates"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    first_name: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Free-text label; the authoritative link is the Submission
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)
    agency: Mapped[str | None] = mapped_column(String(255), nullable=True)
    recruiter: Mapped[str | None] = mapped_column(String(255), nullable=True)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    hiring_manager: Mapped[str | None] = mapped_column(String(255), nullable=True)

    status: Mapped[str] = mapped_column(
        String(32), default=CandidateStatus.SUBMITTED.value, nullable=False, index=True
    )
    onboarding_status: Mapped[str] = mapped_column(
        String(32), default=OnboardingState.PENDING.value, nullable=False
    )

    submitted_by_recruiter: Mapped[str | None] = mapped_column(String(36), nullable=True)
    resume_path: Mapped[str | None] = mapped_column(Text, nullable=True)
    resume_original_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )

    def __repr__(self) -> str:
        return f"<Candidate id={self.id} email={self.email} status={self.status}>"
