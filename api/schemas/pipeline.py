"""Unified pipeline entry schemas."""

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator

from api.services.status import EntrySource, VALID_ONBOARDING_STATUSES


class PipelineEntry(BaseModel):
    """
    Store-agnostic projection of a pipeline entry.

    ``id`` is always the id of the record that owns the status (the
    DirectApplication or the Candidate), so it can be fed straight back into
    the transition endpoints.
    """

    id: str
    source: EntrySource
    candidate_name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    status: str
    onboarding_status: str = "Pending"
    resume_url: Optional[str] = None
    applied_at: Optional[datetime] = None
    is_recruiter_submission: bool = False
    submission_id: Optional[str] = None
    job_id: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "id": "3f1c0c7e2b5d4d0a9f1e2c3b4a5d6e7f",
                "source": "candidate",
                "candidate_name": "Jane Smith",
                "email": "jane@example.com",
                "phone": "+1-555-0123",
                "position": "Engineer",
                "status": "Submitted",
                "onboarding_status": "Pending",
                "resume_url": "uploads/jane.pdf",
                "applied_at": "2026-01-13T12:00:00Z",
                "is_recruiter_submission": True,
                "submission_id": "9a8b7c6d5e4f30211f2e3d4c5b6a7980",
                "job_id": None,
            }
        }


class OnboardingEntry(PipelineEntry):
    """Hired pipeline entry as shown on the onboarding board."""

    department: str = "-"
    type: Literal["Direct", "Agency"]


class TransitionResponse(BaseModel):
    """Result of a status transition."""

    message: str
    application: PipelineEntry


class OnboardingStatusUpdate(BaseModel):
    """Request body for setting onboarding progress."""

    onboarding_status: str = Field(..., description="One of Pending, In Progress, Completed")

    @field_validator("onboarding_status")
    @classmethod
    def validate_onboarding_status(cls, v: str) -> str:
        """Validate onboarding status is one of the allowed values."""
        if v not in VALID_ONBOARDING_STATUSES:
            raise ValueError(f"Onboarding status must be one of: {', '.join(VALID_ONBOARDING_STATUSES)}")
        return v
