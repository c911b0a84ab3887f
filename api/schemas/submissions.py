"""Schemas for both pipeline entry paths: direct apply and recruiter submission."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator


class DirectApplicationRequest(BaseModel):
    """A candidate applying to a position themselves."""

    job_id: str = Field(..., description="Position being applied to")
    position_title: Optional[str] = Field(None, max_length=255, description="Fallback title")
    candidate_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    resume_url: Optional[str] = Field(None, max_length=2048, description="Stored resume path")

    @field_validator("candidate_name", mode="before")
    @classmethod
    def strip_name(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("phone", mode="before")
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        """Validate phone number format."""
        if v is None:
            return None
        phone = v.strip()
        if phone and not any(c.isdigit() for c in phone):
            raise ValueError("Phone must contain at least one digit")
        return phone or None


class DirectApplicationResponse(BaseModel):
    id: str
    job_id: Optional[str] = None
    position: Optional[str] = None
    candidate_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    resume_url: Optional[str] = None
    status: str
    onboarding_status: str
    created_by: Optional[str] = None
    applied_at: datetime

    class Config:
        from_attributes = True


class RecruiterSubmissionRequest(BaseModel):
    """A recruiter submitting a candidate against a position."""

    position_id: str
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    agency: Optional[str] = Field(None, max_length=255)
    recruiter: Optional[str] = Field(None, max_length=255)
    company: Optional[str] = Field(None, max_length=255)
    hiring_manager: Optional[str] = Field(None, max_length=255)
    resume_path: Optional[str] = Field(None, max_length=2048)
    resume_original_name: Optional[str] = Field(None, max_length=255)

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def strip_names(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip()
        return v


class CandidateSummary(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    status: str
    onboarding_status: str
    company: Optional[str] = None
    hiring_manager: Optional[str] = None
    resume_path: Optional[str] = None

    class Config:
        from_attributes = True


class PositionSummary(BaseModel):
    id: str
    title: str
    department: Optional[str] = None

    class Config:
        from_attributes = True


class SubmissionResponse(BaseModel):
    id: str
    candidate_id: Optional[str] = None
    position_id: Optional[str] = None
    submitted_by: Optional[str] = None
    created_at: datetime
    candidate: Optional[CandidateSummary] = None
    position: Optional[PositionSummary] = None

    class Config:
        from_attributes = True


class SubmissionFilters(BaseModel):
    """Filters over a recruiter's own submissions."""

    candidate_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    hiring_manager: Optional[str] = None
    company: Optional[str] = None
    submission_id: Optional[str] = None

    def has_candidate_filters(self) -> bool:
        return any([self.candidate_name, self.email, self.phone, self.hiring_manager, self.company])
