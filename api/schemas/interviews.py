"""Interview API schemas."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class InterviewBase(BaseModel):
    """Fields shared by interview create and response."""

    candidate_first_name: str = Field(..., min_length=1, max_length=100)
    candidate_last_name: str = Field("", max_length=100)
    interviewer_name: Optional[str] = Field(None, max_length=255)
    date: Optional[datetime] = Field(None, description="Interview date and time (ISO 8601)")
    job_position: Optional[str] = Field(
        None, max_length=255, description="Position title; matched against open positions"
    )
    interview_mode: str = Field("Online", max_length=50)
    status: str = Field("Pending", max_length=50)
    result: str = Field("Pending", max_length=50)
    rating: int = Field(0, ge=0, le=5, description="Rating out of 5")
    questions_asked: Optional[str] = None
    notes: Optional[str] = None
    feedback: Optional[str] = None
    resume: Optional[str] = Field(None, description="Stored resume path")

    @field_validator("candidate_first_name", "candidate_last_name", mode="before")
    @classmethod
    def strip_names(cls, v: str) -> str:
        """Strip whitespace from name fields."""
        if isinstance(v, str):
            return v.strip()
        return v


class InterviewCreate(InterviewBase):
    """Request model for recording an interview."""

    notify_manager: bool = Field(False, description="Message the position's hiring manager")


class InterviewUpdate(BaseModel):
    """Partial update; only supplied fields are written."""

    candidate_first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    candidate_last_name: Optional[str] = Field(None, max_length=100)
    interviewer_name: Optional[str] = Field(None, max_length=255)
    date: Optional[datetime] = None
    job_position: Optional[str] = Field(None, max_length=255)
    interview_mode: Optional[str] = Field(None, max_length=50)
    status: Optional[str] = Field(None, max_length=50)
    result: Optional[str] = Field(None, max_length=50)
    rating: Optional[int] = Field(None, ge=0, le=5)
    questions_asked: Optional[str] = None
    notes: Optional[str] = None
    feedback: Optional[str] = None
    resume: Optional[str] = None
    notify_manager: bool = False


class InterviewResponse(InterviewBase):
    """Interview as returned by the API."""

    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
