"""Position API schemas."""

from datetime import datetime
from typing import Literal, Optional, Union
from pydantic import BaseModel, Field, field_validator

PositionStatusType = Literal["Open", "Closed"]


def normalize_skills(value: Union[str, list, None]) -> list[str]:
    """Accept a list or a comma-separated string; return trimmed, non-empty skills."""
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = [str(v) for v in value]
    else:
        return []
    return [s.strip() for s in items if s and s.strip()]


class PositionCreate(BaseModel):
    """Request model for creating a position."""

    title: str = Field(..., min_length=1, max_length=255)
    department: Optional[str] = Field(None, max_length=255)
    project: Optional[str] = Field(None, max_length=255)
    organization: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    required_skills: list[str] = Field(default_factory=list)
    location: Optional[str] = Field(None, max_length=255)
    openings: int = Field(1, ge=0)
    status: PositionStatusType = "Open"

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("required_skills", mode="before")
    @classmethod
    def split_skills(cls, v):
        return normalize_skills(v)


class PositionUpdate(BaseModel):
    """Partial update of a position by its creator."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    department: Optional[str] = Field(None, max_length=255)
    project: Optional[str] = Field(None, max_length=255)
    organization: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    required_skills: Optional[list[str]] = None
    location: Optional[str] = Field(None, max_length=255)
    openings: Optional[int] = Field(None, ge=0)
    status: Optional[PositionStatusType] = None

    @field_validator("required_skills", mode="before")
    @classmethod
    def split_skills(cls, v):
        if v is None:
            return None
        return normalize_skills(v)


class PositionResponse(BaseModel):
    """Position as returned by the API."""

    id: str
    title: str
    department: Optional[str] = None
    project: Optional[str] = None
    organization: Optional[str] = None
    description: Optional[str] = None
    required_skills: list[str] = Field(default_factory=list)
    location: Optional[str] = None
    openings: int
    status: PositionStatusType
    created_by: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
