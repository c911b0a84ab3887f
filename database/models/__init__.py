"""ORM models for the recruitment pipeline."""

from database.models.positions import Position, PositionStatus
from database.models.applications import DirectApplication, ApplicationStatus, OnboardingState
from database.models.candidates import Candidate, CandidateStatus
from database.models.submissions import Submission
from database.models.messages import Message, MessageStatus
from database.models.interviews import Interview
from database.models.users import User, UserRole, MANAGER_ROLES

__all__ = [
    "Position",
    "PositionStatus",
    "DirectApplication",
    "ApplicationStatus",
    "OnboardingState",
    "Candidate",
    "CandidateStatus",
    "Submission",
    "Message",
    "MessageStatus",
    "Interview",
    "User",
    "UserRole",
    "MANAGER_ROLES",
]
