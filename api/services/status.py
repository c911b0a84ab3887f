"""
Canonical pipeline status model.

Direct applications and recruiter-submitted candidates store their status in
two different vocabularies. Services work on ``PipelineStatus`` only and
convert at the store boundary with ``to_canonical`` / ``to_store``.
"""

from enum import Enum as PyEnum

from core.exceptions import ValidationFailure
from database.models.applications import ApplicationStatus, OnboardingState
from database.models.candidates import CandidateStatus


class EntrySource(str, PyEnum):
    """Which store owns a pipeline entry."""

    DIRECT = "direct"
    CANDIDATE = "candidate"


class PipelineStatus(str, PyEnum):
    """Union of both store vocabularies."""

    APPLIED = "Applied"
    SUBMITTED = "Submitted"
    SCREENING = "Screening"
    UNDER_REVIEW = "Under Review"
    PHONE_SCREEN_SCHEDULED = "Phone Screen Scheduled"
    SHORTLISTED = "Shortlisted"
    INTERVIEW = "Interview"
    ONSITE_SCHEDULED = "Onsite Scheduled"
    OFFER = "Offer"
    HIRED = "Hired"
    REJECTED = "Rejected"


OnboardingStatus = OnboardingState

VALID_ONBOARDING_STATUSES: tuple[str, ...] = tuple(s.value for s in OnboardingState)

# Canonical values a store cannot hold verbatim but has a direct equivalent for
_STORE_EQUIVALENTS: dict[EntrySource, dict[PipelineStatus, str]] = {
    EntrySource.DIRECT: {PipelineStatus.SUBMITTED: ApplicationStatus.APPLIED.value},
    EntrySource.CANDIDATE: {PipelineStatus.APPLIED: CandidateStatus.SUBMITTED.value},
}

_STORE_VOCABULARY: dict[EntrySource, frozenset[str]] = {
    EntrySource.DIRECT: frozenset(s.value for s in ApplicationStatus),
    EntrySource.CANDIDATE: frozenset(s.value for s in CandidateStatus),
}


def to_canonical(source: EntrySource, raw: str) -> PipelineStatus:
    """Map a stored status value onto the canonical status."""
    if raw not in _STORE_VOCABULARY[source]:
        raise ValidationFailure(f"Unknown {source.value} status: {raw!r}")
    return PipelineStatus(raw)


def to_store(source: EntrySource, status: PipelineStatus) -> str:
    """Map a canonical status onto the value the owning store persists."""
    if status.value in _STORE_VOCABULARY[source]:
        return status.value
    equivalent = _STORE_EQUIVALENTS[source].get(status)
    if equivalent is None:
        raise ValidationFailure(
            f"Status {status.value!r} has no equivalent for {source.value} records"
        )
    return equivalent


def parse_onboarding_status(value: str) -> OnboardingState:
    """Validate an onboarding value coming from a caller."""
    try:
        return OnboardingState(value)
    except ValueError:
        raise ValidationFailure(
            f"Onboarding status must be one of: {', '.join(VALID_ONBOARDING_STATUSES)}"
        ) from None
