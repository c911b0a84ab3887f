"""Tests for status transitions across both stores."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from api.services import transitions
from core.exceptions import RecordNotFound, TransientStoreError, ValidationFailure
from database.models import Candidate, DirectApplication


class TestDirectApplicationTransitions:

    @pytest.mark.asyncio
    async def test_review_then_hire(self, db_session, make_application):
        await make_application(id="a1", status="Applied")

        reviewed = await transitions.review(db_session, "a1")
        assert reviewed.status == "Under Review"

        hired = await transitions.hire(db_session, "a1")
        assert hired.status == "Hired"
        assert hired.onboarding_status == "Pending"

        stored = await db_session.get(DirectApplication, "a1")
        assert stored.status == "Hired"
        assert stored.onboarding_status == "Pending"

    @pytest.mark.asyncio
    async def test_reject_then_hire(self, db_session, make_application):
        await make_application(id="a2")

        await transitions.reject(db_session, "a2")
        hired = await transitions.hire(db_session, "a2")

        assert hired.status == "Hired"

    @pytest.mark.asyncio
    async def test_reject_twice_is_noop(self, db_session, make_application):
        await make_application(id="a3")

        first = await transitions.reject(db_session, "a3")
        second = await transitions.reject(db_session, "a3")

        assert first.status == second.status == "Rejected"


class TestCandidateTransitions:

    @pytest.mark.asyncio
    async def test_hire_candidate_leaves_direct_store_untouched(
        self, db_session, make_candidate, make_application
    ):
        await make_candidate(id="c1")
        await make_application(id="a1")

        entry = await transitions.hire(db_session, "c1")

        assert entry.source.value == "candidate"
        assert entry.status == "Hired"
        assert (await db_session.get(Candidate, "c1")).status == "Hired"
        assert (await db_session.get(DirectApplication, "a1")).status == "Applied"

    @pytest.mark.asyncio
    async def test_review_direct_leaves_candidate_store_untouched(
        self, db_session, make_candidate, make_application
    ):
        await make_candidate(id="c1")
        await make_application(id="a1")

        await transitions.review(db_session, "a1")

        assert (await db_session.get(Candidate, "c1")).status == "Submitted"


class TestHireOnboarding:

    @pytest.mark.asyncio
    async def test_rehire_keeps_onboarding_progress(self, db_session, make_candidate):
        await make_candidate(id="c1")
        await transitions.hire(db_session, "c1")
        await transitions.set_onboarding_status(db_session, "c1", "In Progress")

        entry = await transitions.hire(db_session, "c1")

        assert entry.status == "Hired"
        assert entry.onboarding_status == "In Progress"

    @pytest.mark.asyncio
    async def test_hire_resets_stale_onboarding(self, db_session, make_application):
        await make_application(id="a1", onboarding_status="Completed")

        entry = await transitions.hire(db_session, "a1")

        assert entry.onboarding_status == "Pending"

    @pytest.mark.asyncio
    async def test_hire_overwrites_unrecognized_status(self, db_session, make_application):
        await make_application(id="a1", status="Legacy", onboarding_status="Completed")

        entry = await transitions.hire(db_session, "a1")

        assert entry.status == "Hired"
        assert entry.onboarding_status == "Pending"
        stored = await db_session.get(DirectApplication, "a1")
        assert stored.status == "Hired"


class TestOnboardingStatus:

    @pytest.mark.asyncio
    async def test_set_onboarding_on_hired_entry(self, db_session, make_application):
        await make_application(id="a1", status="Hired")

        entry = await transitions.set_onboarding_status(db_session, "a1", "Completed")

        assert entry.onboarding_status == "Completed"

    @pytest.mark.asyncio
    async def test_set_onboarding_on_non_hired_entry_is_accepted(self, db_session, make_candidate):
        await make_candidate(id="c1", status="Interview")

        entry = await transitions.set_onboarding_status(db_session, "c1", "In Progress")

        assert entry.status == "Interview"
        assert entry.onboarding_status == "In Progress"

    @pytest.mark.asyncio
    async def test_invalid_onboarding_value_rejected_before_lookup(self, db_session):
        # validation happens first, so an unknown id still yields a validation error
        with pytest.raises(ValidationFailure):
            await transitions.set_onboarding_status(db_session, "zzz", "Done")


class TestMissingIds:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", ["review", "reject", "hire"])
    async def test_unknown_id_creates_nothing(self, db_session, action):
        with pytest.raises(RecordNotFound):
            await getattr(transitions, action)(db_session, "zzz")

        apps = await db_session.scalar(select(func.count()).select_from(DirectApplication))
        candidates = await db_session.scalar(select(func.count()).select_from(Candidate))
        assert apps == 0
        assert candidates == 0

    @pytest.mark.asyncio
    async def test_unknown_id_for_onboarding(self, db_session):
        with pytest.raises(RecordNotFound):
            await transitions.set_onboarding_status(db_session, "zzz", "Pending")


class TestStoreFailures:

    @pytest.mark.asyncio
    async def test_commit_failure_is_transient(self, db_session, make_application, monkeypatch):
        await make_application(id="a1")
        monkeypatch.setattr(
            AsyncSession,
            "commit",
            AsyncMock(side_effect=OperationalError("UPDATE", {}, Exception("connection lost"))),
        )

        with pytest.raises(TransientStoreError) as exc_info:
            await transitions.hire(db_session, "a1")

        assert exc_info.value.status_code == 503
