"""Tests for hiring-manager interview notifications."""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import select

from api.schemas.interviews import InterviewCreate, InterviewUpdate
from api.services import interviews as interview_service
from api.services.notifications import build_interview_summary, notify_hiring_manager
from database.models import Interview, Message


async def _messages(session):
    result = await session.execute(select(Message))
    return list(result.scalars().all())


class TestInterviewSummary:

    def test_summary_lines(self):
        interview = Interview(
            candidate_first_name="Jane",
            candidate_last_name="Smith",
            job_position="Engineer",
            interviewer_name="Sam Lee",
            status="Completed",
            result="Passed",
            rating=4,
            feedback="Strong systems design.",
        )

        subject, body = build_interview_summary(interview)

        assert subject == "Interview Update: Jane Smith"
        assert "Candidate: Jane Smith" in body
        assert "Position: Engineer" in body
        assert "Interviewer: Sam Lee" in body
        assert "Result: Passed" in body
        assert "Rating: 4/5" in body
        assert "Feedback: Strong systems design." in body

    def test_missing_feedback_placeholder(self):
        interview = Interview(candidate_first_name="Jane", candidate_last_name="", rating=0)

        _, body = build_interview_summary(interview)

        assert "Feedback: No feedback provided." in body


class TestNotifyHiringManager:

    @pytest.mark.asyncio
    async def test_message_sent_to_position_creator(
        self, db_session, make_user, make_position, make_interview
    ):
        manager = await make_user(email="manager@example.com")
        await make_position(title="Engineer", created_by=manager.id)
        interview = await make_interview(job_position="Engineer", result="Passed", rating=5)

        message = await notify_hiring_manager(db_session, interview, True)

        assert message is not None
        assert message.to == "manager@example.com"
        assert message.sender == "System"
        assert message.status == "unread"
        assert message.related_id == interview.id
        assert message.subject == "Interview Update: Jane Smith"

    @pytest.mark.asyncio
    async def test_flag_off_sends_nothing(self, db_session, make_user, make_position, make_interview):
        manager = await make_user(email="manager@example.com")
        await make_position(created_by=manager.id)
        interview = await make_interview()

        assert await notify_hiring_manager(db_session, interview, False) is None
        assert await _messages(db_session) == []

    @pytest.mark.asyncio
    async def test_no_matching_position_is_skipped(self, db_session, make_interview, caplog):
        interview = await make_interview(job_position="Astronaut")

        assert await notify_hiring_manager(db_session, interview, True) is None
        assert await _messages(db_session) == []
        assert "skipping interview notification" in caplog.text

    @pytest.mark.asyncio
    async def test_missing_creator_is_skipped(self, db_session, make_position, make_interview):
        await make_position(title="Engineer", created_by="ghost-user")
        interview = await make_interview(job_position="Engineer")

        assert await notify_hiring_manager(db_session, interview, True) is None

    @pytest.mark.asyncio
    async def test_lookup_failure_is_swallowed(self, db_session, make_interview, caplog):
        interview = await make_interview()

        with patch(
            "api.services.notifications._find_position_by_title",
            AsyncMock(side_effect=RuntimeError("store down")),
        ):
            result = await notify_hiring_manager(db_session, interview, True)

        assert result is None
        assert "Failed to notify hiring manager" in caplog.text


class TestInterviewWritesNotify:

    @pytest.mark.asyncio
    async def test_create_with_notify_creates_message(self, db_session, make_user, make_position):
        manager = await make_user(email="manager@example.com")
        await make_position(title="Engineer", created_by=manager.id)

        interview = await interview_service.create_interview(
            db_session,
            InterviewCreate(
                candidate_first_name="Jane",
                candidate_last_name="Smith",
                job_position="Engineer",
                notify_manager=True,
            ),
        )

        messages = await _messages(db_session)
        assert len(messages) == 1
        assert messages[0].related_id == interview.id

    @pytest.mark.asyncio
    async def test_create_survives_notification_failure(self, db_session):
        with patch(
            "api.services.notifications._find_position_by_title",
            AsyncMock(side_effect=RuntimeError("store down")),
        ):
            interview = await interview_service.create_interview(
                db_session,
                InterviewCreate(candidate_first_name="Jane", job_position="Engineer", notify_manager=True),
            )

        stored = await db_session.get(Interview, interview.id)
        assert stored is not None

    @pytest.mark.asyncio
    async def test_update_summarizes_stored_state(
        self, db_session, make_user, make_position, make_interview
    ):
        manager = await make_user(email="manager@example.com")
        await make_position(title="Engineer", created_by=manager.id)
        interview = await make_interview(job_position="Engineer")

        await interview_service.update_interview(
            db_session,
            interview.id,
            InterviewUpdate(result="Passed", rating=4, notify_manager=True),
        )

        messages = await _messages(db_session)
        assert len(messages) == 1
        assert "Result: Passed" in messages[0].body
        assert "Rating: 4/5" in messages[0].body
