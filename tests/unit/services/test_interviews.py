"""Tests for interview records."""

from datetime import datetime, timezone

import pytest

from api.schemas.interviews import InterviewCreate, InterviewUpdate
from api.services import interviews
from core.exceptions import RecordNotFound


@pytest.mark.asyncio
async def test_create_defaults(db_session):
    created = await interviews.create_interview(
        db_session, InterviewCreate(candidate_first_name=" Jane ", job_position="Engineer")
    )

    assert created.candidate_first_name == "Jane"
    assert created.interview_mode == "Online"
    assert created.status == "Pending"
    assert created.result == "Pending"
    assert created.rating == 0


@pytest.mark.asyncio
async def test_list_newest_first(db_session, make_interview):
    await make_interview(id="old", created_at=datetime(2026, 1, 1, tzinfo=timezone.utc))
    await make_interview(id="new", created_at=datetime(2026, 1, 2, tzinfo=timezone.utc))

    result = await interviews.list_interviews(db_session)

    assert [i.id for i in result] == ["new", "old"]


@pytest.mark.asyncio
async def test_update_only_touches_supplied_fields(db_session, make_interview):
    interview = await make_interview(interviewer_name="Sam Lee", notes="keep me")

    updated = await interviews.update_interview(
        db_session, interview.id, InterviewUpdate(status="Completed", notes=None)
    )

    assert updated.status == "Completed"
    assert updated.interviewer_name == "Sam Lee"
    assert updated.notes == "keep me"


@pytest.mark.asyncio
async def test_update_unknown_interview(db_session):
    with pytest.raises(RecordNotFound):
        await interviews.update_interview(db_session, "missing", InterviewUpdate(status="Completed"))


@pytest.mark.asyncio
async def test_get_and_delete(db_session, make_interview):
    interview = await make_interview()

    assert (await interviews.get_interview(db_session, interview.id)).id == interview.id
    assert await interviews.delete_interview(db_session, interview.id) is True
    assert await interviews.get_interview(db_session, interview.id) is None
    assert await interviews.delete_interview(db_session, interview.id) is False
