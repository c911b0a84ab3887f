"""Tests for resolving a pipeline id to its owning store."""

import logging

import pytest

from api.services.resolver import resolve
from api.services.status import EntrySource, PipelineStatus
from core.exceptions import RecordNotFound


@pytest.mark.asyncio
async def test_resolves_direct_application(db_session, make_application):
    await make_application(id="a1", candidate_name="Alice Applicant")

    handle = await resolve(db_session, "a1")

    assert handle.source is EntrySource.DIRECT
    assert handle.id == "a1"
    assert handle.status is PipelineStatus.APPLIED
    assert handle.display_name == "Alice Applicant"


@pytest.mark.asyncio
async def test_resolves_candidate(db_session, make_candidate):
    await make_candidate(id="c1", first_name="Jane", last_name="Smith")

    handle = await resolve(db_session, "c1")

    assert handle.source is EntrySource.CANDIDATE
    assert handle.status is PipelineStatus.SUBMITTED
    assert handle.display_name == "Jane Smith"
    assert handle.onboarding_status == "Pending"


@pytest.mark.asyncio
async def test_unknown_id_raises_not_found(db_session):
    with pytest.raises(RecordNotFound) as exc_info:
        await resolve(db_session, "zzz")

    assert exc_info.value.record_id == "zzz"
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_id_in_both_stores_prefers_direct_and_warns(
    db_session, make_application, make_candidate, caplog
):
    await make_application(id="dup")
    await make_candidate(id="dup")

    with caplog.at_level(logging.WARNING, logger="api.services.resolver"):
        handle = await resolve(db_session, "dup")

    assert handle.source is EntrySource.DIRECT
    assert "exists in both" in caplog.text
