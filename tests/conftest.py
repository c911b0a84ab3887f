"""Shared fixtures and utilities for tests."""

import os

# Must be set before core.config is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JSON_LOGS", "false")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import database.models  # noqa: F401
from database.engine import Base, get_db
from database.models import (
    Candidate,
    DirectApplication,
    Interview,
    Message,
    Position,
    Submission,
    User,
)


@pytest_asyncio.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client against the app, bound to the test database."""
    from api.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# ==================== Record builders ===================== #

async def _persist(session: AsyncSession, record):
    session.add(record)
    await session.commit()
    return record


@pytest.fixture
def make_position(db_session):
    async def _make(**fields) -> Position:
        fields.setdefault("title", "Engineer")
        fields.setdefault("created_by", "manager-1")
        return await _persist(db_session, Position(**fields))

    return _make


@pytest.fixture
def make_application(db_session):
    async def _make(**fields) -> DirectApplication:
        fields.setdefault("candidate_name", "Alice Applicant")
        fields.setdefault("email", "alice@example.com")
        fields.setdefault("position", "Engineer")
        fields.setdefault("status", "Applied")
        return await _persist(db_session, DirectApplication(**fields))

    return _make


@pytest.fixture
def make_candidate(db_session):
    async def _make(**fields) -> Candidate:
        fields.setdefault("first_name", "Jane")
        fields.setdefault("last_name", "Smith")
        fields.setdefault("email", "jane@example.com")
        fields.setdefault("status", "Submitted")
        return await _persist(db_session, Candidate(**fields))

    return _make


@pytest.fixture
def make_submission(db_session):
    async def _make(candidate=None, position=None, **fields) -> Submission:
        fields.setdefault("submitted_by", "recruiter-1")
        return await _persist(
            db_session,
            Submission(
                candidate_id=candidate.id if candidate is not None else None,
                position_id=position.id if position is not None else None,
                **fields,
            ),
        )

    return _make


@pytest.fixture
def make_user(db_session):
    async def _make(**fields) -> User:
        fields.setdefault("role", "hiringManager")
        return await _persist(db_session, User(**fields))

    return _make


@pytest.fixture
def make_interview(db_session):
    async def _make(**fields) -> Interview:
        fields.setdefault("candidate_first_name", "Jane")
        fields.setdefault("candidate_last_name", "Smith")
        fields.setdefault("job_position", "Engineer")
        return await _persist(db_session, Interview(**fields))

    return _make


@pytest.fixture
def make_message(db_session):
    async def _make(**fields) -> Message:
        fields.setdefault("subject", "Interview Update: Jane Smith")
        fields.setdefault("body", "Status: Passed")
        return await _persist(db_session, Message(**fields))

    return _make
