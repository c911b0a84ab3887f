"""
User directory.

Accounts are provisioned by the external auth service; this table only
mirrors what the pipeline needs, chiefly the email of a position's creator.
"""

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, DateTime
from database.engine import Base, new_id, utcnow
from datetime import datetime
from enum import Enum as PyEnum


class UserRole(str, PyEnum):
    CANDIDATE = "candidate"
    EMPLOYER = "employer"
    HIRING_MANAGER = "hiringManager"
    RECRUITER = "recruiter"


MANAGER_ROLES: frozenset[str] = frozenset({UserRole.EMPLOYER.value, UserRole.HIRING_MANAGER.value})


class User(Base):
    __tablename__: str = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    role: Mapped[str] = mapped_column(String(20), default=UserRole.CANDIDATE.value, nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
