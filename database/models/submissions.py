"""Recruiter submission join records (Candidate x Position)."""

from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, DateTime, ForeignKey
from database.engine import Base, new_id, utcnow
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from database.models.candidates import Candidate
    from database.models.positions import Position


class Submission(Base):
    """
    Links a Candidate to a Position. Carries no status of its own.

    Either side may be deleted out from under the join; readers must treat a
    missing candidate or position as an orphan and skip the row.
    """

    __tablename__: str = "submissions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    candidate_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("candidates.id", ondelete="SET NULL"), nullable=True, index=True
    )
    position_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("positions.id", ondelete="SET NULL"), nullable=True, index=True
    )
    submitted_by: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )

    candidate: Mapped["Candidate | None"] = relationship("Candidate", lazy="raise")
    position: Mapped["Position | None"] = relationship("Position", lazy="raise")

    def __repr__(self) -> str:
        return f"<Submission id={self.id} candidate={self.candidate_id} position={self.position_id}>"
