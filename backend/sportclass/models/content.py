# backend/sportclass/models/content.py
"""
Content model.

Educational material (video, PDF) tied to exactly one sport. The sport
reference is set at creation and never updated.
"""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import ulid

from ..database import Base


class ContentRow(Base):
    __tablename__ = "contents"

    id = Column(String(26), primary_key=True, default=lambda: str(ulid.ULID()))
    title = Column(String(200), nullable=False, index=True)
    description = Column(String(1000), nullable=True)
    level = Column(String(50), nullable=False, index=True)
    duration_minutes = Column(Integer, nullable=False)
    url = Column(String(500), nullable=True)
    sport_id = Column(String(26), ForeignKey("sports.id"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    sport = relationship("SportRow", back_populates="contents")

    __table_args__ = (
        CheckConstraint("duration_minutes > 0", name="ck_contents_duration_positive"),
    )

    def __repr__(self) -> str:
        return f"<ContentRow {self.id} {self.title!r}>"
