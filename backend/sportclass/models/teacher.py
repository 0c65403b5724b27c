# backend/sportclass/models/teacher.py
"""
Teacher model.

Teachers are never deleted by the scheduling core; they are deactivated,
which only blocks new bookings.
"""

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.sql import func
import ulid

from ..database import Base


class TeacherRow(Base):
    __tablename__ = "teachers"

    id = Column(String(26), primary_key=True, default=lambda: str(ulid.ULID()))
    name = Column(String(200), nullable=False, index=True)
    email = Column(String(254), nullable=False, unique=True)
    specialization = Column(String(100), nullable=False, index=True)
    active = Column(Boolean, nullable=False, default=True, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self) -> str:
        return f"<TeacherRow {self.id} {self.name!r} active={self.active}>"
