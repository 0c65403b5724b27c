# backend/sportclass/models/sport.py
"""
Sport model.

A sport is referenced by contents and lessons. Its name is unique.
"""

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import ulid

from ..database import Base


class SportRow(Base):
    __tablename__ = "sports"

    id = Column(String(26), primary_key=True, default=lambda: str(ulid.ULID()))
    name = Column(String(100), nullable=False, unique=True)
    category = Column(String(50), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    contents = relationship("ContentRow", back_populates="sport")

    def __repr__(self) -> str:
        return f"<SportRow {self.id} {self.name!r}>"
