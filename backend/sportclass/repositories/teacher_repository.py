# backend/sportclass/repositories/teacher_repository.py
"""
Teacher Repository for SportClass

Data access for teachers, returning immutable Teacher entities.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException
from ..domain.entities import Teacher, create_teacher
from ..models.teacher import TeacherRow
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class TeacherRepository(BaseRepository[TeacherRow]):
    """Repository for teacher lookups, activation state and classification queries."""

    def __init__(self, db: Session):
        super().__init__(db, TeacherRow)

    @staticmethod
    def to_entity(row: TeacherRow) -> Teacher:
        return create_teacher(
            name=row.name,
            email=row.email,
            specialization=row.specialization,
            active=bool(row.active),
            id=row.id,
        )

    def get_teacher(self, teacher_id: str) -> Optional[Teacher]:
        row = self.get_by_id(teacher_id)
        return self.to_entity(row) if row is not None else None

    def _all_rows(self) -> List[TeacherRow]:
        try:
            return self.db.query(TeacherRow).order_by(TeacherRow.name, TeacherRow.id).all()
        except SQLAlchemyError as e:
            self.logger.error(f"Error loading teachers: {str(e)}")
            raise RepositoryException(f"Failed to load teachers: {str(e)}")

    def find_by_email(self, email: str) -> Optional[Teacher]:
        # casefold in Python; SQLite lower() leaves non-ASCII letters alone
        key = email.strip().casefold()
        for row in self._all_rows():
            if row.email.casefold() == key:
                return self.to_entity(row)
        return None

    def list_active(self) -> List[Teacher]:
        try:
            rows = (
                self.db.query(TeacherRow)
                .filter(TeacherRow.active.is_(True))
                .order_by(TeacherRow.name, TeacherRow.id)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing active teachers: {str(e)}")
            raise RepositoryException(f"Failed to list teachers: {str(e)}")
        return [self.to_entity(row) for row in rows]

    def _find_containing(self, attribute: str, term: str) -> List[Teacher]:
        needle = term.strip().casefold()
        return [
            self.to_entity(row)
            for row in self._all_rows()
            if needle in getattr(row, attribute).casefold()
        ]

    def find_by_name_containing(self, term: str) -> List[Teacher]:
        return self._find_containing("name", term)

    def find_by_specialization_containing(self, term: str) -> List[Teacher]:
        return self._find_containing("specialization", term)

    def add(self, teacher: Teacher) -> Teacher:
        row = self.insert(
            id=teacher.id,
            name=teacher.name,
            email=teacher.email,
            specialization=teacher.specialization,
            active=teacher.active,
        )
        return self.to_entity(row)

    def save_changes(self, teacher: Teacher) -> Optional[Teacher]:
        row = self.update_fields(
            teacher.id,
            name=teacher.name,
            email=teacher.email,
            specialization=teacher.specialization,
            active=teacher.active,
        )
        return self.to_entity(row) if row is not None else None
