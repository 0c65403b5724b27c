# backend/sportclass/services/teacher_service.py
"""
Teacher Service for SportClass

Teacher registration, lookups and activation state. Deactivating a teacher
blocks new bookings but leaves already booked lessons untouched.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.exceptions import ConflictException, NotFoundException
from ..domain.entities import Teacher, activate, create_teacher, deactivate
from ..repositories import RepositoryFactory, TeacherRepository
from .base import BaseService

logger = logging.getLogger(__name__)


class TeacherService(BaseService):
    """Service layer for teachers."""

    def __init__(self, db: Session, repository: Optional[TeacherRepository] = None):
        super().__init__(db)
        self.repository = repository or RepositoryFactory.create_teacher_repository(db)

    @BaseService.measure_operation("create_teacher")
    def create_teacher(self, name: str, email: str, specialization: str) -> Teacher:
        """
        Register a new, active teacher.

        Raises:
            ValidationException: A field is malformed
            ConflictException: The email is already registered
        """
        teacher = create_teacher(name=name, email=email, specialization=specialization)
        if self.repository.find_by_email(teacher.email) is not None:
            raise ConflictException(
                "A teacher with this email already exists",
                code="TEACHER_EMAIL_EXISTS",
                details={"email": teacher.email},
            )

        with self.transaction():
            created = self.repository.add(teacher)

        self.logger.info(f"Registered teacher {created.id} ({created.specialization})")
        return created

    @BaseService.measure_operation("get_teacher")
    def get_teacher(self, teacher_id: str) -> Teacher:
        teacher = self.repository.get_teacher(teacher_id)
        if teacher is None:
            raise NotFoundException("Teacher", teacher_id)
        return teacher

    @BaseService.measure_operation("list_active_teachers")
    def list_active_teachers(self) -> List[Teacher]:
        return self.repository.list_active()

    def find_by_name(self, term: str) -> List[Teacher]:
        return self.repository.find_by_name_containing(term)

    def find_by_specialization(self, term: str) -> List[Teacher]:
        """Substring classification query; booking eligibility is stricter."""
        return self.repository.find_by_specialization_containing(term)

    def _set_active(self, teacher_id: str, active: bool) -> Teacher:
        current = self.get_teacher(teacher_id)
        if current.active == active:
            return current

        changed = activate(current) if active else deactivate(current)
        with self.transaction():
            saved = self.repository.save_changes(changed)

        if saved is None:
            raise NotFoundException("Teacher", teacher_id)
        self.logger.info(f"Teacher {teacher_id} {'activated' if active else 'deactivated'}")
        return saved

    @BaseService.measure_operation("deactivate_teacher")
    def deactivate_teacher(self, teacher_id: str) -> Teacher:
        return self._set_active(teacher_id, False)

    @BaseService.measure_operation("activate_teacher")
    def activate_teacher(self, teacher_id: str) -> Teacher:
        return self._set_active(teacher_id, True)
