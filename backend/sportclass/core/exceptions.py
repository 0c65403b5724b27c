# backend/sportclass/core/exceptions.py
"""
Domain-specific exceptions for the SportClass scheduling service.

Every booking or cancellation rejection is one of these typed exceptions.
They carry a business-focused message plus structured details and know how
to convert themselves into an HTTPException at the API layer.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import HTTPException, status

HTTP_422_UNPROCESSABLE: int = getattr(status, "HTTP_422_UNPROCESSABLE_CONTENT", 422)


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_http_exception(self) -> HTTPException:
        return HTTPException(
            status_code=self.status_code,
            detail={
                "message": self.message,
                "code": self.code,
                "details": self.details,
            },
        )


class ValidationException(DomainException):
    """Raised when a field value violates an entity invariant."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(
            message=f"{field}: {reason}",
            code="VALIDATION_ERROR",
            details={"field": field, "reason": reason},
        )


class NotFoundException(DomainException):
    """Raised when a requested resource is not found."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity_type: str, entity_id: Any) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            message=f"{entity_type} not found: {entity_id}",
            code="NOT_FOUND",
            details={"entity_type": entity_type, "id": entity_id},
        )


class ConflictException(DomainException):
    """Raised when there's a conflict with existing data."""

    status_code = status.HTTP_409_CONFLICT


class BusinessRuleException(DomainException):
    """Raised when a business rule is violated."""

    status_code = HTTP_422_UNPROCESSABLE


class ServiceException(DomainException):
    """Raised when a service operation fails."""

    def to_http_exception(self) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "message": self.message or "An error occurred processing your request",
                "code": self.code,
                "details": self.details if self.details else {},
            },
        )


# Specific booking rejections


class TeacherInactiveException(BusinessRuleException):
    """Raised when a lesson is requested for a deactivated teacher."""

    def __init__(self, teacher_id: str) -> None:
        self.teacher_id = teacher_id
        super().__init__(
            message="Cannot book a lesson for an inactive teacher",
            code="TEACHER_INACTIVE",
            details={"teacher_id": teacher_id},
        )


class SpecializationMismatchException(BusinessRuleException):
    """Raised when the teacher's specialization does not cover the sport."""

    def __init__(self, required: str, actual: str) -> None:
        self.required = required
        self.actual = actual
        super().__init__(
            message=f"Teacher is not specialized in {required}",
            code="SPECIALIZATION_MISMATCH",
            details={"required": required, "actual": actual},
        )


class ScheduleConflictException(ConflictException):
    """Raised when a lesson overlaps an existing lesson of the same teacher."""

    def __init__(self, conflicting_lesson_id: str) -> None:
        self.conflicting_lesson_id = conflicting_lesson_id
        super().__init__(
            message="Teacher already has a lesson scheduled at the requested time",
            code="SCHEDULE_CONFLICT",
            details={"conflicting_lesson_id": conflicting_lesson_id},
        )


class AlreadyOccurredException(BusinessRuleException):
    """Raised when cancelling a lesson whose start is not in the future."""

    def __init__(self, lesson_id: str, starts_at: datetime) -> None:
        self.lesson_id = lesson_id
        self.starts_at = starts_at
        super().__init__(
            message="Cannot cancel a lesson that has already taken place",
            code="ALREADY_OCCURRED",
            details={"lesson_id": lesson_id, "starts_at": starts_at.isoformat()},
        )


class RepositoryException(Exception):
    """
    Exception raised for repository layer errors.

    Used when data access operations fail, such as database connection
    issues, query failures, or constraint violations.
    """
