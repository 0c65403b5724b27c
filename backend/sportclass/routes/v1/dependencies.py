# backend/sportclass/routes/v1/dependencies.py
"""Shared dependencies for the v1 routers."""

from typing import NoReturn

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from ...core.clock import Clock, local_now
from ...core.exceptions import DomainException
from ...database import get_db
from ...services.booking_service import BookingService
from ...services.content_service import ContentService
from ...services.sport_service import SportService
from ...services.teacher_service import TeacherService

ULID_PATH_PATTERN = r"^[0-9A-HJKMNP-TV-Z]{26}$"


def handle_domain_exception(exc: DomainException) -> NoReturn:
    """Convert domain exceptions to HTTP exceptions."""
    if hasattr(exc, "to_http_exception"):
        raise exc.to_http_exception()
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


def get_clock() -> Clock:
    """Clock used by the booking service; overridden in tests."""
    return local_now


def get_booking_service(
    db: Session = Depends(get_db), clock: Clock = Depends(get_clock)
) -> BookingService:
    return BookingService(db, clock=clock)


def get_teacher_service(db: Session = Depends(get_db)) -> TeacherService:
    return TeacherService(db)


def get_sport_service(db: Session = Depends(get_db)) -> SportService:
    return SportService(db)


def get_content_service(db: Session = Depends(get_db)) -> ContentService:
    return ContentService(db)
