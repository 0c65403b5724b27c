# backend/sportclass/routes/v1/lessons.py
"""
Lesson routes - API v1

Versioned lesson endpoints under /api/v1/lessons.
All business logic delegated to BookingService.

Endpoints:
    POST /                  → Book a lesson
    GET /                   → List lessons
    GET /upcoming           → Lessons that have not started yet
    GET /period             → Lessons starting within a period
    GET /conflicts          → Lessons a proposed booking would collide with
    GET /{lesson_id}        → Get one lesson
    DELETE /{lesson_id}     → Cancel a lesson
"""

import asyncio
from datetime import date, datetime, time
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.params import Path

from ...core.constants import DEFAULT_QUERY_LIMIT, MAX_QUERY_LIMIT
from ...core.exceptions import DomainException
from ...schemas.lesson import ConflictResponse, LessonCreate, LessonResponse
from ...services.booking_service import BookingService
from .dependencies import ULID_PATH_PATTERN, get_booking_service, handle_domain_exception

logger = logging.getLogger(__name__)

# V1 router - no prefix here, will be added when mounting in main.py
router = APIRouter(tags=["lessons-v1"])


# ============================================================================
# SECTION 1: Static routes (no path parameters)
# ============================================================================


@router.post("", response_model=LessonResponse, status_code=status.HTTP_201_CREATED)
async def book_lesson(
    payload: LessonCreate,
    booking_service: BookingService = Depends(get_booking_service),
) -> LessonResponse:
    """
    Book a lesson.

    Rejections:
        400 invalid field, 404 unknown teacher/content/sport,
        422 inactive teacher or specialization mismatch,
        409 overlap with an existing lesson of the teacher
    """
    try:
        lesson = await asyncio.to_thread(
            booking_service.book_lesson,
            payload.teacher_id,
            payload.content_id,
            payload.lesson_date,
            payload.start_time,
            title=payload.title,
            location=payload.location,
        )
        return LessonResponse.from_entity(lesson, booking_service.clock())
    except DomainException as e:
        handle_domain_exception(e)


@router.get("", response_model=List[LessonResponse])
async def list_lessons(
    teacher_id: Optional[str] = Query(None),
    content_id: Optional[str] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_QUERY_LIMIT, ge=1, le=MAX_QUERY_LIMIT),
    booking_service: BookingService = Depends(get_booking_service),
) -> List[LessonResponse]:
    """List lessons, optionally for one teacher or one content."""
    try:
        if teacher_id:
            lessons = await asyncio.to_thread(booking_service.list_lessons_for_teacher, teacher_id)
        elif content_id:
            lessons = await asyncio.to_thread(booking_service.list_lessons_for_content, content_id)
        else:
            lessons = await asyncio.to_thread(booking_service.list_lessons, skip, limit)
        now = booking_service.clock()
        return [LessonResponse.from_entity(lesson, now) for lesson in lessons]
    except DomainException as e:
        handle_domain_exception(e)


@router.get("/upcoming", response_model=List[LessonResponse])
async def list_upcoming_lessons(
    booking_service: BookingService = Depends(get_booking_service),
) -> List[LessonResponse]:
    try:
        lessons = await asyncio.to_thread(booking_service.list_upcoming_lessons)
        now = booking_service.clock()
        return [LessonResponse.from_entity(lesson, now) for lesson in lessons]
    except DomainException as e:
        handle_domain_exception(e)


@router.get("/period", response_model=List[LessonResponse])
async def list_lessons_in_period(
    start: datetime = Query(...),
    end: datetime = Query(...),
    booking_service: BookingService = Depends(get_booking_service),
) -> List[LessonResponse]:
    try:
        lessons = await asyncio.to_thread(booking_service.list_lessons_in_period, start, end)
        now = booking_service.clock()
        return [LessonResponse.from_entity(lesson, now) for lesson in lessons]
    except DomainException as e:
        handle_domain_exception(e)


@router.get("/conflicts", response_model=ConflictResponse)
async def find_conflicts(
    teacher_id: str = Query(...),
    lesson_date: date = Query(...),
    start_time: time = Query(...),
    duration_minutes: int = Query(..., ge=1),
    booking_service: BookingService = Depends(get_booking_service),
) -> ConflictResponse:
    """Read-only check of what a booking at this window would collide with."""
    try:
        conflicts = await asyncio.to_thread(
            booking_service.find_conflicts,
            teacher_id,
            lesson_date,
            start_time,
            duration_minutes,
        )
        now = booking_service.clock()
        return ConflictResponse(
            has_conflict=bool(conflicts),
            conflicts=[LessonResponse.from_entity(lesson, now) for lesson in conflicts],
        )
    except DomainException as e:
        handle_domain_exception(e)


# ============================================================================
# SECTION 2: Dynamic routes (with path parameters)
# ============================================================================


@router.get("/{lesson_id}", response_model=LessonResponse)
async def get_lesson(
    lesson_id: str = Path(..., pattern=ULID_PATH_PATTERN),
    booking_service: BookingService = Depends(get_booking_service),
) -> LessonResponse:
    try:
        lesson = await asyncio.to_thread(booking_service.get_lesson, lesson_id)
        return LessonResponse.from_entity(lesson, booking_service.clock())
    except DomainException as e:
        handle_domain_exception(e)


@router.delete("/{lesson_id}", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_lesson(
    lesson_id: str = Path(..., pattern=ULID_PATH_PATTERN),
    booking_service: BookingService = Depends(get_booking_service),
) -> Response:
    """Cancel a lesson that has not started yet (422 once it has)."""
    try:
        await asyncio.to_thread(booking_service.cancel_lesson, lesson_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except DomainException as e:
        handle_domain_exception(e)
