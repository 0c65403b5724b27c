# backend/tests/unit/services/test_booking_service.py
"""
Unit tests for BookingService against an in-memory database.

The clock is pinned to 2024-06-01 08:00; lessons are booked for 2024-06-10.
"""

from datetime import date, datetime, time

import pytest

from sportclass.core.clock import fixed_clock
from sportclass.core.exceptions import (
    AlreadyOccurredException,
    NotFoundException,
    ScheduleConflictException,
    SpecializationMismatchException,
    TeacherInactiveException,
    ValidationException,
)
from sportclass.domain.entities import LessonStatus, create_content, create_teacher, deactivate
from sportclass.repositories import RepositoryFactory
from sportclass.services.booking_service import BookingService, CancellationAck

DAY = date(2024, 6, 10)


@pytest.fixture
def booking_service(unit_db, clock):
    return BookingService(unit_db, clock=clock)


@pytest.fixture
def booked(booking_service, teacher, content):
    """Teacher already teaching 09:00-10:00 on DAY."""
    return booking_service.book_lesson(teacher.id, content.id, DAY, time(9, 0))


class TestBookLesson:
    def test_books_and_assigns_id(self, booking_service, teacher, content, unit_db):
        lesson = booking_service.book_lesson(teacher.id, content.id, DAY, time(9, 0))

        assert lesson.id is not None
        assert lesson.title == "Aula de Fundamentos do passe"
        assert lesson.location == "Local padrão"
        assert lesson.duration_minutes == 60
        assert lesson.end_time == time(10, 0)
        assert lesson.sport_id == content.sport_id
        assert RepositoryFactory.create_lookup_store(unit_db).lesson_exists(lesson.id)

    def test_custom_title_and_location(self, booking_service, teacher, content):
        lesson = booking_service.book_lesson(
            teacher.id, content.id, DAY, time(9, 0), title="Treino de passe", location="Quadra 2"
        )
        assert lesson.title == "Treino de passe"
        assert lesson.location == "Quadra 2"

    def test_unknown_teacher(self, booking_service, content):
        with pytest.raises(NotFoundException) as exc_info:
            booking_service.book_lesson("01HZZZZZZZZZZZZZZZZZZZZZZZ", content.id, DAY, time(9, 0))
        assert exc_info.value.entity_type == "Teacher"

    def test_unknown_content(self, booking_service, teacher):
        with pytest.raises(NotFoundException) as exc_info:
            booking_service.book_lesson(teacher.id, "01HZZZZZZZZZZZZZZZZZZZZZZZ", DAY, time(9, 0))
        assert exc_info.value.entity_type == "Content"

    def test_inactive_teacher_rejected_even_when_slot_free(
        self, booking_service, teacher, content, unit_db
    ):
        RepositoryFactory.create_teacher_repository(unit_db).save_changes(deactivate(teacher))

        with pytest.raises(TeacherInactiveException) as exc_info:
            booking_service.book_lesson(teacher.id, content.id, DAY, time(9, 0))
        assert exc_info.value.teacher_id == teacher.id

    def test_specialization_mismatch(self, booking_service, unit_db, basquete):
        teacher = RepositoryFactory.create_teacher_repository(unit_db).add(
            create_teacher("Bruno Dias", "bruno@escola.com", "Futebol")
        )
        content = RepositoryFactory.create_content_repository(unit_db).add(
            create_content("Arremesso livre", "Médio", 60, basquete.id)
        )

        with pytest.raises(SpecializationMismatchException) as exc_info:
            booking_service.book_lesson(teacher.id, content.id, DAY, time(9, 0))
        assert exc_info.value.required == "Basquete"
        assert exc_info.value.actual == "Futebol"

    def test_overlapping_request_conflicts(self, booking_service, booked, teacher, short_content):
        with pytest.raises(ScheduleConflictException) as exc_info:
            booking_service.book_lesson(teacher.id, short_content.id, DAY, time(9, 30))
        assert exc_info.value.conflicting_lesson_id == booked.id

    def test_adjacent_request_conflicts(self, booking_service, booked, teacher, short_content):
        """A 09:00-10:00 lesson still blocks a 10:00 start."""
        with pytest.raises(ScheduleConflictException) as exc_info:
            booking_service.book_lesson(teacher.id, short_content.id, DAY, time(10, 0))
        assert exc_info.value.conflicting_lesson_id == booked.id

    def test_one_minute_after_succeeds(self, booking_service, booked, teacher, short_content):
        lesson = booking_service.book_lesson(teacher.id, short_content.id, DAY, time(10, 1))
        assert lesson.id != booked.id

    def test_other_date_does_not_conflict(self, booking_service, booked, teacher, content):
        lesson = booking_service.book_lesson(teacher.id, content.id, date(2024, 6, 11), time(9, 0))
        assert lesson.lesson_date == date(2024, 6, 11)

    def test_other_teacher_does_not_conflict(self, booking_service, booked, content, unit_db):
        colleague = RepositoryFactory.create_teacher_repository(unit_db).add(
            create_teacher("Paula Reis", "paula@escola.com", "FUTEBOL")
        )
        lesson = booking_service.book_lesson(colleague.id, content.id, DAY, time(9, 0))
        assert lesson.teacher_id == colleague.id

    def test_start_time_out_of_window(self, booking_service, teacher, content):
        with pytest.raises(ValidationException) as exc_info:
            booking_service.book_lesson(teacher.id, content.id, DAY, time(5, 30))
        assert exc_info.value.field == "start_time"

    def test_past_date(self, booking_service, teacher, content):
        with pytest.raises(ValidationException) as exc_info:
            booking_service.book_lesson(teacher.id, content.id, date(2024, 5, 30), time(9, 0))
        assert exc_info.value.field == "lesson_date"

    def test_inactive_reported_before_conflict(
        self, booking_service, booked, teacher, content, unit_db
    ):
        RepositoryFactory.create_teacher_repository(unit_db).save_changes(deactivate(teacher))
        with pytest.raises(TeacherInactiveException):
            booking_service.book_lesson(teacher.id, content.id, DAY, time(9, 0))

    def test_unknown_teacher_reported_before_unknown_content(self, booking_service):
        with pytest.raises(NotFoundException) as exc_info:
            booking_service.book_lesson(
                "01HZZZZZZZZZZZZZZZZZZZZZZZ", "01HYYYYYYYYYYYYYYYYYYYYYYY", DAY, time(9, 0)
            )
        assert exc_info.value.entity_type == "Teacher"

    def test_mismatch_reported_before_invalid_time(self, booking_service, unit_db, basquete):
        teacher = RepositoryFactory.create_teacher_repository(unit_db).add(
            create_teacher("Bruno Dias", "bruno@escola.com", "Futebol")
        )
        content = RepositoryFactory.create_content_repository(unit_db).add(
            create_content("Arremesso livre", "Médio", 60, basquete.id)
        )
        with pytest.raises(SpecializationMismatchException):
            booking_service.book_lesson(teacher.id, content.id, DAY, time(23, 0))


class TestCancelLesson:
    def test_cancel_future_lesson(self, booking_service, booked, unit_db):
        ack = booking_service.cancel_lesson(booked.id)

        assert isinstance(ack, CancellationAck)
        assert ack.lesson_id == booked.id
        assert not RepositoryFactory.create_lookup_store(unit_db).lesson_exists(booked.id)

    def test_cancel_past_lesson(self, unit_db, booked):
        later = BookingService(unit_db, clock=fixed_clock(datetime(2024, 6, 10, 11, 0)))
        with pytest.raises(AlreadyOccurredException) as exc_info:
            later.cancel_lesson(booked.id)
        assert exc_info.value.starts_at == datetime(2024, 6, 10, 9, 0)
        assert later.store.lesson_exists(booked.id)

    def test_cancel_at_exact_start_is_rejected(self, unit_db, booked):
        at_start = BookingService(unit_db, clock=fixed_clock(datetime(2024, 6, 10, 9, 0)))
        with pytest.raises(AlreadyOccurredException):
            at_start.cancel_lesson(booked.id)

    def test_cancel_unknown(self, booking_service):
        with pytest.raises(NotFoundException) as exc_info:
            booking_service.cancel_lesson("01HZZZZZZZZZZZZZZZZZZZZZZZ")
        assert exc_info.value.entity_type == "Lesson"

    def test_slot_free_after_cancel(self, booking_service, booked, teacher, content):
        booking_service.cancel_lesson(booked.id)
        lesson = booking_service.book_lesson(teacher.id, content.id, DAY, time(9, 0))
        assert lesson.id != booked.id


class TestFindConflicts:
    def test_lists_every_conflict_in_order(
        self, booking_service, teacher, content, short_content
    ):
        second = booking_service.book_lesson(teacher.id, short_content.id, DAY, time(11, 0))
        first = booking_service.book_lesson(teacher.id, content.id, DAY, time(9, 0))

        conflicts = booking_service.find_conflicts(teacher.id, DAY, time(9, 30), 120)

        assert [lesson.id for lesson in conflicts] == [first.id, second.id]

    def test_idempotent(self, booking_service, booked, teacher):
        first = booking_service.find_conflicts(teacher.id, DAY, time(9, 30), 30)
        second = booking_service.find_conflicts(teacher.id, DAY, time(9, 30), 30)
        assert first == second
        assert [lesson.id for lesson in first] == [booked.id]

    def test_read_only(self, booking_service, booked, teacher, unit_db):
        booking_service.find_conflicts(teacher.id, DAY, time(9, 30), 30)
        assert len(booking_service.list_lessons()) == 1

    def test_no_conflicts(self, booking_service, booked, teacher):
        assert booking_service.find_conflicts(teacher.id, DAY, time(14, 0), 60) == []


class TestLessonQueries:
    def test_get_lesson(self, booking_service, booked):
        assert booking_service.get_lesson(booked.id) == booked

    def test_get_missing_lesson(self, booking_service):
        with pytest.raises(NotFoundException):
            booking_service.get_lesson("01HZZZZZZZZZZZZZZZZZZZZZZZ")

    def test_lists_by_teacher_and_content(self, booking_service, booked, teacher, content):
        assert booking_service.list_lessons_for_teacher(teacher.id) == [booked]
        assert booking_service.list_lessons_for_content(content.id) == [booked]

    def test_upcoming_and_status(self, unit_db, booked):
        during = BookingService(unit_db, clock=fixed_clock(datetime(2024, 6, 10, 9, 30)))
        assert during.list_upcoming_lessons() == []
        assert during.lesson_status(booked) is LessonStatus.OCCURRED

        before = BookingService(unit_db, clock=fixed_clock(datetime(2024, 6, 10, 8, 59)))
        assert before.list_upcoming_lessons() == [booked]
        assert before.lesson_status(booked) is LessonStatus.BOOKED

    def test_period(self, booking_service, booked):
        assert booking_service.list_lessons_in_period(
            datetime(2024, 6, 10, 0, 0), datetime(2024, 6, 10, 9, 0)
        ) == [booked]
        assert (
            booking_service.list_lessons_in_period(
                datetime(2024, 6, 10, 9, 1), datetime(2024, 6, 11, 0, 0)
            )
            == []
        )

    def test_period_must_be_ordered(self, booking_service):
        with pytest.raises(ValidationException):
            booking_service.list_lessons_in_period(
                datetime(2024, 6, 11, 0, 0), datetime(2024, 6, 10, 0, 0)
            )
