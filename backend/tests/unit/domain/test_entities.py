# backend/tests/unit/domain/test_entities.py
"""
Unit tests for the immutable domain entities and their factories.
"""

from dataclasses import FrozenInstanceError
from datetime import date, datetime, time

import pytest

from sportclass.core.exceptions import ValidationException
from sportclass.domain.entities import (
    LessonPeriod,
    LessonStatus,
    activate,
    create_content,
    create_lesson,
    create_lesson_from_content,
    create_sport,
    create_teacher,
    deactivate,
    restore_lesson,
    update_sport,
    with_id,
)

TODAY = date(2024, 6, 1)


def _lesson(**overrides):
    fields = dict(
        title="Aula de passe",
        lesson_date=date(2024, 6, 10),
        start_time=time(9, 0),
        duration_minutes=60,
        location="Quadra 1",
        sport_id="sport-1",
        teacher_id="teacher-1",
    )
    fields.update(overrides)
    return create_lesson(**fields, today=TODAY)


class TestSport:
    def test_helpers(self):
        sport = create_sport("Futebol", "Coletivo")
        assert sport.is_team_sport
        assert not sport.is_individual
        assert not sport.is_aquatic
        assert sport.full_description == "Futebol (Coletivo)"
        assert sport.supports_level("Médio")
        assert not sport.supports_level("Superior")

    def test_aquatic_by_name(self):
        assert create_sport("Natação", "Individual").is_aquatic
        assert create_sport("Polo", "Aquático").is_aquatic

    def test_update_keeps_identity(self):
        sport = create_sport("Volei", "Coletivo", id="S1")
        updated = update_sport(sport, "Vôlei", "Coletivo")
        assert updated.id == "S1"
        assert updated.name == "Vôlei"
        assert sport.name == "Volei"


class TestTeacher:
    def test_is_immutable(self):
        teacher = create_teacher("Ana Lima", "ana@escola.com", "Natação")
        with pytest.raises(FrozenInstanceError):
            teacher.active = False

    def test_deactivate_returns_new_value(self):
        teacher = create_teacher("Ana Lima", "ana@escola.com", "Natação")
        inactive = deactivate(teacher)
        assert teacher.active is True
        assert inactive.active is False
        assert activate(inactive).active is True

    def test_short_name(self):
        assert create_teacher("Ana Maria Lima", "a@escola.com", "Natação").short_name == "Ana Lima"
        assert create_teacher("Ana", "a@escola.com", "Natação").short_name == "Ana"

    def test_specialization_classification_is_substring(self):
        teacher = create_teacher("Ana Lima", "a@escola.com", "Esportes Coletivos")
        assert teacher.is_team_sport_specialist
        assert not teacher.is_individual_sport_specialist
        assert teacher.has_specialization_in("COLETIVO")


class TestContent:
    def test_video_and_pdf(self):
        video = create_content("Passe curto", "Médio", 20, "S1", url="https://vimeo.com/1")
        pdf = create_content("Regras do jogo", "Médio", 20, "S1", url="https://x.org/regras.PDF")
        assert video.is_video and not video.is_pdf
        assert pdf.is_pdf and not pdf.is_video
        assert video.is_high_school and not video.is_fundamental

    def test_requires_sport(self):
        with pytest.raises(ValidationException) as exc_info:
            create_content("Passe curto", "Médio", 20, "")
        assert exc_info.value.field == "sport_id"


class TestLesson:
    def test_derived_fields(self):
        lesson = _lesson(start_time=time(17, 30), duration_minutes=150)
        assert lesson.end_time == time(20, 0)
        assert lesson.starts_at == datetime(2024, 6, 10, 17, 30)
        assert lesson.is_long
        assert lesson.period is LessonPeriod.AFTERNOON
        assert "Quadra 1" in lesson.full_description

    @pytest.mark.parametrize(
        "start, period",
        [
            (time(11, 59), LessonPeriod.MORNING),
            (time(12, 0), LessonPeriod.AFTERNOON),
            (time(18, 0), LessonPeriod.EVENING),
        ],
    )
    def test_period_boundaries(self, start, period):
        assert _lesson(start_time=start).period is period

    def test_exactly_two_hours_is_not_long(self):
        assert not _lesson(duration_minutes=120).is_long

    def test_past_date_rejected(self):
        with pytest.raises(ValidationException) as exc_info:
            _lesson(lesson_date=date(2024, 5, 31))
        assert exc_info.value.field == "lesson_date"

    def test_midnight_crossing_rejected(self):
        with pytest.raises(ValidationException):
            _lesson(start_time=time(22, 0), duration_minutes=180)

    def test_status_inferred_from_clock(self):
        lesson = _lesson()
        assert lesson.status_at(datetime(2024, 6, 10, 8, 59)) is LessonStatus.BOOKED
        assert lesson.status_at(datetime(2024, 6, 10, 9, 0)) is LessonStatus.OCCURRED

    def test_restore_allows_past_dates(self):
        lesson = restore_lesson(
            id="L1",
            title="Aula antiga",
            lesson_date=date(2020, 1, 1),
            start_time=time(9, 0),
            duration_minutes=60,
            location="Quadra 1",
            sport_id="S1",
            teacher_id="T1",
        )
        assert lesson.id == "L1"

    def test_with_id(self):
        lesson = _lesson()
        assert lesson.id is None
        assert with_id(lesson, "L9").id == "L9"


class TestLessonFromContent:
    def test_defaults_from_content(self):
        teacher = create_teacher("Ana Lima", "a@escola.com", "Futebol", id="T1")
        content = create_content("Passe curto", "Médio", 45, "S1", id="C1")
        lesson = create_lesson_from_content(datetime(2024, 6, 10, 9, 0), teacher, content, today=TODAY)
        assert lesson.title == "Aula de Passe curto"
        assert lesson.location == "Local padrão"
        assert lesson.duration_minutes == 45
        assert lesson.teacher_id == "T1"
        assert lesson.sport_id == "S1"
        assert lesson.content_id == "C1"

    def test_same_rules_as_canonical_factory(self):
        teacher = create_teacher("Ana Lima", "a@escola.com", "Futebol", id="T1")
        content = create_content("Treino longo", "Médio", 300, "S1", id="C1")
        with pytest.raises(ValidationException) as exc_info:
            create_lesson_from_content(datetime(2024, 6, 10, 9, 0), teacher, content, today=TODAY)
        assert exc_info.value.field == "duration_minutes"

    def test_default_title_fits_limit_for_long_content_title(self):
        teacher = create_teacher("Ana Lima", "a@escola.com", "Futebol", id="T1")
        content = create_content("F" * 200, "Médio", 45, "S1", id="C1")
        lesson = create_lesson_from_content(datetime(2024, 6, 10, 9, 0), teacher, content, today=TODAY)
        assert len(lesson.title) == 200
        assert lesson.title.startswith("Aula de FFF")

    def test_explicit_title_is_not_truncated(self):
        teacher = create_teacher("Ana Lima", "a@escola.com", "Futebol", id="T1")
        content = create_content("Passe curto", "Médio", 45, "S1", id="C1")
        with pytest.raises(ValidationException) as exc_info:
            create_lesson_from_content(
                datetime(2024, 6, 10, 9, 0), teacher, content, today=TODAY, title="T" * 201
            )
        assert exc_info.value.field == "title"
