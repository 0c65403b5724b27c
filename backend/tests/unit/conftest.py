from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from sportclass.core.booking_lock import reset_booking_locks
from sportclass.core.clock import fixed_clock
from sportclass.database import Base
from sportclass.domain.entities import create_content, create_sport, create_teacher
from sportclass.repositories import RepositoryFactory

# Import models so Base.metadata is populated for create_all.
import sportclass.models  # noqa: F401

NOW = datetime(2024, 6, 1, 8, 0)


@pytest.fixture
def _unit_engine():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def unit_db(_unit_engine) -> Session:
    """
    Provide a session on a fresh in-memory database.

    Each test gets its own engine, so services may commit freely.
    """
    SessionLocal = sessionmaker(bind=_unit_engine, expire_on_commit=False, future=True)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def _clean_booking_locks():
    reset_booking_locks()
    yield
    reset_booking_locks()


@pytest.fixture
def clock():
    return fixed_clock(NOW)


@pytest.fixture
def futebol(unit_db):
    return RepositoryFactory.create_sport_repository(unit_db).add(
        create_sport("Futebol", "Coletivo")
    )


@pytest.fixture
def basquete(unit_db):
    return RepositoryFactory.create_sport_repository(unit_db).add(
        create_sport("Basquete", "Coletivo")
    )


@pytest.fixture
def teacher(unit_db):
    return RepositoryFactory.create_teacher_repository(unit_db).add(
        create_teacher("Carlos Alberto Souza", "carlos@escola.com", "Futebol")
    )


@pytest.fixture
def content(unit_db, futebol):
    return RepositoryFactory.create_content_repository(unit_db).add(
        create_content(
            title="Fundamentos do passe",
            level="Fundamental II",
            duration_minutes=60,
            sport_id=futebol.id,
            url="https://youtube.com/watch?v=passe",
        )
    )


@pytest.fixture
def short_content(unit_db, futebol):
    return RepositoryFactory.create_content_repository(unit_db).add(
        create_content(
            title="Aquecimento dinamico",
            level="Médio",
            duration_minutes=30,
            sport_id=futebol.id,
        )
    )
