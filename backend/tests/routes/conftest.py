from datetime import datetime

from fastapi.testclient import TestClient
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from sportclass.core.booking_lock import reset_booking_locks
from sportclass.core.clock import fixed_clock
from sportclass.database import Base, get_db
from sportclass.main import app
from sportclass.routes.v1.dependencies import get_clock

import sportclass.models  # noqa: F401

NOW = datetime(2024, 6, 1, 8, 0)


@pytest.fixture
def client():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    TestingSession = sessionmaker(bind=engine, expire_on_commit=False, future=True)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: fixed_clock(NOW)
    reset_booking_locks()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        engine.dispose()


@pytest.fixture
def catalogue(client):
    """Create a sport, a matching teacher and a 60 minute content."""
    sport = client.post("/api/v1/sports", json={"name": "Futebol", "category": "Coletivo"})
    assert sport.status_code == 201, sport.text
    teacher = client.post(
        "/api/v1/teachers",
        json={"name": "Carlos Souza", "email": "carlos@escola.com", "specialization": "futebol"},
    )
    assert teacher.status_code == 201, teacher.text
    content = client.post(
        "/api/v1/contents",
        json={
            "title": "Fundamentos do passe",
            "level": "Fundamental II",
            "duration_minutes": 60,
            "sport_id": sport.json()["id"],
        },
    )
    assert content.status_code == 201, content.text
    return {
        "sport": sport.json(),
        "teacher": teacher.json(),
        "content": content.json(),
    }
