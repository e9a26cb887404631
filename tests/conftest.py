"""
Общие фикстуры для тестов Fitness Log API.

Стратегия:
- Тестовое FastAPI-приложение создаётся через create_app(); lifespan не запускается
  (ASGITransport его не вызывает), поэтому к рабочей БД тесты не подключаются.
- Для интеграционных тестов WorkoutRepository заменяется на AsyncMock (mock_repo).
- Для unit-тестов репозитория и e2e-тестов используется настоящая SQLite
  во временном файле, с включёнными внешними ключами.
"""

import pytest
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from typing import AsyncGenerator

from app.main import create_app
from app.core.db import build_engine, build_sessionmaker, get_db
from app.core.database import init_database
from app.core.dependencies import get_workout_repository
from app.repositories.workout_repository import WorkoutRepository


# ---------------------------------------------------------------------------
# Вспомогательные функции
# ---------------------------------------------------------------------------

def create_test_app() -> FastAPI:
    """Тестовое FastAPI-приложение без startup-событий."""
    return create_app()


RUNNING_PAYLOAD = {
    "workout_date": "2025-01-10",
    "workout_type": "running",
    "duration_minutes": 45,
    "active_calories": 410,
    "distance_miles": 3.1,
}

STRENGTH_PAYLOAD = {
    "workout_date": "2025-01-10",
    "workout_type": "strength training",
    "duration_minutes": 75,
    "active_calories": 320,
}


def make_row(workout_id: int = 1, **overrides) -> dict:
    row = {
        "id": workout_id,
        "workout_date": "2025-01-10",
        "workout_type": "running",
        "duration_minutes": 45,
        "active_calories": 410,
        "notes": None,
        "distance_miles": 3.1,
        "calories_segment": None,
    }
    row.update(overrides)
    return row


# ---------------------------------------------------------------------------
# Моки
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_repo() -> AsyncMock:
    """Мокированный WorkoutRepository для эндпоинтов."""
    return AsyncMock(spec=WorkoutRepository)


@pytest.fixture
async def client(mock_repo) -> AsyncGenerator[AsyncClient, None]:
    """Клиент, у которого get_workout_repository → mock_repo."""
    app = create_test_app()
    app.dependency_overrides[get_workout_repository] = lambda: mock_repo
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ---------------------------------------------------------------------------
# Настоящая SQLite
# ---------------------------------------------------------------------------

@pytest.fixture
async def db_engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'fitness_test.db'}")
    await init_database(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return build_sessionmaker(db_engine)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def repo(db_session) -> WorkoutRepository:
    return WorkoutRepository(db_session)


@pytest.fixture
async def live_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Клиент поверх настоящей SQLite: get_db отдаёт сессии тестового движка."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app = create_test_app()
    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
