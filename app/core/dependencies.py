import re

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.core.exceptions import InvalidWorkoutIdError
from app.repositories.workout_repository import WorkoutRepository

# Только ASCII-цифры: int() сам по себе принимает "0_1" и "٣"
WORKOUT_ID_PATTERN = re.compile(r"\s*\+?[0-9]+\s*")


def get_workout_repository(db: AsyncSession = Depends(get_db)) -> WorkoutRepository:
    """Фабрика репозитория — инжектируется в эндпоинты через Depends."""
    return WorkoutRepository(db)


def parse_workout_id(workout_id: str) -> int:
    """id из пути должен быть целым положительным числом, иначе 400 до обращения к БД."""
    if not WORKOUT_ID_PATTERN.fullmatch(workout_id):
        raise InvalidWorkoutIdError()

    value = int(workout_id)
    if value <= 0:
        raise InvalidWorkoutIdError()
    return value
