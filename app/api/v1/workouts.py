import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status

from app.core.dependencies import get_workout_repository, parse_workout_id
from app.core.exceptions import (
    EmptyUpdateError,
    MissingFieldsError,
    NoWorkoutsError,
    WorkoutNotFoundError,
)
from app.repositories.workout_repository import WorkoutRepository, should_create_details
from app.schemas.workout import (
    WorkoutCreate,
    WorkoutCreated,
    WorkoutMessage,
    WorkoutRow,
    WorkoutUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# ==========================
# ЧТЕНИЕ
# ==========================

@router.get("", response_model=List[WorkoutRow])
async def list_workouts(repo: WorkoutRepository = Depends(get_workout_repository)):
    """Все тренировки вместе с деталями (если есть), новые даты первыми."""
    rows = await repo.list_all()
    return [dict(row) for row in rows]


# /latest объявлен раньше /{workout_id}, иначе "latest" уйдет в разбор id
@router.get("/latest", response_model=WorkoutRow)
async def get_latest_workout(repo: WorkoutRepository = Depends(get_workout_repository)):
    row = await repo.get_latest()
    if row is None:
        raise NoWorkoutsError()
    return dict(row)


@router.get("/{workout_id}", response_model=WorkoutRow)
async def get_workout(
    workout_id: str,
    repo: WorkoutRepository = Depends(get_workout_repository)
):
    workout_pk = parse_workout_id(workout_id)

    row = await repo.get_by_id(workout_pk)
    if row is None:
        raise WorkoutNotFoundError()
    return dict(row)


# ==========================
# ЗАПИСЬ
# ==========================

@router.post("", response_model=WorkoutCreated, status_code=status.HTTP_201_CREATED)
async def create_workout(
    payload: Optional[WorkoutCreate] = Body(None),
    repo: WorkoutRepository = Depends(get_workout_repository)
):
    """
    Создать тренировку.

    Строка в activity_details появляется только для кардио-типов и только если
    передана хотя бы одна метрика (distance_miles или calories_segment).
    """
    if payload is None or not payload.has_required_fields():
        raise MissingFieldsError()

    detail_fields = None
    if should_create_details(payload.workout_type, payload.distance_miles, payload.calories_segment):
        detail_fields = {
            "distance_miles": payload.distance_miles,
            "calories_segment": payload.calories_segment,
        }

    workout_id, details_created = await repo.create(payload.session_fields(), detail_fields)
    logger.info(f"Тренировка {workout_id} создана (детали: {details_created})")

    return {
        "message": "Workout saved",
        "id": workout_id,
        "details_created": details_created,
    }


@router.put("/{workout_id}", response_model=WorkoutMessage)
async def update_workout(
    workout_id: str,
    payload: Optional[WorkoutUpdate] = Body(None),
    repo: WorkoutRepository = Depends(get_workout_repository)
):
    """Частичное обновление: непереданные (или null) поля сохраняют прежние значения."""
    workout_pk = parse_workout_id(workout_id)

    fields = payload.provided_fields() if payload is not None else {}
    if not fields:
        raise EmptyUpdateError()

    updated = await repo.update(workout_pk, fields)
    if not updated:
        raise WorkoutNotFoundError()

    logger.info(f"Тренировка {workout_pk} обновлена: {sorted(fields)}")
    return {"message": "Workout updated", "id": workout_pk}


@router.delete("/{workout_id}", response_model=WorkoutMessage)
async def delete_workout(
    workout_id: str,
    repo: WorkoutRepository = Depends(get_workout_repository)
):
    workout_pk = parse_workout_id(workout_id)

    deleted = await repo.delete_by_id(workout_pk)
    if not deleted:
        raise WorkoutNotFoundError()

    logger.info(f"Тренировка {workout_pk} удалена")
    return {"message": "Workout deleted", "id": workout_pk}
