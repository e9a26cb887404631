import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import select, update, delete
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.workout import WorkoutSession, ActivityDetail

logger = logging.getLogger(__name__)

# Точное совпадение, регистр важен: "Running" кардио не считается
CARDIO_TYPES = frozenset({"running", "walking", "elliptical", "pickleball"})

# INTEGER в SQLite - 64-битный знаковый; больший id не может существовать
MAX_WORKOUT_ID = 2**63 - 1


def is_cardio(workout_type: Optional[str]) -> bool:
    return workout_type in CARDIO_TYPES


def should_create_details(
    workout_type: Optional[str],
    distance_miles: Optional[float],
    calories_segment: Optional[int],
) -> bool:
    """Детали пишутся только для кардио и только если есть хотя бы одна метрика."""
    return is_cardio(workout_type) and (distance_miles is not None or calories_segment is not None)


class WorkoutRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    def _joined_select(self):
        # LEFT JOIN: тренировка без деталей возвращается с distance_miles/calories_segment = None
        return select(
            WorkoutSession.id,
            WorkoutSession.workout_date,
            WorkoutSession.workout_type,
            WorkoutSession.duration_minutes,
            WorkoutSession.active_calories,
            WorkoutSession.notes,
            ActivityDetail.distance_miles,
            ActivityDetail.calories_segment,
        ).outerjoin(ActivityDetail, WorkoutSession.id == ActivityDetail.workout_id)

    async def list_all(self) -> List[RowMapping]:
        result = await self.db.execute(
            self._joined_select().order_by(WorkoutSession.workout_date.desc())
        )
        return list(result.mappings().all())

    async def get_by_id(self, workout_id: int) -> Optional[RowMapping]:
        if workout_id > MAX_WORKOUT_ID:
            return None
        result = await self.db.execute(
            self._joined_select().where(WorkoutSession.id == workout_id)
        )
        return result.mappings().one_or_none()

    async def get_latest(self) -> Optional[RowMapping]:
        """Последняя тренировка - с максимальным id, а не с самой поздней датой."""
        result = await self.db.execute(
            self._joined_select().order_by(WorkoutSession.id.desc()).limit(1)
        )
        return result.mappings().one_or_none()

    async def create(
        self,
        session_fields: Dict[str, Any],
        detail_fields: Optional[Dict[str, Any]] = None,
    ) -> Tuple[int, bool]:
        """
        Вставить тренировку и (опционально) строку деталей.

        Две вставки коммитятся по отдельности, без общей транзакции:
        если вставка деталей упадет, тренировка останется в БД.
        """
        workout = WorkoutSession(**session_fields)
        self.db.add(workout)
        await self.db.commit()
        await self.db.refresh(workout)

        if detail_fields is None:
            return workout.id, False

        await self._insert_details(workout.id, detail_fields)
        return workout.id, True

    async def _insert_details(self, workout_id: int, detail_fields: Dict[str, Any]) -> None:
        details = ActivityDetail(
            workout_id=workout_id,
            distance_miles=detail_fields.get("distance_miles"),
            calories_segment=detail_fields.get("calories_segment"),
        )
        self.db.add(details)
        await self.db.commit()

    async def update(self, workout_id: int, fields: Dict[str, Any]) -> bool:
        """Обновить только переданные поля. False - если тренировки с таким id нет."""
        if workout_id > MAX_WORKOUT_ID:
            return False
        result = await self.db.execute(
            update(WorkoutSession)
            .where(WorkoutSession.id == workout_id)
            .values(**fields)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        return result.rowcount > 0

    async def delete_by_id(self, workout_id: int) -> bool:
        if workout_id > MAX_WORKOUT_ID:
            return False
        # activity_details удаляется каскадом на стороне БД
        result = await self.db.execute(
            delete(WorkoutSession)
            .where(WorkoutSession.id == workout_id)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        return result.rowcount > 0
