import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.base import Base

# Импортируем модели, чтобы таблицы попали в metadata
from app.models.workout import WorkoutSession, ActivityDetail  # noqa: F401

logger = logging.getLogger(__name__)


async def init_database(engine: AsyncEngine, reset: bool = False):
    """Создать таблицы (или пересоздать, если reset=True)."""
    async with engine.begin() as conn:
        if reset:
            logger.warning("RESET_DATABASE=true - пересоздаем таблицы")
            await conn.run_sync(Base.metadata.drop_all)

        await conn.run_sync(Base.metadata.create_all)
    logger.info("Таблицы БД созданы/проверены")
