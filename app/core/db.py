import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings

logger = logging.getLogger(__name__)


def _enable_foreign_keys(dbapi_connection, connection_record):
    # SQLite не проверяет внешние ключи (и не делает ON DELETE CASCADE),
    # пока это не включено для конкретного соединения
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Создать async-движок; для SQLite включает внешние ключи на каждом соединении."""
    engine = create_async_engine(database_url, echo=echo, future=True)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    return engine


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
AsyncSessionLocal = build_sessionmaker(engine)


async def get_db():
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()
