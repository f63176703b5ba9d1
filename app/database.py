import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.errors import startup_failure, storage_unavailable

logger = logging.getLogger(__name__)

Base = declarative_base()

SEED_USERS = [
    {"id": "shelley", "name": "Shelley"},
    {"id": "keagan", "name": "Keagan"},
    {"id": "dane", "name": "Dane"},
    {"id": "paul", "name": "Paul"},
]


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine shared by every request for the life of the process."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        try:
            self.engine = create_async_engine(database_url, future=True, echo=echo)
        except (SQLAlchemyError, ImportError) as e:
            raise startup_failure(f"cannot open {database_url}: {e}") from e
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_foreign_keys)
        self._session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def init_schema(self) -> None:
        """Create tables if absent and seed the fixed users.

        Raises ``AppError`` with kind ``STARTUP_FAILURE`` when the file cannot
        be opened or the DDL fails.
        """
        # models must be imported so their tables are registered on Base
        from app.models import todo, user  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
                stmt = (
                    sqlite_insert(user.User)
                    .values(SEED_USERS)
                    .on_conflict_do_nothing(index_elements=["id"])
                )
                await conn.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            raise startup_failure(f"cannot initialize {self.database_url}: {e}") from e
        logger.info("Schema ready at %s", self.database_url)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self._session_factory() as session:
            yield session

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise storage_unavailable("database not initialized")
    async with database.session() as session:
        yield session
