from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from signup.db.models import Base

logger = logging.getLogger(__name__)

PROCEDURE_DIALECTS = ("mysql", "mariadb")


class Database:
    """Owns the engine for the lifetime of the process: create once, dispose at shutdown."""

    def __init__(self, url: str, **engine_kwargs):
        self.engine: AsyncEngine = create_async_engine(url, pool_pre_ping=True, **engine_kwargs)
        self.sessionmaker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine, expire_on_commit=False
        )

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    @property
    def supports_procedures(self) -> bool:
        return self.dialect in PROCEDURE_DIALECTS

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Ensured tables exist on %s", self.dialect)

    async def close(self) -> None:
        await self.engine.dispose()
