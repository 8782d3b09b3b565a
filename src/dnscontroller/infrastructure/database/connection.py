"""Database connection management"""
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker
)
from sqlalchemy.pool import NullPool

from dnscontroller.infrastructure.adapters.orm import metadata


class DatabaseConnection:
    """Database connection manager"""

    def __init__(self, database_url: str, echo: bool = False):
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            poolclass=NullPool,
            future=True
        )
        if self.engine.dialect.name == 'sqlite':
            _configure_sqlite(self.engine)

        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False
        )

    async def create_tables(self):
        """Create all tables"""
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

    async def close(self):
        """Close database connection"""
        await self.engine.dispose()


def _configure_sqlite(engine: AsyncEngine) -> None:
    """
    Enforce foreign keys and let SQLAlchemy own transaction boundaries.

    The sqlite driver defers BEGIN on its own, which breaks SAVEPOINT.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        dbapi_conn.isolation_level = None
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")
