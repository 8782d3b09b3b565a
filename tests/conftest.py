"""Test configuration with a file-backed SQLite store"""
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from dnscontroller.domain.records import Record
from dnscontroller.infrastructure.adapters.mappers import start_mappers
from dnscontroller.infrastructure.database.connection import DatabaseConnection
from dnscontroller.infrastructure.unit_of_work.adapters.dns import SQLAlchemyDNSUnitOfWork

start_mappers()


@pytest.fixture
def database_url(tmp_path):
    # NullPool opens a new connection per session, so :memory: would lose the tables
    return f"sqlite+aiosqlite:///{tmp_path / 'dns.db'}"


@pytest.fixture
def logger():
    return logging.getLogger("dnscontroller.tests")


@pytest_asyncio.fixture
async def db(database_url):
    """Database with all tables created"""
    connection = DatabaseConnection(database_url)
    await connection.create_tables()

    yield connection

    await connection.close()


@pytest_asyncio.fixture
async def uow(db, logger):
    """Open unit of work against the test database"""
    unit_of_work = SQLAlchemyDNSUnitOfWork(db.session_factory, logger)
    async with unit_of_work:
        yield unit_of_work


@pytest.fixture
def uow_factory(db, logger):
    """Build fresh units of work, one per simulated request"""
    def factory():
        return SQLAlchemyDNSUnitOfWork(db.session_factory, logger)
    return factory


@pytest_asyncio.fixture
async def record(uow):
    """Committed example.com/A record"""
    record = Record.from_route("example.com", "A")
    await record.create(uow)
    await uow.commit()
    return record


@pytest.fixture
def mock_uow(logger):
    """Unit of work with mocked repositories"""
    uow = MagicMock()
    uow.logger = logger

    uow.records = MagicMock()
    uow.records.get_by_name_and_type = AsyncMock()
    uow.records.create = AsyncMock()
    uow.records.delete = AsyncMock()

    uow.answers = MagicMock()
    uow.answers.find_by_record = AsyncMock(return_value=[])
    uow.answers.get_by_natural_key = AsyncMock()
    uow.answers.create = AsyncMock()
    uow.answers.delete = AsyncMock()

    uow.details = MagicMock()
    uow.details.find_by_answer = AsyncMock(return_value=[])
    uow.details.get_by_answer = AsyncMock()
    uow.details.create = AsyncMock()
    uow.details.delete = AsyncMock()

    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow
