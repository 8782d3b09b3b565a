import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from dnscontroller.infrastructure.repositories.adapters.answer import \
    SQLAlchemyAnswerRepository
from dnscontroller.infrastructure.repositories.adapters.detail import \
    SQLAlchemyAnswerDetailRepository
from dnscontroller.infrastructure.repositories.adapters.record import \
    SQLAlchemyRecordRepository
from dnscontroller.infrastructure.unit_of_work.adapters.base import \
    SQLAlchemyAbstractUnitOfWork
from dnscontroller.infrastructure.unit_of_work.interfaces.dns import \
    DNSUnitOfWork


class SQLAlchemyDNSUnitOfWork(SQLAlchemyAbstractUnitOfWork, DNSUnitOfWork):
    def __init__(self, session_factory: async_sessionmaker, logger: logging.Logger):
        super().__init__(session_factory)
        self.logger = logger

    async def __aenter__(self):
        uow = await super().__aenter__()
        self.records = SQLAlchemyRecordRepository(session=self._session)
        self.answers = SQLAlchemyAnswerRepository(session=self._session)
        self.details = SQLAlchemyAnswerDetailRepository(session=self._session)

        return uow
