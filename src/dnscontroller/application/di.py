# dnscontroller/application/di.py
import logging
from typing import AsyncIterable

from dishka import Provider, Scope, from_context, provide
from sqlalchemy.ext.asyncio import async_sessionmaker

from dnscontroller.application.services.record import RecordService
from dnscontroller.config import Settings
from dnscontroller.infrastructure.database.connection import DatabaseConnection
from dnscontroller.infrastructure.unit_of_work.adapters.dns import SQLAlchemyDNSUnitOfWork
from dnscontroller.infrastructure.unit_of_work.interfaces.dns import DNSUnitOfWork

LOGGER_NAME = "dnscontroller"


class DatabaseProvider(Provider):
    scope = Scope.APP
    settings = from_context(provides=Settings)

    @provide(scope=Scope.APP)
    async def get_database_connection(self, settings: Settings) -> AsyncIterable[DatabaseConnection]:
        db = DatabaseConnection(settings.database_url, echo=settings.DEBUG_SQL)
        yield db
        await db.close()

    @provide(scope=Scope.APP)
    def get_session_factory(self, db: DatabaseConnection) -> async_sessionmaker:
        return db.session_factory


class LoggingProvider(Provider):
    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_logger(self) -> logging.Logger:
        return logging.getLogger(LOGGER_NAME)


class UnitOfWorkProvider(Provider):
    scope = Scope.REQUEST

    @provide(scope=Scope.REQUEST)
    def get_dns_uow(self, session_factory: async_sessionmaker, logger: logging.Logger) -> DNSUnitOfWork:
        return SQLAlchemyDNSUnitOfWork(session_factory, logger)


class ServiceProvider(Provider):
    scope = Scope.REQUEST

    @provide(scope=Scope.REQUEST)
    def get_record_service(self, uow: DNSUnitOfWork) -> RecordService:
        return RecordService(uow)
