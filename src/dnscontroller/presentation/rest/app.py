"""FastAPI application with DI and datastore setup"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI

from dnscontroller.application.container import create_container
from dnscontroller.config import Settings
from dnscontroller.domain.exceptions import (EntityNotFound, InvalidAnswers,
                                             StoreError, UniqueConstraintViolation,
                                             ValidationError)
from dnscontroller.infrastructure.adapters.mappers import start_mappers
from dnscontroller.infrastructure.database.connection import DatabaseConnection
from dnscontroller.presentation.rest.handlers import (
    global_exception_handler,
    invalid_answers_handler,
    not_found_handler,
    store_error_handler,
    unique_violation_handler,
    validation_error_handler,
)
from dnscontroller.presentation.rest.routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager: map models and make sure the tables exist"""
    container = app.state.dishka_container

    try:
        start_mappers()
        db_connection = await container.get(DatabaseConnection)
        await db_connection.create_tables()

        logger.info("Application startup complete")
    except Exception as e:
        logger.exception("Startup failed: %s", e)
        raise

    yield

    await container.close()
    logger.info("Application shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create FastAPI app with DI container, routes and exception handlers"""
    settings = settings or Settings()

    container = create_container(context={Settings: settings})

    app = FastAPI(
        title="DNS Controller API",
        lifespan=lifespan,
        debug=settings.DEBUG_HTTP,
    )

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(InvalidAnswers, invalid_answers_handler)
    app.add_exception_handler(EntityNotFound, not_found_handler)
    app.add_exception_handler(UniqueConstraintViolation, unique_violation_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    setup_dishka(container, app)
    app.include_router(router)

    return app
