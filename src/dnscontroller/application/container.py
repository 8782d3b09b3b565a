from dishka import make_async_container

from dnscontroller.application.di import (
    DatabaseProvider,
    LoggingProvider,
    ServiceProvider,
    UnitOfWorkProvider,
)


def create_container(context: dict):
    """Create DI container with all providers"""
    return make_async_container(
        DatabaseProvider(),
        LoggingProvider(),
        UnitOfWorkProvider(),
        ServiceProvider(),
        context=context,
    )
