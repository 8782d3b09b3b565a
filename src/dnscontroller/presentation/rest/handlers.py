"""Global Exception Handlers"""
import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from dnscontroller.domain.exceptions import (EntityNotFound, InvalidAnswers,
                                             StoreError, UniqueConstraintViolation,
                                             ValidationError)

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": str(exc),
            "code": exc.code
        }
    )


async def invalid_answers_handler(request: Request, exc: InvalidAnswers):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": str(exc),
            "code": exc.code
        }
    )


async def not_found_handler(request: Request, exc: EntityNotFound):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "detail": f"Resource not found: {request.url.path}",
            "code": "NOT_FOUND"
        }
    )


async def unique_violation_handler(request: Request, exc: UniqueConstraintViolation):
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "detail": f"Resource already exists: {request.url.path}",
            "code": "ALREADY_EXISTS"
        }
    )


async def store_error_handler(request: Request, exc: StoreError):
    logger.error("datastore error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Datastore error",
            "code": "STORE_ERROR"
        }
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal Server Error",
            "code": "INTERNAL_ERROR"
        }
    )
