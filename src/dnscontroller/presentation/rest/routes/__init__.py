"""Combine all routes into single router"""
from fastapi import APIRouter

from .records import router as records_router

V1_URI = "/api/v1"

router = APIRouter()

router.include_router(records_router, prefix=V1_URI, tags=["Records"])


def get_record_path() -> str:
    """Path template used by clients to fetch a record"""
    return f"{V1_URI}{records_router.prefix}/{{name}}/{{record_type}}"
