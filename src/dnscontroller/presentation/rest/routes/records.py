# dnscontroller/presentation/rest/routes/records.py
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status

from dnscontroller.application.dto.record import RecordDTO
from dnscontroller.application.services.record import RecordService

RECORDS_BASE_URI = "/records"
RECORDS_NAME_TYPE_URI = "/{name}/{record_type}"
RECORD_ANSWERS_URI = RECORDS_NAME_TYPE_URI + "/answers"

router = APIRouter(prefix=RECORDS_BASE_URI, tags=["Records"], route_class=DishkaRoute)


@router.get(
    RECORDS_NAME_TYPE_URI,
    response_model=RecordDTO,
    response_model_exclude_none=True,
    summary="Get record",
    description="Get a record by name and type, with its answers."
)
async def get_record(
    name: str,
    record_type: str,
    record_service: FromDishka[RecordService]
) -> RecordDTO:
    """Get record with answers"""
    return await record_service.get_record(name, record_type)


@router.post(
    RECORDS_NAME_TYPE_URI,
    response_model=RecordDTO,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create record",
    description="Create a record for a name and type. Answers are attached separately."
)
async def create_record(
    name: str,
    record_type: str,
    record_service: FromDishka[RecordService]
) -> RecordDTO:
    """Create a new record"""
    return await record_service.create_record(name, record_type)


@router.delete(
    RECORDS_NAME_TYPE_URI,
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete record",
    description="Delete a record. Its answers are removed by the store."
)
async def delete_record(
    name: str,
    record_type: str,
    record_service: FromDishka[RecordService]
) -> Response:
    """Delete record"""
    await record_service.delete_record(name, record_type)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    RECORD_ANSWERS_URI,
    response_model=RecordDTO,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create record answers",
    description="Attach a JSON list of answers to an existing record, all or nothing."
)
async def create_record_answers(
    name: str,
    record_type: str,
    request: Request,
    record_service: FromDishka[RecordService]
) -> RecordDTO:
    """Create answers for a record"""
    body = await request.body()
    return await record_service.create_record_answers(name, record_type, body)
