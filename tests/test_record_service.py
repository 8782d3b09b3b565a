import json
from uuid import uuid4

import pytest

from dnscontroller.application.services.record import RecordService
from dnscontroller.domain.exceptions import (EntityNotFound, NoAnswerTarget,
                                             UniqueConstraintViolation)
from dnscontroller.domain.records import Record


@pytest.fixture
def service(uow_factory):
    return RecordService(uow_factory())


@pytest.mark.asyncio
async def test_create_and_get(uow_factory):
    created = await RecordService(uow_factory()).create_record("Example.com", "a")
    fetched = await RecordService(uow_factory()).get_record("example.com", "A")

    assert created.record == "example.com"
    assert created.record_type == "A"
    assert fetched.uuid == created.uuid
    assert fetched.answers == []


@pytest.mark.asyncio
async def test_get_missing(service):
    with pytest.raises(EntityNotFound):
        await service.get_record("missing.example.com", "A")


@pytest.mark.asyncio
async def test_create_answers_injects_record_id(record, uow_factory):
    body = json.dumps([
        {"target": "1.1.2.1", "type": "a", "owner_id": str(uuid4()), "record_id": str(uuid4())},
    ]).encode()

    result = await RecordService(uow_factory()).create_record_answers("example.com", "A", body)

    assert len(result.answers) == 1
    assert result.answers[0].type == "A"
    assert result.answers[0].record_id == record.id


@pytest.mark.asyncio
async def test_create_answers_for_missing_record(service):
    with pytest.raises(EntityNotFound):
        await service.create_record_answers("missing.example.com", "A", b"[]")


@pytest.mark.asyncio
async def test_create_answers_rejects_invalid_batch(record, uow_factory):
    body = json.dumps([{"target": "1.1.1.1", "type": "A"}, {"type": "A"}]).encode()

    with pytest.raises(NoAnswerTarget):
        await RecordService(uow_factory()).create_record_answers("example.com", "A", body)

    fetched = await RecordService(uow_factory()).get_record("example.com", "A")
    assert fetched.answers == []


@pytest.mark.asyncio
async def test_create_answers_is_atomic(record, uow_factory):
    """A failing answer rolls back the ones written before it"""
    owner_id = str(uuid4())
    body = json.dumps([
        {"target": "1.1.1.1", "type": "A", "owner_id": owner_id},
        {"target": "2.2.2.2", "type": "A", "owner_id": owner_id},
        {"target": "1.1.1.1", "type": "a", "owner_id": owner_id},
    ]).encode()

    with pytest.raises(UniqueConstraintViolation):
        await RecordService(uow_factory()).create_record_answers("example.com", "A", body)

    async with uow_factory() as uow:
        assert await uow.answers.find_by_record(str(record.id)) == []


@pytest.mark.asyncio
async def test_delete_record(record, uow_factory):
    await RecordService(uow_factory()).delete_record("example.com", "A")

    async with uow_factory() as uow:
        with pytest.raises(EntityNotFound):
            await Record.from_route("example.com", "A").find(uow)
