from datetime import datetime
from typing import Annotated, List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from dnscontroller.domain.answers import Answer
from dnscontroller.domain.details import Detail
from dnscontroller.domain.exceptions import InvalidAnswers
from dnscontroller.domain.identifiers import NIL_UUID

# Widest values the store columns hold: ttl is BIGINT, detail columns are INTEGER
TTL = Annotated[int, Field(ge=0, le=2**63 - 1)]
DetailInt = Annotated[int, Field(ge=-2**31, le=2**31 - 1)]


class DetailDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")
    uuid: UUID = Field(default_factory=uuid4)
    answer_id: UUID = NIL_UUID
    port: DetailInt = 0
    priority: DetailInt = 0
    protocol: str = Field("", max_length=20)
    weight: DetailInt = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, detail: Detail) -> "DetailDTO":
        return cls(
            uuid=detail.id,
            answer_id=detail.answer_id,
            port=detail.port,
            priority=detail.priority,
            protocol=detail.protocol,
            weight=detail.weight,
            created_at=detail.created_at,
            updated_at=detail.updated_at,
        )

    def to_entity(self) -> Detail:
        return Detail(
            id=self.uuid,
            answer_id=self.answer_id,
            port=self.port,
            priority=self.priority,
            protocol=self.protocol,
            weight=self.weight,
        )


class AnswerDTO(BaseModel):
    """Answer payload; target and type default to empty so validation names what is missing"""
    model_config = ConfigDict(extra="ignore")
    uuid: UUID = NIL_UUID
    target: str = Field("", max_length=255)
    type: str = ""
    ttl: TTL = 0
    has_details: bool = False
    # an answer has at most one detail
    details: Optional[List[DetailDTO]] = Field(None, max_length=1)
    owner_id: UUID = NIL_UUID
    record_id: UUID = NIL_UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, answer: Answer) -> "AnswerDTO":
        details = None
        if answer.details is not None:
            details = [DetailDTO.from_entity(detail) for detail in answer.details]

        return cls(
            uuid=answer.id,
            target=answer.target,
            type=answer.type,
            ttl=answer.ttl,
            has_details=answer.has_details,
            details=details,
            owner_id=answer.owner_id,
            record_id=answer.record_id,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
        )

    def to_entity(self) -> Answer:
        details = None
        if self.details is not None:
            details = [detail.to_entity() for detail in self.details]

        return Answer(
            id=self.uuid,
            target=self.target,
            type=self.type,
            ttl=self.ttl,
            has_details=self.has_details,
            details=details,
            owner_id=self.owner_id,
            record_id=self.record_id,
        )


_answers_adapter = TypeAdapter(List[AnswerDTO])


def parse_answers(body: bytes) -> List[Answer]:
    """
    Decode a JSON list of answers from a request body and validate each.

    Raises:
        InvalidAnswers: body is not JSON or does not decode to a list of answers
        ValidationError: an answer is missing its target or type, or has an unsupported type
    """
    try:
        dtos = _answers_adapter.validate_json(body)
    except PydanticValidationError as e:
        raise InvalidAnswers(_first_error(e)) from e

    answers = [dto.to_entity() for dto in dtos]
    for answer in answers:
        answer.validate()

    return answers


def _first_error(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)

    error = errors[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    if location:
        return f"{location}: {error['msg']}"
    return error["msg"]
