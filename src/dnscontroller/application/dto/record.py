from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from dnscontroller.application.dto.answer import AnswerDTO
from dnscontroller.domain.records import Record


class RecordDTO(BaseModel):
    record: str
    record_type: str
    answers: Optional[List[AnswerDTO]] = None
    uuid: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, record: Record) -> "RecordDTO":
        answers = None
        if record.answers is not None:
            answers = [AnswerDTO.from_entity(answer) for answer in record.answers]

        return cls(
            record=record.name,
            record_type=record.type,
            answers=answers,
            uuid=record.id,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
