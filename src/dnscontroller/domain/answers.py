"""Answers - resolution targets belonging to one record and one owner"""
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from dnscontroller.domain.details import Detail
from dnscontroller.domain.enums import is_supported_record_type
from dnscontroller.domain.exceptions import (EntityNotFound, NoAnswerDetail,
                                             NoAnswerTarget, NoAnswerType,
                                             TooManyAnswerDetails)
from dnscontroller.domain.identifiers import NIL_UUID, is_nil, parse_identifier
from dnscontroller.domain.models import AnswerModel

if TYPE_CHECKING:
    from dnscontroller.infrastructure.unit_of_work.interfaces.dns import DNSUnitOfWork


@dataclass
class Answer:
    """
    API model for an answer.

    Data relationships:
      - many answers belong to one record (record_id)
      - an answer belongs to one owner (owner_id)
      - an answer has at most one detail, loaded only when has_details is set
    """
    target: str = ""
    type: str = ""
    ttl: int = 0
    has_details: bool = False
    details: Optional[List[Detail]] = None
    owner_id: UUID = NIL_UUID
    record_id: UUID = NIL_UUID
    id: UUID = NIL_UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def validate(self) -> None:
        if not self.target:
            raise NoAnswerTarget()

        if not self.type:
            raise NoAnswerType()

        is_supported_record_type(self.type.upper())

        if self.details and len(self.details) > 1:
            raise TooManyAnswerDetails()

    def to_db_model(self) -> AnswerModel:
        """Convert to the persisted row, normalizing target and type"""
        self.validate()

        db_model = AnswerModel(
            target=self.target.lower(),
            type=self.type.upper(),
            ttl=self.ttl,
            has_details=self.has_details,
            owner_id=str(self.owner_id),
            record_id=str(self.record_id),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

        if not is_nil(self.id):
            db_model.id = str(self.id)

        return db_model

    async def from_db_model(self, uow: "DNSUnitOfWork", db_model: AnswerModel) -> None:
        """Copy a persisted row into this answer, loading its detail when flagged"""
        self.created_at = db_model.created_at
        self.updated_at = db_model.updated_at
        self.target = db_model.target
        self.type = db_model.type
        self.ttl = db_model.ttl
        self.has_details = db_model.has_details

        self.owner_id = parse_identifier("answers.owner_id", db_model.owner_id)
        self.record_id = parse_identifier("answers.record_id", db_model.record_id)
        self.id = parse_identifier("answers.id", db_model.id)

        if self.has_details:
            await self.get_details(uow)

        uow.logger.debug("db answer converted to api model: %s %s -> %s", self.id, self.type, self.target)

        self.validate()

    async def get_details(self, uow: "DNSUnitOfWork") -> None:
        """Load the detail rows for this answer"""
        if not self.has_details:
            raise NoAnswerDetail()

        db_models = await uow.details.find_by_answer(str(self.id))

        details = []
        for db_model in db_models:
            detail = Detail()
            detail.from_db_model(db_model)
            details.append(detail)

        self.details = details

    async def find(self, uow: "DNSUnitOfWork") -> None:
        """Look the answer up by target, type, record and owner"""
        self.validate()

        db_model = await uow.answers.get_by_natural_key(
            target=self.target.lower(),
            answer_type=self.type.upper(),
            record_id=str(self.record_id),
            owner_id=str(self.owner_id),
        )
        await self.from_db_model(uow, db_model)

    async def create(self, uow: "DNSUnitOfWork") -> None:
        """
        Insert the answer, then any details supplied with it.

        Details are written after the answer row so they can reference its
        identifier; the answer is re-hydrated last so they come back loaded.
        """
        pending = list(self.details or [])
        if pending:
            self.has_details = True

        db_model = self.to_db_model()
        db_model = await uow.answers.create(db_model)
        answer_id = parse_identifier("answers.id", db_model.id)

        for detail in pending:
            detail.answer_id = answer_id
            await detail.find_or_create(uow)

        await self.from_db_model(uow, db_model)

    async def find_or_create(self, uow: "DNSUnitOfWork") -> None:
        """Find the answer, creating it only when no row matches"""
        try:
            await self.find(uow)
        except EntityNotFound:
            await self.create(uow)

    async def delete(self, uow: "DNSUnitOfWork") -> None:
        self.validate()
        await self.find(uow)

        await uow.answers.delete(str(self.id))
        uow.logger.debug("deleted answer %s: %s -> %s", self.id, self.type, self.target)
