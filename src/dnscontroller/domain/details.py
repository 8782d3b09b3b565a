"""Answer details - optional SRV-style metadata attached 1:1 to an answer"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from dnscontroller.domain.exceptions import (EntityNotFound, NoAnswerDetailAnswerID,
                                             NoAnswerDetailID)
from dnscontroller.domain.identifiers import NIL_UUID, is_nil, parse_identifier
from dnscontroller.domain.models import AnswerDetailModel

if TYPE_CHECKING:
    from dnscontroller.infrastructure.unit_of_work.interfaces.dns import DNSUnitOfWork


@dataclass
class Detail:
    """
    API model for an answer detail.

    The identifier is generated when the detail is built, so a detail is
    always valid for insert once its answer is known.
    """
    answer_id: UUID = NIL_UUID
    port: int = 0
    priority: int = 0
    protocol: str = ""
    weight: int = 0
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def validate(self) -> None:
        if is_nil(self.id):
            raise NoAnswerDetailID()

        if is_nil(self.answer_id):
            raise NoAnswerDetailAnswerID()

    def to_db_model(self) -> AnswerDetailModel:
        """Convert to the persisted row"""
        self.validate()

        db_model = AnswerDetailModel(
            answer_id=str(self.answer_id),
            port=self.port,
            priority=self.priority,
            weight=self.weight,
            protocol=self.protocol,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

        if not is_nil(self.id):
            db_model.id = str(self.id)

        return db_model

    def from_db_model(self, db_model: AnswerDetailModel) -> None:
        """Copy a persisted row into this detail and re-validate it"""
        self.created_at = db_model.created_at
        self.updated_at = db_model.updated_at

        self.id = parse_identifier("answer_details.id", db_model.id)
        self.answer_id = parse_identifier("answer_details.answer_id", db_model.answer_id)

        # nullable columns
        self.port = db_model.port or 0
        self.priority = db_model.priority or 0
        self.protocol = db_model.protocol or ""
        self.weight = db_model.weight or 0

        self.validate()

    async def find(self, uow: "DNSUnitOfWork") -> None:
        """Look the detail up by the answer it belongs to"""
        self.validate()

        db_model = await uow.details.get_by_answer(str(self.answer_id))
        self.from_db_model(db_model)

    async def create(self, uow: "DNSUnitOfWork") -> None:
        db_model = self.to_db_model()
        uow.logger.debug("creating answer detail %s for answer %s", self.id, self.answer_id)

        db_model = await uow.details.create(db_model)
        self.from_db_model(db_model)

    async def find_or_create(self, uow: "DNSUnitOfWork") -> None:
        try:
            await self.find(uow)
        except EntityNotFound:
            await self.create(uow)

    async def delete(self, uow: "DNSUnitOfWork") -> None:
        self.validate()
        await self.find(uow)

        await uow.details.delete(str(self.id))
        uow.logger.debug("deleted answer detail %s for answer %s: %s/%d", self.id, self.answer_id, self.protocol, self.port)
