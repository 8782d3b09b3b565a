"""Records - named, typed DNS entries owning zero or more answers"""
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from dnscontroller.domain.answers import Answer
from dnscontroller.domain.enums import is_supported_record_type
from dnscontroller.domain.exceptions import (NoRecordName, NoRecordType,
                                             UniqueConstraintViolation)
from dnscontroller.domain.identifiers import NIL_UUID, is_nil, parse_identifier
from dnscontroller.domain.models import RecordModel

if TYPE_CHECKING:
    from dnscontroller.infrastructure.unit_of_work.interfaces.dns import DNSUnitOfWork


@dataclass
class Record:
    """API model for a record"""
    name: str = ""
    type: str = ""
    answers: Optional[List[Answer]] = None
    id: UUID = NIL_UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_route(cls, name: Optional[str], record_type: Optional[str]) -> "Record":
        """Build a record from URL params and validate it"""
        record = cls(
            name=(name or "").lower(),
            type=(record_type or "").upper(),
            answers=[],
        )
        record.validate()

        return record

    @property
    def path(self) -> str:
        return f"{self.name}/{self.type}"

    def validate(self) -> None:
        if not self.name:
            raise NoRecordName()

        if not self.type:
            raise NoRecordType()

        is_supported_record_type(self.type.upper())

    def to_db_model(self) -> RecordModel:
        """Convert to the persisted row, normalizing name and type"""
        self.validate()

        db_model = RecordModel(
            record=self.name.lower(),
            record_type=self.type.upper(),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

        if not is_nil(self.id):
            db_model.id = str(self.id)

        return db_model

    async def from_db_model(self, uow: "DNSUnitOfWork", db_model: RecordModel) -> None:
        """Copy a persisted row into this record, then load its answers"""
        self.created_at = db_model.created_at
        self.updated_at = db_model.updated_at
        self.name = db_model.record
        self.type = db_model.record_type

        self.id = parse_identifier("records.id", db_model.id)

        self.validate()

        uow.logger.debug("db record converted to api model: %s (%s)", self.path, self.id)

        await self.get_answers(uow)

    async def get_answers(self, uow: "DNSUnitOfWork") -> None:
        """Load every answer pointing at this record"""
        db_answers = await uow.answers.find_by_record(str(self.id))

        answers = []
        for db_answer in db_answers:
            answer = Answer()
            await answer.from_db_model(uow, db_answer)
            answers.append(answer)

        if answers:
            uow.logger.debug("answers found for record %s, count=%d", self.path, len(answers))

        self.answers = answers

    async def find(self, uow: "DNSUnitOfWork") -> None:
        """Look the record up by name and type"""
        self.validate()

        db_model = await uow.records.get_by_name_and_type(self.name.lower(), self.type.upper())
        await self.from_db_model(uow, db_model)

    async def create(self, uow: "DNSUnitOfWork") -> None:
        db_model = self.to_db_model()
        uow.logger.debug("creating record %s", self.path)

        db_model = await uow.records.create(db_model)
        await self.from_db_model(uow, db_model)

    async def create_or_find(self, uow: "DNSUnitOfWork") -> None:
        """
        Create the record, or load the existing one when the name and type
        are already taken. Validation and other store errors propagate.
        """
        try:
            await self.create(uow)
        except UniqueConstraintViolation:
            uow.logger.debug("record %s already exists, loading it", self.path)
            await self.find(uow)

    async def delete(self, uow: "DNSUnitOfWork") -> None:
        """Remove the record row; answers are left to the store's foreign keys"""
        self.validate()
        await self.find(uow)

        await uow.records.delete(str(self.id))
        uow.logger.debug("deleted record %s", self.path)
