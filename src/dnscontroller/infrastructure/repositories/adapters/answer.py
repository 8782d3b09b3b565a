"""Answer repository"""

from typing import List

from dnscontroller.domain.models import AnswerModel
from dnscontroller.infrastructure.repositories.adapters.base import \
    SQLAlchemyAbstractRepository
from dnscontroller.infrastructure.repositories.interfaces.answer import \
    AnswerRepository


class SQLAlchemyAnswerRepository(SQLAlchemyAbstractRepository, AnswerRepository):
    model = AnswerModel
    table_name = 'answers'

    async def get_by_natural_key(
        self,
        target: str,
        answer_type: str,
        record_id: str,
        owner_id: str,
    ) -> AnswerModel:
        return await self.one_by_fields(
            record_id=record_id,
            owner_id=owner_id,
            target=target,
            type=answer_type,
        )

    async def find_by_record(self, record_id: str) -> List[AnswerModel]:
        return await self.find_many(
            filters={"record_id": record_id},
            order_by="created_at",
        )
