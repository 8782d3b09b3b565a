"""Answer detail repository"""

from typing import List

from dnscontroller.domain.models import AnswerDetailModel
from dnscontroller.infrastructure.repositories.adapters.base import \
    SQLAlchemyAbstractRepository
from dnscontroller.infrastructure.repositories.interfaces.detail import \
    AnswerDetailRepository


class SQLAlchemyAnswerDetailRepository(SQLAlchemyAbstractRepository, AnswerDetailRepository):
    model = AnswerDetailModel
    table_name = 'answer_details'

    async def get_by_answer(self, answer_id: str) -> AnswerDetailModel:
        return await self.one_by_fields(answer_id=answer_id)

    async def find_by_answer(self, answer_id: str) -> List[AnswerDetailModel]:
        return await self.find_many(filters={"answer_id": answer_id})
