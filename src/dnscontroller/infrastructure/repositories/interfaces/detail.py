"""Answer detail repository"""

from abc import ABC
from typing import List

from dnscontroller.domain.models import AnswerDetailModel
from dnscontroller.infrastructure.repositories.interfaces.base import AbstractRepository


class AnswerDetailRepository(AbstractRepository[AnswerDetailModel], ABC):
    async def get_by_answer(self, answer_id: str) -> AnswerDetailModel:
        raise NotImplementedError

    async def find_by_answer(self, answer_id: str) -> List[AnswerDetailModel]:
        raise NotImplementedError
