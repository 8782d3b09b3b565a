"""Answer repository"""

from abc import ABC
from typing import List

from dnscontroller.domain.models import AnswerModel
from dnscontroller.infrastructure.repositories.interfaces.base import AbstractRepository


class AnswerRepository(AbstractRepository[AnswerModel], ABC):
    async def get_by_natural_key(
        self,
        target: str,
        answer_type: str,
        record_id: str,
        owner_id: str,
    ) -> AnswerModel:
        raise NotImplementedError

    async def find_by_record(self, record_id: str) -> List[AnswerModel]:
        raise NotImplementedError
