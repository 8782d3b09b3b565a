"""Record repository"""

from abc import ABC

from dnscontroller.domain.models import RecordModel
from dnscontroller.infrastructure.repositories.interfaces.base import AbstractRepository


class RecordRepository(AbstractRepository[RecordModel], ABC):
    async def get_by_name_and_type(self, name: str, record_type: str) -> RecordModel:
        raise NotImplementedError
