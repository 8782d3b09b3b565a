"""Record repository"""

from dnscontroller.domain.models import RecordModel
from dnscontroller.infrastructure.repositories.adapters.base import \
    SQLAlchemyAbstractRepository
from dnscontroller.infrastructure.repositories.interfaces.record import \
    RecordRepository


class SQLAlchemyRecordRepository(SQLAlchemyAbstractRepository, RecordRepository):
    model = RecordModel
    table_name = 'records'

    async def get_by_name_and_type(self, name: str, record_type: str) -> RecordModel:
        return await self.one_by_fields(record=name, record_type=record_type)
