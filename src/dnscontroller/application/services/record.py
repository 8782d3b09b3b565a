# dnscontroller/application/services/record.py
from dnscontroller.application.dto.answer import parse_answers
from dnscontroller.application.dto.record import RecordDTO
from dnscontroller.domain.records import Record
from dnscontroller.infrastructure.unit_of_work.interfaces.dns import DNSUnitOfWork


class RecordService:
    """Record and answer operations behind the HTTP routes, one unit of work each"""

    def __init__(self, uow: DNSUnitOfWork):
        self.uow = uow

    async def get_record(self, name: str, record_type: str) -> RecordDTO:
        async with self.uow as uow:
            record = Record.from_route(name, record_type)
            await record.find(uow)

            return RecordDTO.from_entity(record)

    async def create_record(self, name: str, record_type: str) -> RecordDTO:
        async with self.uow as uow:
            record = Record.from_route(name, record_type)
            await record.create(uow)
            await uow.commit()

            uow.logger.info("record created: %s", record.path)
            return RecordDTO.from_entity(record)

    async def delete_record(self, name: str, record_type: str) -> None:
        async with self.uow as uow:
            record = Record.from_route(name, record_type)
            await record.delete(uow)
            await uow.commit()

            uow.logger.info("record deleted: %s", record.path)

    async def create_record_answers(self, name: str, record_type: str, body: bytes) -> RecordDTO:
        """
        Attach the answers in a JSON body to an existing record.

        All answers are written in one transaction: if any of them fails,
        none are kept.
        """
        async with self.uow as uow:
            record = Record.from_route(name, record_type)
            await record.find(uow)

            answers = parse_answers(body)
            uow.logger.debug("parsed %d answers for record %s", len(answers), record.path)

            for answer in answers:
                answer.record_id = record.id
                await answer.create(uow)

            await uow.commit()

            # fetch the record again so the new answers are included
            record = Record.from_route(name, record_type)
            await record.find(uow)

            uow.logger.info("answers created for record %s: %d", record.path, len(answers))
            return RecordDTO.from_entity(record)
