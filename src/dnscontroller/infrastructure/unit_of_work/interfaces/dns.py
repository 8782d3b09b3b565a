import logging
from abc import ABC

from dnscontroller.infrastructure.repositories.interfaces.answer import \
    AnswerRepository
from dnscontroller.infrastructure.repositories.interfaces.detail import \
    AnswerDetailRepository
from dnscontroller.infrastructure.repositories.interfaces.record import \
    RecordRepository
from dnscontroller.infrastructure.unit_of_work.interfaces.base import AbstractUnitOfWork


class DNSUnitOfWork(AbstractUnitOfWork, ABC):
    """
    Store handle passed to every entity operation.

    Carries the request's logger alongside the repositories.
    """
    records: RecordRepository
    answers: AnswerRepository
    details: AnswerDetailRepository
    logger: logging.Logger
