"""Mapper configuration for SQLAlchemy Core tables to persisted models"""
from sqlalchemy.orm import registry

from dnscontroller.domain.models import AnswerDetailModel, AnswerModel, RecordModel
from dnscontroller.infrastructure.adapters.orm import (answer_details, answers,
                                                       metadata, records)

# Create mapper registry
mapper_registry = registry(metadata=metadata)

_mapped = False


def start_mappers():
    """
    Map the persisted dataclasses onto their tables.

    No relationships are configured: records, answers and details reference
    each other through foreign key values only and are resolved by query.
    Safe to call more than once.
    """
    global _mapped
    if _mapped:
        return

    mapper_registry.map_imperatively(class_=RecordModel, local_table=records)
    mapper_registry.map_imperatively(class_=AnswerModel, local_table=answers)
    mapper_registry.map_imperatively(class_=AnswerDetailModel, local_table=answer_details)

    _mapped = True
