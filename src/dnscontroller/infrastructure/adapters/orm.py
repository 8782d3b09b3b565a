"""SQLAlchemy Core tables mapped from persisted models (imperative style)"""
from sqlalchemy import (BigInteger, Boolean, CheckConstraint, Column, DateTime,
                        ForeignKey, Index, Integer, MetaData, String, Table,
                        UniqueConstraint)

metadata = MetaData()

# Identifiers are stored in their string form
ID_LENGTH = 36

records = Table(
    'records',
    metadata,
    Column('id', String(ID_LENGTH), primary_key=True),
    Column('record', String(255), nullable=False),
    Column('record_type', String(10), nullable=False),
    Column('created_at', DateTime(timezone=True), nullable=False),
    Column('updated_at', DateTime(timezone=True), nullable=False),
    UniqueConstraint('record', 'record_type', name='uq_records_record_type'),
    Index('idx_records_lookup', 'record', 'record_type'),
    CheckConstraint("record != ''", name='ck_records_record_not_empty'),
    CheckConstraint("record_type IN ('A', 'SRV')", name='ck_records_record_type_valid'),
)

answers = Table(
    'answers',
    metadata,
    Column('id', String(ID_LENGTH), primary_key=True),
    Column('record_id', String(ID_LENGTH), ForeignKey('records.id', ondelete='CASCADE'), nullable=False, index=True),
    Column('owner_id', String(ID_LENGTH), nullable=False, index=True),
    Column('target', String(255), nullable=False),
    Column('type', String(10), nullable=False),
    Column('ttl', BigInteger, nullable=False, default=0),
    Column('has_details', Boolean, nullable=False, default=False),
    Column('created_at', DateTime(timezone=True), nullable=False),
    Column('updated_at', DateTime(timezone=True), nullable=False),
    UniqueConstraint('record_id', 'owner_id', 'target', 'type', name='uq_answers_record_owner_target_type'),
    Index('idx_answers_lookup', 'record_id', 'owner_id', 'target', 'type'),
    CheckConstraint("target != ''", name='ck_answers_target_not_empty'),
    CheckConstraint("type IN ('A', 'SRV')", name='ck_answers_type_valid'),
    CheckConstraint("ttl >= 0", name='ck_answers_ttl_unsigned'),
)

answer_details = Table(
    'answer_details',
    metadata,
    Column('id', String(ID_LENGTH), primary_key=True),
    Column('answer_id', String(ID_LENGTH), ForeignKey('answers.id', ondelete='CASCADE'), nullable=False),
    Column('port', Integer, nullable=True),
    Column('priority', Integer, nullable=True),
    Column('weight', Integer, nullable=True),
    Column('protocol', String(20), nullable=True),
    Column('created_at', DateTime(timezone=True), nullable=False),
    Column('updated_at', DateTime(timezone=True), nullable=False),
    UniqueConstraint('answer_id', name='uq_answer_details_answer'),
)
