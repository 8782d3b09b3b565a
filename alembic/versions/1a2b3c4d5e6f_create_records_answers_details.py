"""create records, answers and answer_details

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '1a2b3c4d5e6f'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the records, answers and answer_details tables"""

    # 1. records
    op.create_table(
        'records',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('record', sa.String(length=255), nullable=False),
        sa.Column('record_type', sa.String(length=10), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("record != ''", name='ck_records_record_not_empty'),
        sa.CheckConstraint("record_type IN ('A', 'SRV')", name='ck_records_record_type_valid'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('record', 'record_type', name='uq_records_record_type')
    )
    op.create_index('idx_records_lookup', 'records', ['record', 'record_type'])

    # 2. answers
    op.create_table(
        'answers',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('record_id', sa.String(length=36), nullable=False),
        sa.Column('owner_id', sa.String(length=36), nullable=False),
        sa.Column('target', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=10), nullable=False),
        sa.Column('ttl', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column('has_details', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("target != ''", name='ck_answers_target_not_empty'),
        sa.CheckConstraint("type IN ('A', 'SRV')", name='ck_answers_type_valid'),
        sa.CheckConstraint("ttl >= 0", name='ck_answers_ttl_unsigned'),
        sa.ForeignKeyConstraint(['record_id'], ['records.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('record_id', 'owner_id', 'target', 'type', name='uq_answers_record_owner_target_type')
    )
    op.create_index('ix_answers_record_id', 'answers', ['record_id'])
    op.create_index('ix_answers_owner_id', 'answers', ['owner_id'])
    op.create_index('idx_answers_lookup', 'answers', ['record_id', 'owner_id', 'target', 'type'])

    # 3. answer_details
    op.create_table(
        'answer_details',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('answer_id', sa.String(length=36), nullable=False),
        sa.Column('port', sa.Integer(), nullable=True),
        sa.Column('priority', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Integer(), nullable=True),
        sa.Column('protocol', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['answer_id'], ['answers.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('answer_id', name='uq_answer_details_answer')
    )


def downgrade() -> None:
    """Drop the tables in dependency order"""
    op.drop_table('answer_details')
    op.drop_index('idx_answers_lookup', table_name='answers')
    op.drop_index('ix_answers_owner_id', table_name='answers')
    op.drop_index('ix_answers_record_id', table_name='answers')
    op.drop_table('answers')
    op.drop_index('idx_records_lookup', table_name='records')
    op.drop_table('records')
