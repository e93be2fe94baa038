"""create chain store tables

Revision ID: 20261019_000001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create block, author, validator, event and token tables."""
    op.create_table(
        'ksm_block',
        sa.Column('height', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('hash', sa.String(66), nullable=False),
        sa.Column('author_addr', sa.String(64), nullable=True),
        sa.PrimaryKeyConstraint('height'),
    )
    op.create_index('ix_ksm_block_author_addr', 'ksm_block', ['author_addr'])

    op.create_table(
        'ksm_author',
        sa.Column('author_addr', sa.String(64), nullable=False),
        sa.Column('last_block_height', sa.BigInteger(), nullable=False),
        sa.Column('last_block_hash', sa.String(66), nullable=False),
        sa.PrimaryKeyConstraint('author_addr'),
    )

    op.create_table(
        'ksm_validator',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('height', sa.BigInteger(), nullable=False),
        sa.Column('current_era', sa.Integer(), nullable=False),
        sa.Column('current_session', sa.Integer(), nullable=False),
        sa.Column('validator_addr', sa.String(64), nullable=False),
        sa.Column('validator_name', sa.String(255), nullable=True),
        sa.Column('controller_addr', sa.String(64), nullable=True),
        sa.Column('controller_name', sa.String(255), nullable=True),
        sa.Column('online', sa.Boolean(), nullable=False),
        sa.Column('era_point', sa.Integer(), nullable=False),
        sa.Column('reward_destination', sa.String(64), nullable=True),
        sa.Column('commission', sa.String(32), nullable=True),
        sa.Column('total_bonded', sa.String(80), nullable=False),
        sa.Column('self_bonded', sa.String(80), nullable=False),
        sa.Column('nominators', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('height', 'validator_addr', name='uq_ksm_validator_height_addr'),
    )
    op.create_index('ix_ksm_validator_height', 'ksm_validator', ['height'])
    op.create_index('ix_ksm_validator_current_era', 'ksm_validator', ['current_era'])
    op.create_index('ix_ksm_validator_validator_addr', 'ksm_validator', ['validator_addr'])

    op.create_table(
        'ksm_evt_reward',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('height', sa.BigInteger(), nullable=False),
        sa.Column('index', sa.Integer(), nullable=False),
        sa.Column('validators_amount', sa.String(80), nullable=False),
        sa.Column('treasury_amount', sa.String(80), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('height', 'index', name='uq_ksm_evt_reward_height_index'),
    )
    op.create_index('ix_ksm_evt_reward_height', 'ksm_evt_reward', ['height'])

    op.create_table(
        'ksm_evt_slash',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('height', sa.BigInteger(), nullable=False),
        sa.Column('index', sa.Integer(), nullable=False),
        sa.Column('account_addr', sa.String(64), nullable=False),
        sa.Column('nickname', sa.String(255), nullable=True),
        sa.Column('amount', sa.String(80), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('height', 'index', name='uq_ksm_evt_slash_height_index'),
    )
    op.create_index('ix_ksm_evt_slash_height', 'ksm_evt_slash', ['height'])
    op.create_index('ix_ksm_evt_slash_account_addr', 'ksm_evt_slash', ['account_addr'])

    op.create_table(
        'ksm_token',
        sa.Column('height', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('current_era', sa.Integer(), nullable=False),
        sa.Column('current_session', sa.Integer(), nullable=False),
        sa.Column('total_issuance', sa.String(80), nullable=False),
        sa.Column('total_bond', sa.String(80), nullable=False),
        sa.Column('validators_count', sa.Integer(), nullable=False),
        sa.Column('staking_ratio', sa.DECIMAL(20, 10), nullable=False),
        sa.Column('inflation', sa.DECIMAL(20, 10), nullable=False),
        sa.Column('val_day_rewards', sa.String(80), nullable=False),
        sa.PrimaryKeyConstraint('height'),
    )


def downgrade() -> None:
    """Drop chain store tables."""
    op.drop_table('ksm_token')
    op.drop_index('ix_ksm_evt_slash_account_addr', table_name='ksm_evt_slash')
    op.drop_index('ix_ksm_evt_slash_height', table_name='ksm_evt_slash')
    op.drop_table('ksm_evt_slash')
    op.drop_index('ix_ksm_evt_reward_height', table_name='ksm_evt_reward')
    op.drop_table('ksm_evt_reward')
    op.drop_index('ix_ksm_validator_validator_addr', table_name='ksm_validator')
    op.drop_index('ix_ksm_validator_current_era', table_name='ksm_validator')
    op.drop_index('ix_ksm_validator_height', table_name='ksm_validator')
    op.drop_table('ksm_validator')
    op.drop_table('ksm_author')
    op.drop_index('ix_ksm_block_author_addr', table_name='ksm_block')
    op.drop_table('ksm_block')
