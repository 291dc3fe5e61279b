"""initial_schema

Revision ID: 4c2b8e1f0a37
Revises: 
Create Date: 2026-01-27 00:00:00.000000

Creates companies and the first version of the application table,
still named solicitaties.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c2b8e1f0a37'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('companies',
        sa.Column('id', sa.Text(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('website', sa.Text(), nullable=False),
        sa.Column('ceo', sa.Text(), nullable=False),
        sa.Column('industry', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('solicitaties',
        sa.Column('id', sa.Text(), nullable=False),
        sa.Column('company_id', sa.Text(), nullable=False),
        sa.Column('status', sa.Text(), nullable=False),
        sa.Column('date', sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id'], name='fk_application_company'),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    op.drop_table('solicitaties')
    op.drop_table('companies')
