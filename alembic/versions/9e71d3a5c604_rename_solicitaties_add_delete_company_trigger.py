"""rename_solicitaties_add_delete_company_trigger

Revision ID: 9e71d3a5c604
Revises: 4c2b8e1f0a37
Create Date: 2026-01-28 00:00:00.000000

Renames solicitaties to applications (rows are kept) and adds the trigger
that deletes a company once one of its applications is deleted.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '9e71d3a5c604'
down_revision: Union[str, None] = '4c2b8e1f0a37'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TRIGGER_NAME = 'delete_company_after_application'


def create_trigger() -> None:
    bind = op.get_bind()
    if bind.dialect.name == 'postgresql':
        op.execute(f"""
            CREATE OR REPLACE FUNCTION {TRIGGER_NAME}() RETURNS trigger AS $$
            BEGIN
                DELETE FROM companies WHERE id = OLD.company_id;
                RETURN OLD;
            END;
            $$ LANGUAGE plpgsql
        """)
        op.execute(f"""
            CREATE TRIGGER {TRIGGER_NAME}
            AFTER DELETE ON applications
            FOR EACH ROW EXECUTE FUNCTION {TRIGGER_NAME}()
        """)
    else:
        op.execute(f"""
            CREATE TRIGGER {TRIGGER_NAME}
            AFTER DELETE ON applications
            BEGIN
                DELETE FROM companies WHERE id = OLD.company_id;
            END
        """)


def drop_trigger() -> None:
    bind = op.get_bind()
    if bind.dialect.name == 'postgresql':
        op.execute(f"DROP TRIGGER IF EXISTS {TRIGGER_NAME} ON applications")
        op.execute(f"DROP FUNCTION IF EXISTS {TRIGGER_NAME}()")
    else:
        op.execute(f"DROP TRIGGER IF EXISTS {TRIGGER_NAME}")


def upgrade() -> None:
    op.rename_table('solicitaties', 'applications')
    create_trigger()


def downgrade() -> None:
    drop_trigger()
    op.rename_table('applications', 'solicitaties')
