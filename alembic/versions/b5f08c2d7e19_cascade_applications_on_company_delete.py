"""cascade_applications_on_company_delete

Revision ID: b5f08c2d7e19
Revises: 9e71d3a5c604
Create Date: 2026-02-02 00:00:00.000000

Redefines applications.company_id with ON DELETE CASCADE so that deleting a
company removes its applications, and deleting one application (which
deletes its company through the trigger) takes the sibling applications
along instead of failing the foreign key check.

SQLite rebuilds the table in batch mode, which drops its triggers, so the
trigger is dropped first and recreated afterwards.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'b5f08c2d7e19'
down_revision: Union[str, None] = '9e71d3a5c604'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TRIGGER_NAME = 'delete_company_after_application'
FK_NAME = 'fk_application_company'


def create_trigger() -> None:
    bind = op.get_bind()
    if bind.dialect.name == 'postgresql':
        # The function survives the FK change; only the trigger is recreated
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
    else:
        op.execute(f"DROP TRIGGER IF EXISTS {TRIGGER_NAME}")


def replace_foreign_key(ondelete: Union[str, None]) -> None:
    drop_trigger()
    with op.batch_alter_table('applications') as batch_op:
        batch_op.drop_constraint(FK_NAME, type_='foreignkey')
        batch_op.create_foreign_key(
            FK_NAME, 'companies', ['company_id'], ['id'], ondelete=ondelete
        )
    create_trigger()


def upgrade() -> None:
    replace_foreign_key('CASCADE')


def downgrade() -> None:
    replace_foreign_key(None)
