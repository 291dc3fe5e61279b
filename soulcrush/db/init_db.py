from soulcrush.db.session import engine
from soulcrush.db.base import Base
from soulcrush.db.models import Company, Application  # noqa: F401


def init_db(bind=engine):
    """Create tables and the cascade trigger without going through Alembic."""
    Base.metadata.create_all(bind=bind)
