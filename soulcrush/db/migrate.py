"""
Database migration runner for Alembic migrations.
"""
import logging
import os
from alembic.config import Config
from alembic import command
from sqlalchemy import create_engine, text

from soulcrush.core import config as app_config

logger = logging.getLogger(__name__)

ADVISORY_LOCK_ID = 987654321

ALEMBIC_INI_PATH = os.getenv(
    "ALEMBIC_INI",
    os.path.join(
        os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), "alembic.ini"
    ),
)


def get_alembic_config(database_url: str) -> Config:
    alembic_cfg = Config(ALEMBIC_INI_PATH)
    alembic_cfg.set_main_option(
        "script_location", os.path.join(os.path.dirname(ALEMBIC_INI_PATH), "alembic")
    )
    # ConfigParser interpolation treats "%" as special
    alembic_cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return alembic_cfg


def run_migrations(database_url: str = None, revision: str = "head"):
    """
    Run Alembic migrations up to a revision (head by default).
    Uses advisory locks on PostgreSQL to prevent concurrent migrations.
    """
    database_url = database_url or app_config.DATABASE_URL
    if not database_url:
        raise ValueError("DATABASE_URL is not set")
    
    logger.info(f"Running alembic upgrade {revision}")
    alembic_cfg = get_alembic_config(database_url)
    
    is_postgres = database_url.startswith("postgresql")
    engine = create_engine(database_url, pool_pre_ping=True) if is_postgres else None
    lock_conn = None
    
    try:
        if is_postgres:
            # Acquire advisory lock (keep connection open to hold lock)
            lock_conn = engine.connect()
            lock_conn.execute(text(f"SELECT pg_advisory_lock({ADVISORY_LOCK_ID})"))
            lock_conn.commit()
            logger.info("Migration lock acquired")
        
        command.upgrade(alembic_cfg, revision)
        logger.info("Migrations complete")
        
    except Exception:
        logger.exception("Migration failed")
        raise
    finally:
        if lock_conn is not None:
            lock_conn.execute(text(f"SELECT pg_advisory_unlock({ADVISORY_LOCK_ID})"))
            lock_conn.commit()
            lock_conn.close()
        if engine is not None:
            engine.dispose()


def downgrade_migrations(database_url: str, revision: str):
    """Downgrade the schema to an earlier revision."""
    logger.info(f"Running alembic downgrade {revision}")
    command.downgrade(get_alembic_config(database_url), revision)
