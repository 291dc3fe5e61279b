"""
Process entrypoint: configure logging, migrate, serve.
"""
import logging

import uvicorn

from soulcrush.core import config
from soulcrush.core.logging_config import sanitize_log_data, setup_logging
from soulcrush.db.migrate import run_migrations

logger = logging.getLogger(__name__)


def main():
    setup_logging()
    host, port = config.parse_site_addr(config.SITE_ADDR)
    logger.info(
        "Starting soulcrush: %s",
        sanitize_log_data({
            "database_url": config.DATABASE_URL,
            "site_root": config.SITE_ROOT,
            "site_addr": f"{host}:{port}",
        }),
    )

    if config.RUN_MIGRATIONS:
        run_migrations(config.DATABASE_URL)
    else:
        logger.info("RUN_MIGRATIONS=0 -> skipping alembic upgrade")

    uvicorn.run("soulcrush.main:app", host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
