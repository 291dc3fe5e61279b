from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker

from soulcrush.core import config

DATABASE_URL = config.DATABASE_URL


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ships with foreign key enforcement off for every new connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: str, **kwargs) -> Engine:
    """
    Create an engine with foreign key enforcement switched on.

    For SQLite file databases the parent directory (the data volume) is
    created when the first connection is opened.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    engine = create_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        if parsed.database and parsed.database != ":memory:":
            data_dir = Path(parsed.database).parent

            @event.listens_for(engine, "do_connect")
            def _create_data_dir(dialect, conn_rec, cargs, cparams):
                data_dir.mkdir(parents=True, exist_ok=True)

        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


engine = create_db_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
