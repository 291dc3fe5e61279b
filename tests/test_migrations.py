"""
Tests for the Alembic migration history.
Runs the revisions against a temporary SQLite file.
"""
import pytest
from sqlalchemy import inspect, text
from sqlalchemy.orm import sessionmaker

from soulcrush.core.errors import NotFound
from soulcrush.db.migrate import downgrade_migrations, run_migrations
from soulcrush.db.models.application import TRIGGER_NAME
from soulcrush.db.session import create_db_engine
from soulcrush.services import tracker_service

INITIAL_REVISION = "4c2b8e1f0a37"


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'migrated.db'}"


@pytest.fixture
def engine(database_url):
    engine = create_db_engine(database_url)
    yield engine
    engine.dispose()


def trigger_names(conn):
    rows = conn.execute(text("SELECT name FROM sqlite_master WHERE type = 'trigger'"))
    return {row[0] for row in rows}


def test_upgrade_to_head_creates_final_schema(database_url, engine):
    """Test an empty database ends up with companies, applications and the trigger."""
    run_migrations(database_url)

    inspector = inspect(engine)
    tables = set(inspector.get_table_names())
    assert {"companies", "applications"} <= tables
    assert "solicitaties" not in tables
    assert {c["name"] for c in inspector.get_columns("applications")} == {
        "id", "company_id", "status", "date"
    }

    with engine.connect() as conn:
        assert TRIGGER_NAME in trigger_names(conn)
        foreign_keys = conn.exec_driver_sql("PRAGMA foreign_key_list(applications)").fetchall()

    assert len(foreign_keys) == 1
    # (id, seq, table, from, to, on_update, on_delete, match)
    assert foreign_keys[0][2] == "companies"
    assert foreign_keys[0][6] == "CASCADE"


def test_initial_revision_uses_solicitaties(database_url, engine):
    """Test the first revision still has the old table name and no trigger."""
    run_migrations(database_url, INITIAL_REVISION)

    assert "solicitaties" in inspect(engine).get_table_names()
    with engine.connect() as conn:
        assert trigger_names(conn) == set()


def test_rename_keeps_existing_rows(database_url, engine):
    """Test rows written before the rename are readable as applications."""
    run_migrations(database_url, INITIAL_REVISION)
    with engine.begin() as conn:
        conn.execute(text(
            "INSERT INTO companies (id, name, website, ceo, industry) "
            "VALUES ('c1', 'Acme', 'acme.com', 'Jane Doe', 'Widgets')"
        ))
        conn.execute(text(
            "INSERT INTO solicitaties (id, company_id, status, date) "
            "VALUES ('a1', 'c1', 'Solicitated', '2026-01-27')"
        ))

    run_migrations(database_url)

    db = sessionmaker(bind=engine)()
    try:
        application = tracker_service.get_application(db, "a1")
        assert application.status == "Solicitated"
        assert application.company.name == "Acme"
    finally:
        db.close()


def test_migrated_database_cascades(database_url, engine):
    """Test the migrated schema deletes the company and its siblings with an application."""
    run_migrations(database_url)

    db = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        acme = tracker_service.create_company(db, "Acme", "acme.com", "Jane Doe", "Widgets")
        first = tracker_service.create_application(db, acme, "applied", "2026-01-01")
        tracker_service.create_application(db, acme, "pending", "2026-01-02")

        tracker_service.delete_application(db, first)

        assert tracker_service.list_applications(db) == []
        with pytest.raises(NotFound):
            tracker_service.get_company(db, acme)
    finally:
        db.close()


def test_downgrade_to_base_removes_tables(database_url, engine):
    """Test the whole history can be rolled back."""
    run_migrations(database_url)
    downgrade_migrations(database_url, "base")

    tables = set(inspect(engine).get_table_names())
    assert "companies" not in tables
    assert "applications" not in tables
    assert "solicitaties" not in tables
