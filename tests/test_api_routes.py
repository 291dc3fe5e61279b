"""
Integration tests for the company and application endpoints.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from soulcrush.main import app
from soulcrush.db.base import Base
from soulcrush.db.session import create_db_engine, get_db


# Setup in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_db_engine(TEST_DATABASE_URL, poolclass=StaticPool)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    """Override get_db dependency for testing."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function", autouse=True)
def setup_db():
    """Create and drop tables for each test, with the database dependency overridden."""
    app.dependency_overrides[get_db] = override_get_db
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def client():
    return TestClient(app)


ACME = {"name": "Acme", "website": "https://acme.com", "ceo": "Jane Doe", "industry": "Widgets"}


@pytest.fixture
def company_id(client):
    response = client.post("/companies", json=ACME)
    assert response.status_code == 201
    return response.json()["id"]


def test_create_and_get_company(client, company_id):
    """Test a created company is returned with its fields."""
    response = client.get(f"/companies/{company_id}")

    assert response.status_code == 200
    assert response.json() == {"id": company_id, **ACME}


def test_create_company_missing_field(client):
    """Test request validation rejects an incomplete company."""
    response = client.post("/companies", json={"name": "Acme"})
    assert response.status_code == 422


def test_get_company_not_found(client):
    response = client.get("/companies/missing")
    assert response.status_code == 404


def test_add_application_to_company(client, company_id):
    """Test an application is added and listed for its company."""
    response = client.post(
        f"/companies/{company_id}/applications",
        json={"status": "applied", "date": "2026-01-01"},
    )
    assert response.status_code == 201
    application_id = response.json()["id"]

    response = client.get(f"/companies/{company_id}/applications")
    assert response.status_code == 200
    assert response.json() == [{
        "id": application_id,
        "company_id": company_id,
        "status": "applied",
        "date": "2026-01-01",
    }]


def test_add_application_to_unknown_company(client):
    """Test an application for a non-existent company is a conflict."""
    response = client.post(
        "/companies/missing/applications",
        json={"status": "applied", "date": "2026-01-01"},
    )
    assert response.status_code == 409


def test_delete_application_deletes_company(client, company_id):
    """Test deleting an application removes its company."""
    response = client.post(
        f"/companies/{company_id}/applications",
        json={"status": "applied", "date": "2026-01-01"},
    )
    application_id = response.json()["id"]

    response = client.delete(f"/applications/{application_id}")
    assert response.status_code == 204

    assert client.get(f"/applications/{application_id}").status_code == 404
    assert client.get(f"/companies/{company_id}").status_code == 404


def test_delete_application_not_found(client):
    response = client.delete("/applications/missing")
    assert response.status_code == 404


def test_delete_company_deletes_applications(client, company_id):
    """Test deleting a company removes its applications."""
    client.post(
        f"/companies/{company_id}/applications",
        json={"status": "applied", "date": "2026-01-01"},
    )

    response = client.delete(f"/companies/{company_id}")
    assert response.status_code == 204

    assert client.get("/applications").json() == []
    assert client.delete(f"/companies/{company_id}").status_code == 404


def test_track_application(client):
    """Test tracking creates the company and a ToDo application."""
    response = client.post("/applications", json={"company": ACME})

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "ToDo"
    assert data["label"] == "To Do"
    assert data["company"]["name"] == "Acme"
    assert data["date"]

    listed = client.get("/applications").json()
    assert [a["id"] for a in listed] == [data["id"]]
    assert listed[0]["company"]["id"] == data["company"]["id"]


def test_track_application_invalid_status(client):
    """Test an unknown status is rejected by validation."""
    response = client.post("/applications", json={"company": ACME, "status": "Ghosted"})
    assert response.status_code == 422


def test_advance_application(client):
    """Test advancing a tracked application moves it to the next status."""
    created = client.post("/applications", json={"company": ACME, "status": "Pending"}).json()

    response = client.post(f"/applications/{created['id']}/advance")

    assert response.status_code == 200
    assert response.json()["status"] == "Accepted"
    assert response.json()["label"] == "Accepted"


def test_advance_free_form_status(client, company_id):
    """Test a free-form status cannot be advanced."""
    application_id = client.post(
        f"/companies/{company_id}/applications",
        json={"status": "applied", "date": "2026-01-01"},
    ).json()["id"]

    response = client.post(f"/applications/{application_id}/advance")
    assert response.status_code == 422


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "connected"


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200


def test_free_form_status_label_shown_as_stored(client, company_id):
    """Test an application with a free-form status lists it as its own label."""
    application_id = client.post(
        f"/companies/{company_id}/applications",
        json={"status": "applied", "date": "2026-01-01"},
    ).json()["id"]

    response = client.get(f"/applications/{application_id}")

    assert response.status_code == 200
    assert response.json()["label"] == "applied"
