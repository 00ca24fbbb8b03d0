import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.database import Database, create_database_tables
from app.main import create_app


@pytest.fixture()
def test_settings():
    return Settings(_env_file=None, DATABASE_URL="sqlite://", EXPOSE_ERROR_DETAILS=False)


@pytest.fixture()
def database():
    # One in-memory SQLite connection shared across threads, like the single MySQL connection
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    create_database_tables(engine)
    db = Database(engine)
    yield db
    db.dispose()


@pytest.fixture()
def broken_database():
    """A database without the students table: every query fails."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    db = Database(engine)
    yield db
    db.dispose()


@pytest.fixture()
def client(test_settings, database):
    return TestClient(create_app(settings=test_settings, database=database))


@pytest.fixture()
def broken_client(test_settings, broken_database):
    return TestClient(create_app(settings=test_settings, database=broken_database))


@pytest.fixture()
def ali(client):
    response = client.post("/students", json={"name": "Ali", "age": 20, "grade": "A"})
    assert response.status_code == 201
    return response.json()["studentId"]
