"""Pytest configuration and fixtures."""

import os

# Point the app at the test database before anything imports the settings
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from recipebox.database import Base, SessionLocal, engine, get_db  # noqa: E402
from recipebox.main import app  # noqa: E402
from recipebox.models.user import User  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = SessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def app_with_db(db):
    """The app with its database dependency bound to the test session."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(app_with_db):
    """Create an anonymous test client."""
    with TestClient(app_with_db) as test_client:
        yield test_client


def register(client: TestClient, name: str, email: str, password: str = "testpass123") -> dict:
    """Register through the API; the client keeps the session cookie."""
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()["user"]


@pytest.fixture
def auth_client(client):
    """A client logged in as a freshly registered user."""
    client.user = register(client, "Test User", "test@example.com")
    return client


@pytest.fixture
def other_client(app_with_db):
    """A second, independent client logged in as a different user."""
    with TestClient(app_with_db) as test_client:
        test_client.user = register(test_client, "Other User", "other@example.com")
        yield test_client


@pytest.fixture
def user(db):
    """A user created directly in the database, for service-level tests."""
    test_user = User(name="Service User", email="service@example.com", password_hash="fake")
    db.add(test_user)
    db.commit()
    db.refresh(test_user)
    return test_user


@pytest.fixture
def other_user(db):
    """A second user created directly in the database."""
    test_user = User(name="Other Service User", email="other-service@example.com", password_hash="x")
    db.add(test_user)
    db.commit()
    db.refresh(test_user)
    return test_user
