import pytest
from fastapi.testclient import TestClient

from jobboard.core.config import Settings
from jobboard.factory import create_app

ADMIN = {"username": "alice", "email": "alice@x.com", "password": "secret1"}

JOB = {
    "title": "Engineer",
    "company": "Acme",
    "location": "Remote",
    "type": "full-time",
    "description": "Build things",
}

APPLICATION = {
    "firstName": "Bob",
    "lastName": "Builder",
    "email": "bob@example.com",
    "phone": "555-0100",
    "coverLetter": "I would love to build things.",
}


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL="sqlite://",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        BCRYPT_ROUNDS=4,
        SESSION_SECRET="test-secret",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # The context manager runs the lifespan, which creates the database
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    response = client.post("/api/auth/signup", json=ADMIN)
    assert response.status_code == 200, response.text
    return client


@pytest.fixture
def db(app, client):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def create_job(admin_client):
    def _create(**overrides):
        response = admin_client.post("/api/admin/jobs", json={**JOB, **overrides})
        assert response.status_code == 200, response.text
        return response.json()
    return _create
