"""
Shared pytest fixtures: in-memory database and patched admin configuration.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from whitelist_admin.core import config
from whitelist_admin.core.database import Base, get_db
from whitelist_admin.core.security import hash_password
from whitelist_admin.main import app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct-horse"
JWT_SECRET = "test-signing-secret-with-enough-length"


@pytest.fixture(scope="session")
def admin_password_hash():
    return hash_password(ADMIN_PASSWORD)


@pytest.fixture(autouse=True)
def admin_config(monkeypatch, admin_password_hash):
    monkeypatch.setattr(config, "ADMIN_USERNAME", ADMIN_USERNAME)
    monkeypatch.setattr(config, "ADMIN_PASSWORD_HASH", admin_password_hash)
    monkeypatch.setattr(config, "JWT_SECRET", JWT_SECRET)


@pytest.fixture
def session_factory():
    import whitelist_admin.models  # noqa: F401

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
    )
    yield factory
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    resp = client.post(
        "/admin/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['data']['token']}"}
