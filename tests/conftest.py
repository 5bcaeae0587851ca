"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from localpros.main import app
from localpros.core.config import settings
from localpros.core.security import issue_session_token
from localpros.db.base import Base, get_db
from localpros.db.models.category import Category
from localpros.db.models.neighborhood import Neighborhood

OWNER_OPEN_ID = "owner-open-id"


def auth_headers(open_id: str, **claims) -> dict:
    return {"Authorization": f"Bearer {issue_session_token(open_id, **claims)}"}


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Pin the settings the tests depend on and keep notifications local."""
    monkeypatch.setattr(settings, "owner_open_id", OWNER_OPEN_ID)
    monkeypatch.setattr(settings, "notification_url", "")
    return settings


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seed(db_session):
    """One category and one neighborhood, as a fresh install would have."""
    category = Category(name="Eletricista", description="Electrical repairs", synonyms=["eletrica"])
    other_category = Category(name="Encanador")
    neighborhood = Neighborhood(name="Centro")
    other_neighborhood = Neighborhood(name="Aninga")
    db_session.add_all([category, other_category, neighborhood, other_neighborhood])
    db_session.commit()
    return {
        "category_id": category.id,
        "other_category_id": other_category.id,
        "neighborhood_id": neighborhood.id,
        "other_neighborhood_id": other_neighborhood.id,
    }


@pytest.fixture
def client(session_factory):
    """FastAPI test client bound to the in-memory database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def actor(client):
    """Return auth headers for an actor, optionally switching its profile type first."""

    def _actor(open_id: str, profile_type: str = None) -> dict:
        headers = auth_headers(open_id, name=f"User {open_id}")
        if profile_type:
            response = client.put("/auth/profile", json={"user_type": profile_type}, headers=headers)
            assert response.status_code == 200, response.text
        return headers

    return _actor


@pytest.fixture
def admin_headers(actor) -> dict:
    return actor(OWNER_OPEN_ID, "admin")
