import os

# Settings are read once and cached; configure them before importing the app.
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.core.security import create_access_token
from app.database import get_session
from app.main import app
from app.models.product import Product
from app.repositories.fallback_catalog import FallbackProductRepository

DEFAULT_PASSWORD = "password123"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def products(session):
    """The static catalog plus one inactive and one nearly sold-out product."""
    rows = [Product(**entry) for entry in FallbackProductRepository().entries()]
    rows.append(
        Product(id=4, name="Retired Webcam", price=80.0, sku="CAM-OLD", stock=5, is_active=False)
    )
    rows.append(
        Product(id=5, name="USB Hub", price=25.5, sku="HUB-USB-4", stock=3, category="Accessories")
    )
    for row in rows:
        session.add(row)
    session.commit()
    return {row.id: row for row in rows}


@pytest.fixture
def client(session):
    def _get_session():
        yield session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def down_client():
    """Client whose database cannot be opened (every query raises OperationalError)."""
    broken = create_engine("sqlite:////nonexistent-dir/for-tests/shop.db")

    def _get_session():
        with Session(broken) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
    broken.dispose()


def register(client, email="john.doe@example.com", password=DEFAULT_PASSWORD, **extra):
    body = {
        "firstName": "John",
        "lastName": "Doe",
        "email": email,
        "password": password,
        **extra,
    }
    return client.post("/api/users/register", json=body)


def login(client, email="john.doe@example.com", password=DEFAULT_PASSWORD):
    return client.post("/api/users/login", json={"email": email, "password": password})


@pytest.fixture
def auth_headers(client):
    assert register(client).status_code == 201
    token = login(client).json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def claims_headers():
    """A validly signed token for a user id that was never stored."""
    token = create_access_token(uuid.uuid4(), "ghost@example.com")
    return {"Authorization": f"Bearer {token}"}
