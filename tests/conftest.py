"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database (one connection via
StaticPool so the app and the test see the same data), seeded with the dev
catalog plus a second, non-admin user. The app's `get_db` and `get_identity`
dependencies are overridden so no real database or credentials are needed.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from gamestore.api.deps import get_identity
from gamestore.data.database import Base, get_db
from gamestore.data.models import UserModel
from gamestore.data.seed import seed
from gamestore.domain.identity import Identity
from gamestore.main import app

ADMIN = Identity(user_id=1, role="ADMIN")
CUSTOMER = Identity(user_id=2, role="CLIENTE")


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    seed(factory)
    db = factory()
    db.add(UserModel(id=2, nombre="Cliente", correo="cliente@gamestore.local", alias="cliente"))
    db.commit()
    db.close()

    yield factory

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def caller():
    """Mutable holder for the identity injected into requests; None means anonymous."""
    return {"identity": ADMIN}


@pytest.fixture
def test_client(session_factory, caller):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity] = lambda: caller["identity"]

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
