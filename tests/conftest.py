import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.core.rate_limiter import rate_limiter
from jobboard.core.security import generate_id
from jobboard.database import Base, get_db
from jobboard.dependencies import AuthContext, get_current_admin, get_current_user
from jobboard.main import app
from jobboard.models import Job, JobCategory, User


@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    rate_limiter.reset()
    yield


@pytest.fixture
def stub_user() -> AuthContext:
    return AuthContext(id="user-1", email="user@example.com", name="User", is_admin=False)


@pytest.fixture
def admin_user() -> AuthContext:
    return AuthContext(id="admin-1", email="admin@example.com", name="Admin", is_admin=True)


@pytest.fixture
def client(stub_user: AuthContext):
    def _db_override():
        yield object()

    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_user] = lambda: stub_user
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(admin_user: AuthContext):
    def _db_override():
        yield object()

    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_user] = lambda: admin_user
    app.dependency_overrides[get_current_admin] = lambda: admin_user
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anon_client():
    """No auth override: the real token gate runs."""

    def _db_override():
        yield object()

    app.dependency_overrides[get_db] = _db_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def db_client(db_session):
    """Real routing, real auth gate, in-memory database."""

    def _db_override():
        yield db_session

    app.dependency_overrides[get_db] = _db_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    def _make(email="person@example.com", name="Person", is_admin=False, password_hash=None):
        user = User(id=generate_id(), email=email, name=name, is_admin=is_admin, password_hash=password_hash)
        db_session.add(user)
        db_session.commit()
        return user

    return _make


@pytest.fixture
def make_job(db_session):
    """Insert jobs with strictly increasing created_at so ordering is deterministic."""
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    tick = count()

    def _make(owner, title="Engineer", salary="$50,000 - $60,000", is_approved=True, **fields):
        job = Job(
            id=generate_id(),
            user_id=owner.id,
            title=title,
            company=fields.pop("company", "ACME"),
            description=fields.pop("description", "Build things"),
            location=fields.pop("location", "Remote"),
            category=fields.pop("category", JobCategory.TECH),
            salary=salary,
            is_approved=is_approved,
            created_at=fields.pop("created_at", base + timedelta(minutes=next(tick))),
        )
        db_session.add(job)
        db_session.commit()
        return job

    return _make
