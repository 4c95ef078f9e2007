import os

# Must be set before taskboard.core.database builds its engine at import
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient

from taskboard.core.clock import utc_now
from taskboard.core.database import SessionLocal, engine
from taskboard.models import Base
from taskboard.repositories import UnitOfWork

from .fakes import FakeAPIClient


@pytest.fixture(autouse=True)
def reset_database():
    """Every test starts from empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def uow(db) -> UnitOfWork:
    return UnitOfWork(db)


@pytest.fixture()
def client():
    from taskboard.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def now():
    """Reference instant captured once per test."""
    return utc_now().replace(microsecond=0)


@pytest.fixture()
def fake_api() -> FakeAPIClient:
    return FakeAPIClient()
