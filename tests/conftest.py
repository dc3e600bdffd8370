import os

# Settings requires a DATABASE_URL at import time; tests swap in their own engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from personnel_api.main import app
from personnel_api.db.base import Base
from personnel_api.db.repository import Repository
from personnel_api.db.session import get_repository


@pytest.fixture()
def engine():
    """
    Fresh in-memory SQLite database per test. StaticPool keeps the single
    connection alive so every checkout sees the same tables, including from
    TestClient's worker threads.
    """
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    try:
        yield eng
    finally:
        Base.metadata.drop_all(bind=eng)
        eng.dispose()


@pytest.fixture()
def repo(engine):
    return Repository(engine)


@pytest.fixture(autouse=True)
def override_get_repository(repo):
    app.dependency_overrides[get_repository] = lambda: repo
    yield
    app.dependency_overrides.clear()
