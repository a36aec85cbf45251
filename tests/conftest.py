# tests/conftest.py
import os

# point the app at an in-memory database before anything imports the settings
os.environ["DATABASE_URI"] = "sqlite://"
os.environ["CREATE_TABLES"] = "true"

import pytest
from fastapi.testclient import TestClient

from sporting.db.base import Base, SessionLocal, engine
from sporting.infrastructure.persistence import TeamRepository
from sporting.main import app
from sporting.models import team  # noqa: F401
from sporting.services import TeamService


@pytest.fixture(autouse=True)
def reset_tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def team_repository(db_session):
    return TeamRepository(db_session)


@pytest.fixture
def team_service(team_repository):
    return TeamService(team_repository)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
