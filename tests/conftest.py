import os

# Tables and data are managed by the fixtures below, not by the app lifespan
os.environ["CREATE_SCHEMA"] = "false"
os.environ["SEED_DATA"] = "false"
os.environ["RATE_LIMIT"] = "1000/minute"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from recipe_app.main import app
from recipe_app.db import Base, get_db
from recipe_app import bootstrap
from recipe_app.repositories import RecipeRepository

# --- Test Database Setup ---

SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

# Note: check_same_thread is needed for SQLite.
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool  # Share the in-memory database across sessions
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """Test client with DB override."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    """Direct database session for setup."""
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def seeded(db_session):
    """Bootstrap data loaded; returns recipe ids by description."""
    bootstrap.seed(db_session)
    return {r.description: r.id for r in RecipeRepository(db_session).find_all()}
