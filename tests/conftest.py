"""
Point the app at a private in-memory SQLite database before anything
imports gymtracker.db, and give every test empty tables.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from gymtracker.db import Base, SessionLocal, engine
from gymtracker import models  # noqa: F401  # registers tables


@pytest.fixture(autouse=True)
def fresh_tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client():
    from gymtracker.main import app
    return TestClient(app)
