import os

# Force the in-memory SQLite engine before the app modules are imported
os.environ.setdefault("PYTEST_RUNNING", "1")

import pytest
from fastapi.testclient import TestClient

from sitecms.db.database import SessionLocal, engine
from sitecms.db import models
from sitecms.api.main import app


@pytest.fixture(scope="session", autouse=True)
def _schema():
    models.Base.metadata.create_all(bind=engine)
    yield
    models.Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def _clean_tables(_schema):
    yield
    with engine.begin() as conn:
        for table in reversed(models.Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# Backwards compatibility with tests expecting a 'db' fixture name
@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def client():
    return TestClient(app)
