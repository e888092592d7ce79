import os

# select the test database before the app builds its engine
os.environ["APP_ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from app.main import app
from app.db.database import get_session, create_tables, SQLITE_TEST_DB

# test database configuration
test_engine = create_engine(SQLITE_TEST_DB, connect_args={"check_same_thread": False})
TestSessionLocal = sessionmaker(bind=test_engine)

TABLES = ["reports", "replies", "reactions", "posts"]


def drop_tables():
    with test_engine.connect() as conn:
        for table in TABLES:
            conn.execute(text(f"DROP TABLE IF EXISTS {table}"))
        conn.commit()


@pytest.fixture(autouse=True)
def clean_db():
    """Rebuild the test database around every test"""
    drop_tables()
    create_tables(test_engine)
    yield
    drop_tables()


@pytest.fixture
def session(clean_db):
    """A session on the test database"""
    db_session = TestSessionLocal()
    yield db_session
    db_session.close()


@pytest.fixture
def client(clean_db):
    """Test client bound to the test database"""
    test_session = TestSessionLocal()

    def override_get_session():
        try:
            yield test_session
        finally:
            test_session.close()

    app.dependency_overrides[get_session] = override_get_session

    client = TestClient(app)
    yield client

    test_session.close()
    app.dependency_overrides.clear()


@pytest.fixture
def test_post(client):
    """Create a post and return it"""
    response = client.post("/api/posts", json={"text": "I never liked the office plant", "mood": "sad"})
    return response.json()
