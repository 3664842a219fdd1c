import os

os.environ["ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401  (registers tables on Base.metadata)
from app.auth.tokens import create_access_token
from app.db import Base, get_db
from app.main import create_app

pytest_plugins = [
    "tests.fixtures.user_fixtures",
    "tests.fixtures.snippet_fixtures",
]


@pytest.fixture(scope="session")
def engine():
    """In-memory SQLite engine shared by the whole run."""
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db(engine):
    """Session for one test; all rows are removed afterwards."""
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        with engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                conn.execute(table.delete())


@pytest.fixture
def test_app(db):
    """App with the db dependency bound to the test session."""
    application = create_app(testing=True)

    def override_get_db():
        try:
            yield db
        finally:
            pass

    application.dependency_overrides[get_db] = override_get_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Build Authorization headers for a user."""

    def _headers(user):
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _headers


@pytest.fixture
def anonymous_client(test_app):
    with TestClient(test_app) as c:
        yield c


@pytest.fixture
def client(test_app, setup_user, auth_headers):
    """Client authenticated as setup_user."""
    with TestClient(test_app) as c:
        c.headers.update(auth_headers(setup_user))
        yield c
