"""Pytest configuration and fixtures."""

import os
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from jinja2 import DictLoader
from sqlalchemy.orm import sessionmaker

from snippetbox import models  # noqa: F401
from snippetbox.config import normalize_database_url
from snippetbox.database import Base, create_db_engine, get_db
from snippetbox.main import app
from snippetbox.models.mixins import utcnow
from snippetbox.models.snippet import Snippet
from snippetbox.templates import TemplateRegistry, new_environment

# Use test database - PostgreSQL when DATABASE_URL is set, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = normalize_database_url(os.getenv("DATABASE_URL")).replace(
        "/snippetbox", "/snippetbox_test"
    )
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_db_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


def override_db(application, db):
    def override_get_db():
        try:
            yield db
        finally:
            pass

    application.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""
    override_db(app, db)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_expired_snippet(db):
    """Insert a snippet whose expiry is already in the past."""

    def _make(title="Expired", content="old news"):
        created = utcnow() - timedelta(days=8)
        snippet = Snippet(
            title=title,
            content=content,
            created=created,
            expires=created + timedelta(days=7),
        )
        db.add(snippet)
        db.commit()
        return snippet.id

    return _make


PAGES = {
    "base.html": "{% block main %}{% endblock %}",
    "pages/home.html": "{% extends 'base.html' %}{% block main %}home{% endblock %}",
    "pages/view.html": "{% extends 'base.html' %}{% block main %}{{ snippet.title }}{% endblock %}",
    "pages/create.html": "{% extends 'base.html' %}{% block main %}create{% endblock %}",
    "pages/signup.html": "{% extends 'base.html' %}{% block main %}signup{% endblock %}",
    "pages/login.html": "{% extends 'base.html' %}{% block main %}login{% endblock %}",
}


def registry_from_dict(overrides=None, drop=()):
    """Build a template registry from in-memory page sources."""
    sources = {**PAGES, **(overrides or {})}
    env = new_environment(DictLoader(sources))
    return TemplateRegistry(
        {
            name.removeprefix("pages/"): env.get_template(name)
            for name in sources
            if name.startswith("pages/") and name.removeprefix("pages/") not in drop
        }
    )


@pytest.fixture
def make_registry():
    """Factory for in-memory template registries."""
    return registry_from_dict


@pytest.fixture
def make_client(db):
    """Build a test client for a custom application, sharing the test session."""
    apps = []

    def _make(application):
        override_db(application, db)
        apps.append(application)
        return TestClient(application)

    yield _make
    for application in apps:
        application.dependency_overrides.clear()
