# =============================================================================
# File: tests/conftest.py
# Purpose: Fresh app + temporary SQLite file per test.
# =============================================================================
from contextlib import contextmanager

import pytest
from flask import template_rendered

from forum import create_app

TEST_SECRET = "test-secret"


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'forum.sqlite'}"


@pytest.fixture
def app(db_url):
    app = create_app({"SECRET_KEY": TEST_SECRET, "DATABASE_URL": db_url, "TESTING": True})
    yield app
    app.extensions["forum.engine"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@contextmanager
def captured_templates(app):
    """Record (template, context) for every template rendered by app."""
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template, context))

    template_rendered.connect(record, app)
    try:
        yield recorded
    finally:
        template_rendered.disconnect(record, app)


def register(client, username="alice", password="secret123"):
    rv = client.post("/user/register", data={"username": username, "password": password})
    assert rv.status_code == 302
    return rv


def login(client, username="alice", password="secret123"):
    rv = client.post("/user/login", data={"username": username, "password": password})
    assert rv.status_code == 302
    return rv
