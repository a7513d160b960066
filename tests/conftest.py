# tests/conftest.py
from __future__ import annotations

from datetime import datetime

import pytest

from eventnest.core import create_app
from eventnest.services import DataStore


@pytest.fixture
def app():
    """Testing app with the four demo users loaded."""
    application = create_app('testing')
    application.store.seed_demo_data()
    return application


@pytest.fixture
def store(app):
    return app.store


@pytest.fixture
def empty_store():
    return DataStore()


@pytest.fixture
def alice(store):
    return store.find_user_by_username('alice')


@pytest.fixture
def at():
    """Shorthand for datetimes on a fixed test day: at(9, 30)."""
    def _at(hour, minute=0, day=15):
        return datetime(2025, 3, day, hour, minute)
    return _at
