"""Shared pytest fixtures for HabitQuest tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from habitquest.database.db import configure_engine, init_db
from habitquest.database.kv import KeyValueStore
from habitquest.habits.progress import ProgressEngine
from habitquest.habits.repository import HabitRepository, INITIALIZED_KEY

from helpers import TODAY


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def store():
    return KeyValueStore()


@pytest.fixture
def fresh_repo(store):
    """Repository over an empty store (first run, will seed defaults)."""
    return HabitRepository(store, clock=lambda: TODAY)


@pytest.fixture
def repo(store):
    """Repository already past first-run seeding, with no habits."""
    store.set(INITIALIZED_KEY, "true")
    return HabitRepository(store, clock=lambda: TODAY)


@pytest.fixture
def engine(repo):
    """ProgressEngine pinned to ``TODAY``."""
    return ProgressEngine(repo, clock=lambda: TODAY)
