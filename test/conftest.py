from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_clock, get_preferences_store
from schedule_planner.models import Task
from storage.preferences_store import PreferencesStore

# 2026-01-05 is a Monday
MONDAY_8AM = datetime(2026, 1, 5, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def monday_8am() -> datetime:
    return MONDAY_8AM


@pytest.fixture
def task_factory():
    def _make(title: str, **kwargs) -> Task:
        return Task(title=title, **kwargs)
    return _make


@pytest.fixture
def prefs_store(tmp_path) -> PreferencesStore:
    return PreferencesStore(path=str(tmp_path / "prefs.json"))


@pytest.fixture
def client(prefs_store):
    from api.main import app

    app.dependency_overrides[get_preferences_store] = lambda: prefs_store
    app.dependency_overrides[get_clock] = lambda: (lambda: MONDAY_8AM)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
