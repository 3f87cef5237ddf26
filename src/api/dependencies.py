import os
from datetime import datetime, timezone
from typing import Callable

from storage.preferences_store import PreferencesStore

# Configuration
PREFERENCES_PATH = os.getenv("PLANNER_PREFERENCES_PATH", "data/preferences.json")

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def get_clock() -> Clock:
    return _utc_now


def get_preferences_store() -> PreferencesStore:
    return PreferencesStore(path=PREFERENCES_PATH)
