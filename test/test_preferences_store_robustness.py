import json
from datetime import time
from storage.preferences_store import PreferencesStore
from schedule_planner.models import SchedulePreferences, WorkingHours

def test_preferences_roundtrip(tmp_path):
    store = PreferencesStore(path=str(tmp_path / "prefs.json"))
    prefs = SchedulePreferences(
        working_hours=WorkingHours(start=time(8, 0), end=time(16, 30)),
        work_days=[1, 2, 3, 4],
        timezone="Europe/Bratislava",
    )
    store.save(prefs)
    loaded = store.load()
    assert loaded == prefs

def test_preferences_saved_as_hh_mm(tmp_path):
    path = tmp_path / "nested" / "prefs.json"
    store = PreferencesStore(path=str(path))
    store.save(SchedulePreferences())
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["workingHours"] == {"start": "09:00", "end": "17:00"}
    assert data["workDays"] == [1, 2, 3, 4, 5]

def test_preferences_missing_file(tmp_path):
    store = PreferencesStore(path=str(tmp_path / "absent.json"))
    assert store.load() == SchedulePreferences()

def test_preferences_corrupted_file(tmp_path):
    p = tmp_path / "prefs.json"
    p.write_text("{not valid json")
    store = PreferencesStore(path=str(p))
    prefs = store.load()
    assert isinstance(prefs, SchedulePreferences)

def test_preferences_invalid_content_falls_back(tmp_path):
    p = tmp_path / "prefs.json"
    p.write_text(json.dumps({"workDays": []}))
    store = PreferencesStore(path=str(p))
    assert store.load() == SchedulePreferences()

def test_preferences_offset_working_hours_fall_back(tmp_path):
    p = tmp_path / "prefs.json"
    p.write_text(json.dumps({"workingHours": {"start": "09:00Z", "end": "17:00"}}))
    store = PreferencesStore(path=str(p))
    assert store.load() == SchedulePreferences()
