from __future__ import annotations

import json
import logging
from datetime import time
from pathlib import Path

from pydantic import ValidationError

from schedule_planner.models import SchedulePreferences

logger = logging.getLogger(__name__)


def _time_to_str(t: time) -> str:
    return t.strftime("%H:%M")


class PreferencesStore:
    """Server-wide default scheduling preferences, kept as a JSON file."""

    def __init__(self, path: str = "data/preferences.json"):
        self.path = Path(path)

    def load(self) -> SchedulePreferences:
        if not self.path.exists():
            return SchedulePreferences()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return SchedulePreferences.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return SchedulePreferences()

    def save(self, prefs: SchedulePreferences) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        data = prefs.model_dump(by_alias=True)

        # time objects as HH:MM for JSON
        hours = data["workingHours"]
        hours["start"] = _time_to_str(hours["start"])
        hours["end"] = _time_to_str(hours["end"])
        data["workDays"] = list(data["workDays"])

        self.path.write_text(
            json.dumps(data, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
