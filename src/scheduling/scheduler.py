from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import ValidationError

from schedule_planner.models import Placement, SchedulePreferences, Task
from scheduling.calendar import WorkingCalendar, add_minutes
from scheduling.confidence import score_confidence
from scheduling.ordering import order_tasks

logger = logging.getLogger(__name__)

PreferencesInput = Union[SchedulePreferences, dict, None]


class InvalidScheduleInput(ValueError):
    """Tasks, preferences or the reference time have the wrong shape."""


class PlanningError(RuntimeError):
    """Planning failed for a reason other than bad input."""


def _coerce_preferences(preferences: PreferencesInput) -> SchedulePreferences:
    if preferences is None:
        return SchedulePreferences()
    if isinstance(preferences, SchedulePreferences):
        return preferences
    if isinstance(preferences, dict):
        try:
            return SchedulePreferences.model_validate(preferences)
        except ValidationError as e:
            raise InvalidScheduleInput(f"invalid preferences: {e}") from e
    raise InvalidScheduleInput("preferences must be an object")


def _coerce_tasks(tasks: Any) -> List[Task]:
    if not isinstance(tasks, list):
        raise InvalidScheduleInput("tasks must be a list")
    out = []
    for i, t in enumerate(tasks):
        if isinstance(t, Task):
            out.append(t)
            continue
        try:
            out.append(Task.model_validate(t))
        except ValidationError as e:
            raise InvalidScheduleInput(f"invalid task at index {i}: {e}") from e
    return out


class Scheduler:
    """
    Serial forward sweep over the working calendar.

    One cursor walks from `now`; each task (in priority order) gets the next
    slot that fits inside working hours, followed by a break.
    """

    def __init__(self, preferences: PreferencesInput = None):
        self.preferences = _coerce_preferences(preferences)
        self.calendar = WorkingCalendar(self.preferences)

    def schedule(self, tasks: list, now: datetime) -> List[Placement]:
        if not isinstance(now, datetime):
            raise InvalidScheduleInput("now must be a datetime")
        validated = _coerce_tasks(tasks)
        if not validated:
            return []

        break_min = self.preferences.break_duration_min
        placements: List[Placement] = []
        try:
            cursor = self.calendar.opening_cursor(now)
            for task in order_tasks(validated):
                duration = task.duration_min
                start = self.calendar.align(cursor, duration)
                end = add_minutes(start, duration)

                if not self.calendar.within_hours(start, end):
                    logger.warning(
                        f"Task '{task.title}' ({duration} min) does not fit the working window; "
                        f"placed at {start.isoformat()} anyway"
                    )

                placements.append(
                    Placement(
                        task=task,
                        scheduled_start=start,
                        scheduled_end=end,
                        confidence=score_confidence(task, start),
                    )
                )
                # the break is not checked against closing time here;
                # the next task's alignment handles the roll-over
                cursor = add_minutes(end, break_min)
        except OverflowError as e:
            raise PlanningError(f"timestamp out of range while planning: {e}") from e

        logger.info(
            f"Planned {len(placements)} tasks from {placements[0].scheduled_start.isoformat()} "
            f"to {placements[-1].scheduled_end.isoformat()}"
        )
        return placements


def plan(
    tasks: list,
    preferences: PreferencesInput,
    now: datetime,
) -> List[Placement]:
    """Place every task in a conflict-free, time-ordered schedule starting at now."""
    return Scheduler(preferences).schedule(tasks, now)
