"""Working-calendar walk: timestamp helpers and work-day / working-hours rules."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone, tzinfo

from schedule_planner.models import SchedulePreferences

QUARTER_HOUR_MIN = 15


def to_utc(dt: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def localize(dt: datetime, tz: tzinfo) -> datetime:
    return to_utc(dt).astimezone(tz)


def add_minutes(dt: datetime, minutes: int) -> datetime:
    # shift the absolute instant, then return to the caller's zone
    shifted = to_utc(dt) + timedelta(minutes=minutes)
    return shifted.astimezone(dt.tzinfo or timezone.utc)


def round_up_to_quarter_hour(dt: datetime) -> datetime:
    """
    Round minutes up to the next multiple of 15 and drop seconds.

    Seconds are zeroed before rounding, so 09:00:30 stays 09:00.
    """
    minutes = math.ceil(dt.minute / QUARTER_HOUR_MIN) * QUARTER_HOUR_MIN
    top_of_hour = dt.replace(minute=0, second=0, microsecond=0)
    return add_minutes(top_of_hour, minutes)


class WorkingCalendar:
    """Work days and working hours of one set of preferences, in its timezone."""

    def __init__(self, preferences: SchedulePreferences):
        if not preferences.work_days:
            raise ValueError("work_days must contain at least one weekday")
        self.tz = preferences.tz
        self.work_start = preferences.working_hours.start
        self.work_end = preferences.working_hours.end
        self.work_days = frozenset(preferences.work_days)

    def is_work_day(self, day: date) -> bool:
        return day.isoweekday() in self.work_days

    def day_start(self, day: date) -> datetime:
        return datetime.combine(day, self.work_start, tzinfo=self.tz)

    def day_end(self, day: date) -> datetime:
        return datetime.combine(day, self.work_end, tzinfo=self.tz)

    def next_work_day_start(self, dt: datetime) -> datetime:
        """Start of the first work day strictly after dt's local date."""
        day = dt.date() + timedelta(days=1)
        # terminates within a week: work_days is never empty
        while not self.is_work_day(day):
            day += timedelta(days=1)
        return self.day_start(day)

    def opening_cursor(self, now: datetime) -> datetime:
        """First usable cursor at or after now, on a quarter-hour boundary."""
        cursor = round_up_to_quarter_hour(localize(now, self.tz))
        day = cursor.date()
        if self.is_work_day(day):
            if cursor < self.day_start(day):
                return self.day_start(day)
            if cursor < self.day_end(day):
                return cursor
        return self.next_work_day_start(cursor)

    def align(self, cursor: datetime, duration_min: int) -> datetime:
        """
        Start time for a task of duration_min given the current cursor.

        A task that would end at or after closing time moves whole to the next
        work day's start; it is never split. A task longer than the working
        window is still placed there, after a single roll.
        """
        day = cursor.date()
        if self.is_work_day(day) and cursor < self.day_start(day):
            cursor = self.day_start(day)
        if not self.is_work_day(day) or add_minutes(cursor, duration_min) >= self.day_end(day):
            return self.next_work_day_start(cursor)
        return cursor

    def within_hours(self, start: datetime, end: datetime) -> bool:
        day = start.date()
        return (
            self.is_work_day(day)
            and self.day_start(day) <= start
            and end <= self.day_end(day)
        )
