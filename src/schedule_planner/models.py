from __future__ import annotations

from datetime import datetime, time
from typing import Any, Literal, Optional, List, Tuple, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator, model_validator

Priority = Literal["urgent", "high", "medium", "low"]

DEFAULT_DURATION_MIN = 60


class Task(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[Union[str, int]] = None
    title: str = Field(..., min_length=1)

    # missing or non-positive durations fall back to DEFAULT_DURATION_MIN
    estimated_duration: Optional[StrictInt] = Field(None, alias="estimatedDuration")
    priority: Priority = "medium"

    due_date: Optional[datetime] = Field(None, alias="dueDate")
    type: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("title must not be blank")
        return v2

    @field_validator("priority", mode="before")
    @classmethod
    def priority_default(cls, v: Any) -> Any:
        return "medium" if v is None else v

    @property
    def duration_min(self) -> int:
        if self.estimated_duration is None or self.estimated_duration <= 0:
            return DEFAULT_DURATION_MIN
        return self.estimated_duration


class WorkingHours(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: time = Field(default_factory=lambda: time(9, 0))
    end: time = Field(default_factory=lambda: time(17, 0))

    @field_validator("start", "end")
    @classmethod
    def local_time_only(cls, v: time) -> time:
        # read in the preferences timezone; an offset here would be ambiguous
        if v.tzinfo is not None:
            raise ValueError("working hours must not carry a UTC offset")
        return v

    @model_validator(mode="after")
    def end_after_start(self) -> "WorkingHours":
        if self.end <= self.start:
            raise ValueError("working hours end must be after start")
        return self


class SchedulePreferences(BaseModel):
    """
    Fully defaulted scheduling preferences. Callers hand in partial dicts;
    every missing field takes its default here, once, before planning starts.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    working_hours: WorkingHours = Field(default_factory=WorkingHours, alias="workingHours")
    break_duration_min: int = Field(15, ge=0, alias="breakDuration")

    # accepted and stored, but the planner never splits tasks into sessions
    focus_session_length_min: int = Field(90, gt=0, alias="focusSessionLength")

    timezone: str = "UTC"

    # ISO weekdays, Monday=1 ... Sunday=7
    work_days: Tuple[int, ...] = Field((1, 2, 3, 4, 5), alias="workDays")

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {v!r}") from e
        return v

    @field_validator("work_days", mode="before")
    @classmethod
    def normalize_work_days(cls, v: Any) -> Any:
        if not isinstance(v, (list, tuple, set, frozenset)):
            return v
        days = set()
        for d in v:
            if isinstance(d, bool) or not isinstance(d, int):
                raise ValueError(f"work day must be an integer weekday, got {d!r}")
            if not 0 <= d <= 7:
                raise ValueError(f"work day out of range: {d}")
            # 0 is Sunday for JavaScript-style clients
            days.add(7 if d == 0 else d)
        if not days:
            raise ValueError("work_days must contain at least one weekday")
        return tuple(sorted(days))

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def with_overrides(self, overrides: Optional[dict]) -> "SchedulePreferences":
        """Return a new, re-validated instance with a partial dict merged on top."""
        if not overrides:
            return self
        data = self.model_dump(by_alias=True)
        for key, value in overrides.items():
            key = _ALIASES.get(key, key)
            if key == "workingHours" and isinstance(value, dict):
                data[key] = {**data[key], **value}
            else:
                data[key] = value
        return SchedulePreferences.model_validate(data)


_ALIASES = {
    "working_hours": "workingHours",
    "break_duration_min": "breakDuration",
    "focus_session_length_min": "focusSessionLength",
    "work_days": "workDays",
}


class Placement(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    task: Task
    scheduled_start: datetime = Field(..., alias="scheduledStart")
    scheduled_end: datetime = Field(..., alias="scheduledEnd")
    confidence: float = Field(..., ge=0.0, le=1.0)


class ScheduleMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_tasks: int = Field(..., alias="totalTasks")
    total_duration: int = Field(..., alias="totalDuration")
    # None when nothing was scheduled
    average_confidence: Optional[float] = Field(None, alias="averageConfidence")
    scheduling_algorithm: str = Field(..., alias="schedulingAlgorithm")
    generated_at: datetime = Field(..., alias="generatedAt")


class ScheduleResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schedule: List[Placement] = Field(default_factory=list)
    metadata: ScheduleMetadata
