import pytest
from pydantic import ValidationError
from schedule_planner.models import Task, SchedulePreferences

def test_task_invalid_priority():
    with pytest.raises(ValidationError):
        Task(title="Bad", priority="critical")

def test_task_empty_title():
    with pytest.raises(ValidationError):
        Task(title="")

def test_task_blank_title():
    with pytest.raises(ValidationError):
        Task(title="   ")

def test_task_duration_wrong_shape():
    with pytest.raises(ValidationError):
        Task.model_validate({"title": "X", "estimatedDuration": "an hour"})

def test_empty_work_days():
    with pytest.raises(ValidationError):
        SchedulePreferences(work_days=[])

def test_work_day_out_of_range():
    with pytest.raises(ValidationError):
        SchedulePreferences(work_days=[1, 8])

def test_work_day_not_integer():
    with pytest.raises(ValidationError):
        SchedulePreferences.model_validate({"workDays": ["monday"]})

def test_unknown_timezone():
    with pytest.raises(ValidationError):
        SchedulePreferences(timezone="Mars/Olympus_Mons")

def test_negative_break():
    with pytest.raises(ValidationError):
        SchedulePreferences(break_duration_min=-1)

def test_working_hours_end_before_start():
    with pytest.raises(ValidationError):
        SchedulePreferences.model_validate({"workingHours": {"start": "17:00", "end": "09:00"}})

def test_preferences_are_immutable():
    p = SchedulePreferences()
    with pytest.raises(ValidationError):
        p.break_duration_min = 0

def test_task_duration_bool_rejected():
    with pytest.raises(ValidationError):
        Task.model_validate({"title": "X", "estimatedDuration": True})

def test_task_duration_numeric_string_rejected():
    with pytest.raises(ValidationError):
        Task.model_validate({"title": "X", "estimatedDuration": "60"})

def test_working_hours_with_utc_offset_rejected():
    with pytest.raises(ValidationError):
        SchedulePreferences.model_validate({"workingHours": {"start": "09:00Z"}})

def test_working_hours_offset_in_override_rejected():
    with pytest.raises(ValidationError):
        SchedulePreferences().with_overrides({"workingHours": {"end": "17:00+02:00"}})
