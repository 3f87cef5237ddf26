from datetime import datetime

from schedule_planner.models import Task
from scheduling.calendar import to_utc

BASELINE_CONFIDENCE = 0.8
OVERDUE_CONFIDENCE = 0.4


def score_confidence(task: Task, start: datetime) -> float:
    """Baseline unless the task's due date has already passed at start."""
    if task.due_date is not None and to_utc(start) > to_utc(task.due_date):
        return OVERDUE_CONFIDENCE
    return BASELINE_CONFIDENCE


def is_low_confidence(confidence: float) -> bool:
    return confidence < BASELINE_CONFIDENCE
