from datetime import datetime
from typing import List

from schedule_planner.models import Placement, ScheduleMetadata

SCHEDULING_ALGORITHM = "priority_and_duration_based"


def summarize(placements: List[Placement], generated_at: datetime) -> ScheduleMetadata:
    """Totals and average confidence over one planning result."""
    average = None
    if placements:
        average = sum(p.confidence for p in placements) / len(placements)
    return ScheduleMetadata(
        total_tasks=len(placements),
        total_duration=sum(p.task.duration_min for p in placements),
        average_confidence=average,
        scheduling_algorithm=SCHEDULING_ALGORITHM,
        generated_at=generated_at,
    )
