from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from schedule_planner.models import Task
from scheduling.calendar import to_utc

PRIORITY_RANK = {"urgent": 4, "high": 3, "medium": 2, "low": 1}

SortKey = Tuple[int, int, Optional[datetime], int]


def priority_rank(task: Task) -> int:
    return PRIORITY_RANK[task.priority]


def ordering_key(index: int, task: Task) -> SortKey:
    """
    Total order over tasks:
      1. priority rank, highest first
      2. tasks with a due date before tasks without one
      3. earlier due date first
      4. original input position
    """
    if task.due_date is None:
        return (-priority_rank(task), 1, None, index)
    return (-priority_rank(task), 0, to_utc(task.due_date), index)


def order_tasks(tasks: Iterable[Task]) -> List[Task]:
    indexed = sorted(enumerate(tasks), key=lambda pair: ordering_key(*pair))
    return [task for _, task in indexed]
