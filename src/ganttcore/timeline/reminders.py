from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Sequence

from ganttcore.timeline.dates import add_days, days_between
from ganttcore.timeline.models import Task, TaskStatus


@dataclass(frozen=True)
class TaskReminder:
    task_id: str
    name: str
    due_date: date
    status: TaskStatus
    days_until_due: int


def upcoming_due_tasks(tasks: Sequence[Task], today: date, horizon_days: int = 7, limit: int = 5) -> List[TaskReminder]:
    """Tasks due between today and ``today + horizon_days``, soonest first."""
    horizon = add_days(today, horizon_days)
    reminders: List[TaskReminder] = []
    for t in tasks:
        due = t.planned_due
        if due < today or due > horizon:
            continue
        reminders.append(TaskReminder(
            task_id=t.id,
            name=t.name or "Untitled task",
            due_date=due,
            status=t.status,
            days_until_due=max(0, days_between(today, due)),
        ))
    reminders.sort(key=lambda r: (r.days_until_due, r.name.casefold()))
    return reminders[:max(0, limit)]
