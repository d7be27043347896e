"""Task snapshot types and the per-task date normalization."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Tuple

from ganttcore.timeline.dates import days_between


class TaskStatus(str, Enum):
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    DONE = "done"


STATUS_PERCENT = {
    TaskStatus.NOT_STARTED: 0,
    TaskStatus.IN_PROGRESS: 55,
    TaskStatus.DONE: 100,
}

UNASSIGNED = "Unassigned"

STATUS_ALIASES = {"todo": TaskStatus.NOT_STARTED.value}


@dataclass(frozen=True)
class Task:
    id: str
    project_id: str
    name: str
    planned_start: date
    planned_due: date
    status: TaskStatus = TaskStatus.NOT_STARTED
    baseline_start: Optional[date] = None
    baseline_due: Optional[date] = None
    actual_start: Optional[date] = None
    actual_due: Optional[date] = None
    percent_complete: Optional[float] = None
    dependencies: Tuple[str, ...] = field(default_factory=tuple)
    is_milestone: bool = False
    assignee: Optional[str] = None


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    @property
    def duration(self) -> int:
        return max(1, days_between(self.start, self.end) + 1)


@dataclass(frozen=True)
class TaskRanges:
    planned: DateRange
    baseline: DateRange
    actual: Optional[DateRange]

    def dates(self) -> Tuple[date, ...]:
        out = [self.planned.start, self.planned.end, self.baseline.start, self.baseline.end]
        if self.actual is not None:
            out += [self.actual.start, self.actual.end]
        return tuple(out)


def _pair(start: date, end: date) -> DateRange:
    # an end before its start is pulled forward to the start
    return DateRange(start=start, end=max(start, end))


def resolve_ranges(task: Task) -> TaskRanges:
    """Apply the baseline/actual fallbacks and end-before-start correction once per task.

    Baseline dates default to the planned ones individually. An actual range
    exists only once work has started; a missing actual finish is treated as
    a one-day bar at the actual start.
    """
    planned = _pair(task.planned_start, task.planned_due)
    baseline = _pair(
        task.baseline_start or task.planned_start,
        task.baseline_due or task.planned_due,
    )
    actual: Optional[DateRange] = None
    if task.actual_start is not None:
        actual = _pair(task.actual_start, task.actual_due or task.actual_start)
    return TaskRanges(planned=planned, baseline=baseline, actual=actual)


def clamp_percent(value: float) -> int:
    return max(0, min(100, int(math.floor(value + 0.5))))


def effective_percent(task: Task) -> int:
    p = task.percent_complete
    if p is not None and not math.isnan(p):
        if math.isinf(p):
            return 100 if p > 0 else 0
        return clamp_percent(p)
    return STATUS_PERCENT[task.status]


def assignee_label(task: Task) -> str:
    label = (task.assignee or "").strip()
    return label or UNASSIGNED


def parse_status(value: object, default: TaskStatus = TaskStatus.NOT_STARTED) -> TaskStatus:
    s = str(value or "").strip().lower()
    s = STATUS_ALIASES.get(s, s)
    try:
        return TaskStatus(s)
    except ValueError:
        return default
