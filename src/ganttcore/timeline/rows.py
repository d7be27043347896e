from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence, Tuple

from ganttcore.timeline.models import (
    DateRange,
    Task,
    TaskRanges,
    TaskStatus,
    assignee_label,
    effective_percent,
    resolve_ranges,
)
from ganttcore.timeline.window import TimelineWindow


@dataclass(frozen=True)
class BarSegment:
    """Bar geometry in whole days relative to ``window.start``."""
    offset: int
    span: int


@dataclass(frozen=True)
class TaskRow:
    task_id: str
    name: str
    status: TaskStatus
    ranges: TaskRanges
    planned_bar: BarSegment
    baseline_bar: BarSegment
    actual_bar: Optional[BarSegment]
    percent_complete: int
    is_late: bool
    is_milestone: bool
    assignee_label: str
    dependencies: Tuple[str, ...]

    @property
    def planned_duration(self) -> int:
        return self.ranges.planned.duration

    @property
    def baseline_duration(self) -> int:
        return self.ranges.baseline.duration

    @property
    def actual_duration(self) -> Optional[int]:
        return self.ranges.actual.duration if self.ranges.actual is not None else None


def place_bar(rng: DateRange, window: TimelineWindow) -> BarSegment:
    """Clamp a date range into the window.

    A range lying wholly outside the window still yields a one-day sliver at
    the nearest edge.
    """
    last = max(0, window.day_count - 1)
    offset = min(last, max(0, window.offset_of(rng.start)))
    end_offset = min(last, window.offset_of(rng.end))
    span = max(1, end_offset - offset + 1)
    return BarSegment(offset=offset, span=span)


def build_row(task: Task, window: TimelineWindow, today: date) -> TaskRow:
    ranges = resolve_ranges(task)
    percent = effective_percent(task)
    return TaskRow(
        task_id=task.id,
        name=task.name,
        status=task.status,
        ranges=ranges,
        planned_bar=place_bar(ranges.planned, window),
        baseline_bar=place_bar(ranges.baseline, window),
        actual_bar=place_bar(ranges.actual, window) if ranges.actual is not None else None,
        percent_complete=percent,
        is_late=percent < 100 and ranges.planned.end < today,
        is_milestone=bool(task.is_milestone),
        assignee_label=assignee_label(task),
        dependencies=tuple(task.dependencies),
    )


def build_rows(tasks: Sequence[Task], window: TimelineWindow, today: date | None = None) -> List[TaskRow]:
    """One row per task, stably ordered by planned start."""
    today = today or date.today()
    ordered = sorted(tasks, key=lambda t: t.planned_start)
    return [build_row(t, window, today) for t in ordered]
