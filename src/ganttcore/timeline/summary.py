from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from ganttcore.timeline.critical_path import CriticalPathResult
from ganttcore.timeline.models import TaskStatus
from ganttcore.timeline.rows import TaskRow


@dataclass(frozen=True)
class ScheduleSummary:
    average_progress: int
    done_count: int
    late_count: int
    milestone_count: int
    total_count: int = 0
    active_count: int = 0
    critical_count: int = 0


def weighted_progress(rows: Sequence[TaskRow]) -> int:
    """Duration-weighted mean of percent complete, rounded half up."""
    weight = sum(r.planned_duration for r in rows)
    if weight <= 0:
        return 0
    acc = sum(r.planned_duration * r.percent_complete for r in rows)
    return int(math.floor(acc / weight + 0.5))


def summarize(rows: Sequence[TaskRow], critical: Optional[CriticalPathResult] = None) -> ScheduleSummary:
    return ScheduleSummary(
        average_progress=weighted_progress(rows),
        done_count=sum(1 for r in rows if r.percent_complete >= 100 or r.status == TaskStatus.DONE),
        late_count=sum(1 for r in rows if r.is_late),
        milestone_count=sum(1 for r in rows if r.is_milestone),
        total_count=len(rows),
        active_count=sum(1 for r in rows if r.status == TaskStatus.IN_PROGRESS),
        critical_count=len(critical) if critical is not None else 0,
    )
