from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence, Tuple

from ganttcore.settings import get_settings
from ganttcore.timeline.critical_path import CriticalPathResult, find_critical_path
from ganttcore.timeline.models import STATUS_ALIASES, Task, TaskStatus
from ganttcore.timeline.rows import TaskRow, build_rows
from ganttcore.timeline.summary import ScheduleSummary, summarize
from ganttcore.timeline.window import TimelineWindow, compute_window

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimelineSnapshot:
    window: TimelineWindow
    rows: Tuple[TaskRow, ...]
    critical_path: CriticalPathResult
    summary: ScheduleSummary


def filter_tasks(tasks: Sequence[Task], project_id: Optional[str] = None, status: Optional[str] = None) -> List[Task]:
    """Keep one project's tasks and, unless ``status`` is ``"all"``, one status."""
    wanted = None
    if status and status != "all":
        wanted = TaskStatus(STATUS_ALIASES.get(status, status))
    out = []
    for t in tasks:
        if project_id and t.project_id != project_id:
            continue
        if wanted is not None and t.status != wanted:
            continue
        out.append(t)
    return out


def compute_timeline(tasks: Sequence[Task], today: Optional[date] = None, minimum_days: Optional[int] = None) -> TimelineSnapshot:
    """Run window -> rows -> critical path -> summary over one task snapshot."""
    today = today or date.today()
    if minimum_days is None:
        minimum_days = get_settings().minimum_days

    window = compute_window(tasks, minimum_days=minimum_days, today=today)
    rows = build_rows(tasks, window, today=today)
    cp = find_critical_path(rows)
    summary = summarize(rows, cp)
    logger.debug("timeline: %d rows, critical path %s (%d tasks)", len(rows), cp.status, len(cp))
    return TimelineSnapshot(window=window, rows=tuple(rows), critical_path=cp, summary=summary)
