from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import pandas as pd

from ganttcore.timeline.critical_path import CriticalPathResult
from ganttcore.timeline.pipeline import TimelineSnapshot
from ganttcore.timeline.rows import TaskRow


def write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, ensure_ascii=False, indent=2, default=str), encoding="utf-8")


def write_csv(path: Path, df: pd.DataFrame) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)


def rows_to_frame(rows: Sequence[TaskRow], critical: Optional[CriticalPathResult] = None) -> pd.DataFrame:
    on_path = critical.task_ids if critical is not None else frozenset()
    records = []
    for r in rows:
        records.append({
            "task_id": r.task_id,
            "name": r.name,
            "status": r.status.value,
            "assignee": r.assignee_label,
            "planned_start": r.ranges.planned.start.isoformat(),
            "planned_end": r.ranges.planned.end.isoformat(),
            "planned_duration": r.planned_duration,
            "planned_offset": r.planned_bar.offset,
            "planned_span": r.planned_bar.span,
            "baseline_offset": r.baseline_bar.offset,
            "baseline_span": r.baseline_bar.span,
            "actual_offset": r.actual_bar.offset if r.actual_bar else None,
            "actual_span": r.actual_bar.span if r.actual_bar else None,
            "percent_complete": r.percent_complete,
            "is_late": r.is_late,
            "is_milestone": r.is_milestone,
            "on_critical_path": r.task_id in on_path,
        })
    return pd.DataFrame(records)


def snapshot_to_dict(snapshot: TimelineSnapshot) -> Dict[str, Any]:
    cp = snapshot.critical_path
    return {
        "window": {
            "start": snapshot.window.start.isoformat(),
            "end": snapshot.window.end.isoformat(),
            "day_count": snapshot.window.day_count,
        },
        "critical_path": {
            "status": cp.status,
            "path": list(cp.path),
            "total_duration_days": cp.total_duration,
        },
        "summary": asdict(snapshot.summary),
    }
