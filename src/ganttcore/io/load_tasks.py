from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd
import yaml

from ganttcore.timeline.dates import parse_date
from ganttcore.timeline.models import Task, parse_status

logger = logging.getLogger(__name__)

# snake_case column -> camelCase alias used by the web client
_ALIASES: Dict[str, Tuple[str, ...]] = {
    "id": ("id",),
    "project_id": ("project_id", "projectId"),
    "name": ("name",),
    "start_date": ("start_date", "startDate", "planned_start"),
    "due_date": ("due_date", "dueDate", "planned_due"),
    "status": ("status",),
    "dependencies": ("dependencies",),
    "baseline_start_date": ("baseline_start_date", "baselineStartDate"),
    "baseline_due_date": ("baseline_due_date", "baselineDueDate"),
    "actual_start_date": ("actual_start_date", "actualStartDate"),
    "actual_due_date": ("actual_due_date", "actualDueDate"),
    "percent_complete": ("percent_complete", "percentComplete"),
    "is_milestone": ("is_milestone", "isMilestone"),
    "assignee": ("assignee",),
}


def _missing(v: Any) -> bool:
    if v is None:
        return True
    if isinstance(v, (list, tuple, set, dict)):
        return False
    try:
        return bool(pd.isna(v))
    except (TypeError, ValueError):
        return False


def _get(record: Mapping[str, Any], key: str) -> Any:
    for k in _ALIASES[key]:
        v = record.get(k)
        if not _missing(v):
            return v
    return None


def _date(record: Mapping[str, Any], key: str, task_id: str):
    raw = _get(record, key)
    d = parse_date(raw)
    if raw is not None and str(raw).strip() and d is None:
        logger.warning("task %s: ignoring unparseable %s=%r", task_id, key, raw)
    return d


def _dependencies(v: Any) -> Tuple[str, ...]:
    if v is None:
        return ()
    if isinstance(v, str):
        items: Iterable[Any] = v.split(",")
    elif isinstance(v, (list, tuple, set)):
        items = v
    else:
        items = [v]
    out: List[str] = []
    for d in items:
        s = str(d).strip()
        if s and s not in out:
            out.append(s)
    return tuple(out)


def _percent(v: Any, task_id: str) -> Optional[float]:
    if v is None or (isinstance(v, str) and not v.strip()):
        return None
    try:
        p = float(v)
    except (TypeError, ValueError):
        p = None
    if p is None or not math.isfinite(p):
        logger.warning("task %s: ignoring non-numeric percent_complete=%r", task_id, v)
        return None
    return p


def _flag(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    return str(v or "").strip().lower() in {"1", "true", "yes", "y"}


def task_from_record(record: Mapping[str, Any]) -> Optional[Task]:
    """Normalize one loosely-typed task record (snake_case or camelCase keys)."""
    raw_id = _get(record, "id")
    if raw_id is None or not str(raw_id).strip():
        logger.warning("skipping task record without id: %r", dict(record))
        return None
    task_id = str(raw_id).strip()

    start = _date(record, "start_date", task_id)
    due = _date(record, "due_date", task_id)
    if start is None and due is None:
        logger.warning("task %s: no usable planned dates, skipped", task_id)
        return None
    start = start or due
    due = due or start

    assignee = _get(record, "assignee")
    return Task(
        id=task_id,
        project_id=str(_get(record, "project_id") or ""),
        name=str(_get(record, "name") or ""),
        planned_start=start,
        planned_due=due,
        status=parse_status(_get(record, "status")),
        baseline_start=_date(record, "baseline_start_date", task_id),
        baseline_due=_date(record, "baseline_due_date", task_id),
        actual_start=_date(record, "actual_start_date", task_id),
        actual_due=_date(record, "actual_due_date", task_id),
        percent_complete=_percent(_get(record, "percent_complete"), task_id),
        dependencies=_dependencies(_get(record, "dependencies")),
        is_milestone=_flag(_get(record, "is_milestone")),
        assignee=str(assignee) if assignee is not None else None,
    )


def load_tasks(records: Iterable[Mapping[str, Any]]) -> List[Task]:
    tasks: List[Task] = []
    for r in records:
        t = task_from_record(r)
        if t is not None:
            tasks.append(t)
    return tasks


def _read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def _read_csv(path: Path) -> pd.DataFrame:
    if not path.exists():
        return pd.DataFrame()
    return pd.read_csv(path, dtype=str)


def load_tasks_file(path: Path) -> List[Task]:
    """Load a task snapshot from ``.csv`` or ``.yaml``/``.yml``."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        records = _read_csv(path).to_dict("records")
    elif suffix in {".yaml", ".yml"}:
        data = _read_yaml(path) or []
        records = data.get("tasks", []) if isinstance(data, dict) else data
    else:
        raise ValueError(f"Unsupported task snapshot format: {path.suffix!r}")
    tasks = load_tasks(records)
    logger.info("loaded %d of %d task records from %s", len(tasks), len(records), path)
    return tasks
