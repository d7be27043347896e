from __future__ import annotations

import sys
from datetime import date, datetime
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ganttcore.settings import get_settings
from ganttcore.logging_setup import configure_logging
from ganttcore.io.load_tasks import load_tasks_file
from ganttcore.validation.validators import run_all_validations
from ganttcore.timeline.pipeline import compute_timeline, filter_tasks
from ganttcore.timeline.reminders import upcoming_due_tasks
from ganttcore.reports.exports import rows_to_frame, snapshot_to_dict, write_csv, write_json


console = Console()
ROOT = Path(__file__).resolve().parents[1]
DEFAULT_SNAPSHOT = ROOT / "data" / "tasks.csv"
OUT_DIR = ROOT / "outputs" / "reports"


def main() -> None:
    s = get_settings()
    configure_logging(s.log_level)

    snapshot_path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_SNAPSHOT
    project_id = sys.argv[2] if len(sys.argv) > 2 else None
    today = date.today()

    tasks = filter_tasks(load_tasks_file(snapshot_path), project_id=project_id)
    report = run_all_validations(tasks)
    snap = compute_timeline(tasks, today=today, minimum_days=s.minimum_days)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    write_csv(OUT_DIR / f"{ts}_timeline_rows.csv", rows_to_frame(snap.rows, snap.critical_path))
    write_json(OUT_DIR / f"{ts}_timeline_summary.json", {**snapshot_to_dict(snap), "validation": report})

    console.print("[bold]Schedule Report[/bold]")
    console.print(f"Window: {snap.window.start} .. {snap.window.end} ({snap.window.day_count} days)")
    console.print(f"Validation errors: {report['summary']['errors']} | warnings: {report['summary']['warnings']}")

    sm = snap.summary
    table = Table(title="Summary")
    for col in ("tasks", "progress %", "done", "in progress", "late", "milestones", "critical"):
        table.add_column(col, justify="right")
    table.add_row(*(str(v) for v in (sm.total_count, sm.average_progress, sm.done_count, sm.active_count,
                                     sm.late_count, sm.milestone_count, sm.critical_count)))
    console.print(table)

    cp = snap.critical_path
    if cp.cycle_detected:
        console.print("[yellow]Dependency cycle detected; no critical path highlighted.[/yellow]")
    elif cp.path:
        console.print(f"Critical path ({cp.total_duration} days): {' -> '.join(cp.path)}")

    for r in upcoming_due_tasks(tasks, today, horizon_days=s.reminder_horizon_days, limit=s.reminder_limit):
        console.print(f"Due in {r.days_until_due}d: {r.name} ({r.status.value})")

    console.print(f"Wrote reports to: {OUT_DIR}")

    if report["summary"]["errors"] > 0:
        raise SystemExit(2)

if __name__ == "__main__":
    main()
