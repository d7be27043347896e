import json
from datetime import date
from pathlib import Path

from ganttcore.reports.exports import rows_to_frame, snapshot_to_dict, write_csv, write_json
from ganttcore.timeline.pipeline import compute_timeline


def _snapshot(make_task, today):
    tasks = [
        make_task("A", date(2026, 3, 1), date(2026, 3, 2)),
        make_task("B", date(2026, 3, 3), date(2026, 3, 5), dependencies=["A"],
                  actual_start=date(2026, 3, 4)),
        make_task("C", date(2026, 3, 3), date(2026, 3, 3)),
    ]
    return compute_timeline(tasks, today=today, minimum_days=14)


def test_rows_to_frame_marks_critical_rows(make_task, today: date) -> None:
    snap = _snapshot(make_task, today)

    df = rows_to_frame(snap.rows, snap.critical_path)

    assert list(df["task_id"]) == ["A", "B", "C"]
    assert list(df["on_critical_path"]) == [True, True, False]
    assert df.loc[df["task_id"] == "B", "planned_duration"].item() == 3
    assert df.loc[df["task_id"] == "B", "actual_span"].item() == 1


def test_write_reports(tmp_path: Path, make_task, today: date) -> None:
    snap = _snapshot(make_task, today)

    write_csv(tmp_path / "out" / "rows.csv", rows_to_frame(snap.rows))
    write_json(tmp_path / "out" / "summary.json", snapshot_to_dict(snap))

    assert (tmp_path / "out" / "rows.csv").read_text().startswith("task_id,name,status")
    data = json.loads((tmp_path / "out" / "summary.json").read_text(encoding="utf-8"))
    assert data["critical_path"] == {"status": "ok", "path": ["A", "B"], "total_duration_days": 5}
    assert data["window"]["day_count"] == 14
    assert data["summary"]["total_count"] == 3
