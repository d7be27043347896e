import logging
from datetime import date
from pathlib import Path

import pytest

from ganttcore.io.load_tasks import load_tasks, load_tasks_file, task_from_record
from ganttcore.timeline.models import TaskStatus


def test_camel_case_record() -> None:
    task = task_from_record({
        "id": "t1",
        "projectId": "p1",
        "name": "Pour slab",
        "startDate": "2026-03-01",
        "dueDate": "2026-03-04",
        "status": "in-progress",
        "dependencies": ["t0"],
        "baselineStartDate": "2026-02-27",
        "actualStartDate": "2026-03-02T08:30:00Z",
        "percentComplete": 30,
        "isMilestone": False,
        "assignee": "Crew A",
    })

    assert task is not None
    assert task.project_id == "p1"
    assert task.planned_start == date(2026, 3, 1)
    assert task.planned_due == date(2026, 3, 4)
    assert task.status is TaskStatus.IN_PROGRESS
    assert task.baseline_start == date(2026, 2, 27)
    assert task.baseline_due is None
    assert task.actual_start == date(2026, 3, 2)
    assert task.percent_complete == 30
    assert task.dependencies == ("t0",)


def test_snake_case_record_with_loose_values() -> None:
    task = task_from_record({
        "id": 7,
        "project_id": "p1",
        "start_date": "2026-03-01",
        "due_date": "2026-03-02",
        "status": "todo",
        "dependencies": " 3, 4 ,,3",
        "percent_complete": "45",
        "is_milestone": "yes",
    })

    assert task.id == "7"
    assert task.status is TaskStatus.NOT_STARTED
    assert task.dependencies == ("3", "4")
    assert task.percent_complete == 45.0
    assert task.is_milestone is True
    assert task.assignee is None


def test_unknown_status_means_not_started() -> None:
    task = task_from_record({"id": "a", "start_date": "2026-03-01", "status": "blocked"})

    assert task.status is TaskStatus.NOT_STARTED


def test_single_planned_date_is_used_for_both() -> None:
    task = task_from_record({"id": "a", "due_date": "2026-03-05"})

    assert task.planned_start == task.planned_due == date(2026, 3, 5)


def test_records_without_dates_or_id_are_skipped(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        tasks = load_tasks([
            {"id": "a", "start_date": "", "due_date": "not a date"},
            {"start_date": "2026-03-01"},
            {"id": "ok", "start_date": "2026-03-01"},
        ])

    assert [t.id for t in tasks] == ["ok"]
    assert "no usable planned dates" in caplog.text
    assert "without id" in caplog.text


def test_unparseable_optional_date_is_dropped(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        task = task_from_record({"id": "a", "start_date": "2026-03-01", "baseline_due_date": "31/02/2026"})

    assert task.baseline_due is None
    assert "baseline_due_date" in caplog.text


def test_load_csv(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    path.write_text(
        "id,project_id,name,start_date,due_date,status,dependencies,percent_complete,is_milestone,assignee\n"
        "A,P1,Survey,2026-03-01,2026-03-02,done,,,no,\n"
        "B,P1,Dig,2026-03-03,2026-03-05,in-progress,\"A,Z\",40,no,Crew\n",
        encoding="utf-8",
    )

    a, b = load_tasks_file(path)

    assert a.dependencies == ()
    assert a.percent_complete is None
    assert a.assignee is None
    assert a.status is TaskStatus.DONE
    assert b.dependencies == ("A", "Z")
    assert b.percent_complete == 40.0
    assert b.assignee == "Crew"


@pytest.mark.parametrize("body", [
    "- {id: A, start_date: 2026-03-01, due_date: 2026-03-02}\n",
    "tasks:\n  - {id: A, start_date: 2026-03-01, due_date: 2026-03-02}\n",
])
def test_load_yaml(tmp_path: Path, body: str) -> None:
    path = tmp_path / "tasks.yaml"
    path.write_text(body, encoding="utf-8")

    (task,) = load_tasks_file(path)

    assert task.id == "A"
    assert task.planned_due == date(2026, 3, 2)


def test_unsupported_format(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Unsupported"):
        load_tasks_file(tmp_path / "tasks.json")


@pytest.mark.parametrize("raw", ["NaN", "inf", "-inf", "1e999"])
def test_non_finite_percent_is_dropped(caplog, raw: str) -> None:
    with caplog.at_level(logging.WARNING):
        task = task_from_record({"id": "a", "start_date": "2026-03-01", "percent_complete": raw})

    assert task.percent_complete is None
    assert "percent_complete" in caplog.text
