from datetime import date

from ganttcore.timeline.reminders import upcoming_due_tasks


def test_only_tasks_due_within_horizon(make_task, today: date) -> None:
    tasks = [
        make_task("past", date(2026, 3, 1), date(2026, 3, 9)),
        make_task("today", date(2026, 3, 1), date(2026, 3, 10)),
        make_task("edge", date(2026, 3, 1), date(2026, 3, 17)),
        make_task("beyond", date(2026, 3, 1), date(2026, 3, 18)),
    ]

    reminders = upcoming_due_tasks(tasks, today, horizon_days=7)

    assert [r.task_id for r in reminders] == ["today", "edge"]
    assert [r.days_until_due for r in reminders] == [0, 7]


def test_sorted_by_days_then_name_and_limited(make_task, today: date) -> None:
    tasks = [
        make_task("1", today, date(2026, 3, 12), name="beta"),
        make_task("2", today, date(2026, 3, 12), name="Alpha"),
        make_task("3", today, date(2026, 3, 11), name="zeta"),
        make_task("4", today, date(2026, 3, 13), name=""),
    ]

    reminders = upcoming_due_tasks(tasks, today, limit=3)

    assert [r.name for r in reminders] == ["zeta", "Alpha", "beta"]

    (last,) = upcoming_due_tasks(tasks[3:], today)
    assert last.name == "Untitled task"
