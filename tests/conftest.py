from datetime import date

import pytest

from ganttcore.timeline.models import Task


@pytest.fixture
def today() -> date:
    """Fixed reference date so lateness and window padding are reproducible."""
    return date(2026, 3, 10)


@pytest.fixture
def make_task():
    def _make(task_id: str, start: date, due: date, **kwargs) -> Task:
        kwargs.setdefault("project_id", "P1")
        kwargs.setdefault("name", f"Task {task_id}")
        if "dependencies" in kwargs:
            kwargs["dependencies"] = tuple(kwargs["dependencies"])
        return Task(id=task_id, planned_start=start, planned_due=due, **kwargs)

    return _make
