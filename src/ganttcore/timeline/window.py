from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterator, List, Sequence

from ganttcore.timeline.dates import add_days, days_between, iter_days
from ganttcore.timeline.models import Task, resolve_ranges

logger = logging.getLogger(__name__)

DEFAULT_MINIMUM_DAYS = 14


@dataclass(frozen=True)
class TimelineWindow:
    start: date
    end: date
    day_count: int

    def days(self) -> Iterator[date]:
        """Header dates, one per visible day column."""
        return iter_days(self.start, self.day_count)

    def offset_of(self, d: date) -> int:
        return days_between(self.start, d)


def compute_window(tasks: Sequence[Task], minimum_days: int = DEFAULT_MINIMUM_DAYS, today: date | None = None) -> TimelineWindow:
    """Derive one contiguous window covering every task date and ``today``.

    One day of padding is added on each side and the length is floored at
    ``minimum_days``. ``today`` defaults to the wall clock; pass a fixed date
    for reproducible output.
    """
    today = today or date.today()
    minimum_days = max(1, int(minimum_days))

    if not tasks:
        return TimelineWindow(start=today, end=add_days(today, minimum_days - 1), day_count=minimum_days)

    seen: List[date] = [today]
    for t in tasks:
        seen.extend(resolve_ranges(t).dates())
        # a lone actual finish still counts towards the window
        if t.actual_start is None and t.actual_due is not None:
            seen.append(t.actual_due)

    start = add_days(min(seen), -1)
    end = add_days(max(seen), 1)
    day_count = max(minimum_days, days_between(start, end) + 1)
    logger.debug("window %s..%s (%d days) over %d tasks", start, end, day_count, len(tasks))
    return TimelineWindow(start=start, end=end, day_count=day_count)
