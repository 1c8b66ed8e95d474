"""
Due-date classification.

Two notions of "overdue" coexist and are kept apart on purpose:

* ``stored_status`` -- whatever was last written to the obligation row.
* ``effective_bucket`` -- derived here from ``due_date`` against today.

Nothing in this module touches the database.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable, Iterable, Optional, Protocol

UPCOMING_WINDOW_DAYS = 30

COMPLETED = "completed"
PENDING = "pending"
OVERDUE = "overdue"
UPCOMING = "upcoming"
UNCLASSIFIED = "unclassified"


class HasDueDate(Protocol):
    status: str
    due_date: date


def anniversary_due_date(month: int, year: Optional[int] = None) -> date:
    """Last calendar day of ``month`` in ``year`` (current year by default)."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if year is None:
        year = date.today().year
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, last_day)


def stored_status(obligation: HasDueDate) -> str:
    return getattr(obligation.status, "value", obligation.status)


def _in_window(due: date, today: date) -> bool:
    return today <= due <= today + timedelta(days=UPCOMING_WINDOW_DAYS)


def effective_bucket(obligation: HasDueDate, today: date) -> str:
    """Read-time bucket for a single obligation.

    Rows whose stored status is ``overdue`` are reported as ``unclassified``:
    the date rules only look at pending and completed items.
    """
    status = stored_status(obligation)
    if status == COMPLETED:
        return COMPLETED
    if status != PENDING:
        return UNCLASSIFIED
    if obligation.due_date < today:
        return OVERDUE
    if _in_window(obligation.due_date, today):
        return UPCOMING
    return PENDING


@dataclass
class DueDateBuckets:
    completed: list = field(default_factory=list)
    pending: list = field(default_factory=list)
    overdue: list = field(default_factory=list)
    upcoming30: list = field(default_factory=list)
    total: int = 0

    def counts(self) -> dict[str, int]:
        return {
            "total": self.total,
            "completed": len(self.completed),
            "pending": len(self.pending),
            "overdue": len(self.overdue),
            "upcoming": len(self.upcoming30),
        }


def bucketize(obligations: Iterable[HasDueDate], today: date) -> DueDateBuckets:
    """Sort obligations into completed / pending / overdue / upcoming30.

    ``overdue`` and ``upcoming30`` are both subsets of ``pending`` and never
    overlap. An item due today is upcoming, not overdue.
    """
    buckets = DueDateBuckets()
    for ob in obligations:
        buckets.total += 1
        status = stored_status(ob)
        if status == COMPLETED:
            buckets.completed.append(ob)
            continue
        if status != PENDING:
            continue
        buckets.pending.append(ob)
        if ob.due_date < today:
            buckets.overdue.append(ob)
        elif _in_window(ob.due_date, today):
            buckets.upcoming30.append(ob)
    return buckets


class DueDateClassifier:
    """Classifier bound to a configured anniversary month and a clock."""

    def __init__(self, anniversary_month: int, clock: Callable[[], date] = date.today):
        if not 1 <= anniversary_month <= 12:
            raise ValueError(f"anniversary_month must be in 1..12, got {anniversary_month}")
        self.anniversary_month = anniversary_month
        self.clock = clock

    def today(self) -> date:
        return self.clock()

    def anniversary_due_date(self, year: Optional[int] = None) -> date:
        if year is None:
            year = self.today().year
        return anniversary_due_date(self.anniversary_month, year)

    def summarize(self, obligations: Iterable[HasDueDate]) -> DueDateBuckets:
        return bucketize(obligations, self.today())

    def bucket_for(self, obligation: HasDueDate) -> str:
        return effective_bucket(obligation, self.today())
