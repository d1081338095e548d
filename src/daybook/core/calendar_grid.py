from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Optional

from ..domain import as_day

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# English names regardless of the process locale; strftime("%B") follows LC_TIME.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True, slots=True)
class CalendarCell:
    date: date
    is_current_month: bool
    is_selected: bool
    is_today: bool

    @property
    def label(self) -> str:
        return str(self.date.day)


def month_start(reference: date) -> date:
    return as_day(reference).replace(day=1)


def month_end(reference: date) -> date:
    first = month_start(reference)
    _, days_in_month = calendar.monthrange(first.year, first.month)
    return first.replace(day=days_in_month)


def week_start(day: date) -> date:
    """Sunday of the week containing ``day``."""

    day = as_day(day)
    # date.weekday() is Monday=0 .. Sunday=6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def week_end(day: date) -> date:
    return week_start(day) + timedelta(days=6)


def _shift_month(reference: date, delta: int) -> date:
    first = month_start(reference)
    index = first.year * 12 + (first.month - 1) + delta
    return date(index // 12, index % 12 + 1, 1)


def next_month(reference: date) -> date:
    return _shift_month(reference, 1)


def prev_month(reference: date) -> date:
    return _shift_month(reference, -1)


def month_name(day: date) -> str:
    return MONTH_NAMES[as_day(day).month - 1]


def month_title(reference: date) -> str:
    day = as_day(reference)
    return f"{month_name(day)} {day.year}"


def long_date(day: date) -> str:
    """``"March 05, 2024"``."""

    day = as_day(day)
    return f"{month_name(day)} {day.day:02d}, {day.year}"


def _date_range(start: date, end: date) -> Iterable[date]:
    delta = (end - start).days
    for index in range(delta + 1):
        yield start + timedelta(days=index)


def build_month_grid(
    reference_month: date,
    selected_date: Optional[date] = None,
    *,
    today: Optional[date] = None,
) -> List[List[CalendarCell]]:
    """Weeks of cells covering ``reference_month``, padded to whole Sunday-first weeks."""

    first = month_start(reference_month)
    last = month_end(reference_month)
    selected = as_day(selected_date) if selected_date is not None else None
    current_day = as_day(today) if today is not None else date.today()

    weeks: List[List[CalendarCell]] = []
    row: List[CalendarCell] = []
    for day in _date_range(week_start(first), week_end(last)):
        row.append(
            CalendarCell(
                date=day,
                is_current_month=first <= day <= last,
                is_selected=selected is not None and day == selected,
                is_today=day == current_day,
            )
        )
        if len(row) == 7:
            weeks.append(row)
            row = []
    return weeks


__all__ = [
    "CalendarCell",
    "MONTH_NAMES",
    "WEEKDAY_LABELS",
    "build_month_grid",
    "long_date",
    "month_end",
    "month_name",
    "month_start",
    "month_title",
    "next_month",
    "prev_month",
    "week_end",
    "week_start",
]
