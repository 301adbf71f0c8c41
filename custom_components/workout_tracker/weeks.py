"""Week identifiers (``YYYY-Www``) and the calendar arithmetic behind them.

Two anchors are in play and they are not the same:
- ``current_week_id`` counts whole weeks from the Monday on/before January 1.
- ``week_start``/``week_label`` count from the Monday on/before January 4.

Stepping between weeks uses a fixed 52-week year, so a ``W53`` produced for a
long year does not round-trip through ``next_week_id``/``previous_week_id``.
Valid week numbers are 01..53.
"""

from __future__ import annotations

import re
from datetime import date, timedelta

from homeassistant.util import dt as dt_util

_WEEK_ID_RE = re.compile(r"^(\d{4})-W(0[1-9]|[1-4]\d|5[0-3])$")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class InvalidWeekIdError(ValueError):
    """Raised when a string is not a ``YYYY-Www`` week identifier."""

    def __init__(self, week_id: str) -> None:
        super().__init__(f"Invalid week id: {week_id!r}")
        self.week_id = week_id


def monday_of(day: date) -> date:
    # weekday(): Monday=0 .. Sunday=6, so Sunday steps back six days.
    return day - timedelta(days=day.weekday())


def weekday_name(day: date) -> str:
    return _DAY_NAMES[day.weekday()]


def _today_local() -> date:
    return dt_util.now().date()


def format_week_id(year: int, week: int) -> str:
    return f"{int(year)}-W{int(week):02d}"


def parse_week_id(week_id: str) -> tuple[int, int]:
    m = _WEEK_ID_RE.match(str(week_id or "").strip())
    if not m:
        raise InvalidWeekIdError(str(week_id))
    return int(m.group(1)), int(m.group(2))


def is_week_id(value: str) -> bool:
    try:
        parse_week_id(value)
    except InvalidWeekIdError:
        return False
    return True


def current_week_id(today: date | None = None) -> str:
    """Return the identifier of the week containing ``today`` (local date by default)."""
    monday = monday_of(today or _today_local())
    start_monday = monday_of(date(monday.year, 1, 1))
    week = (monday - start_monday).days // 7 + 1
    return format_week_id(monday.year, week)


def week_start(week_id: str) -> date:
    """Monday of ``week_id``, anchored on the Monday on/before January 4."""
    year, week = parse_week_id(week_id)
    anchor = monday_of(date(year, 1, 4))
    return anchor + timedelta(days=(week - 1) * 7)


def _short_date(day: date) -> str:
    return f"{_MONTHS[day.month - 1]} {day.day}"


def week_label(week_id: str) -> str:
    """Human range for the Monday..Sunday span, e.g. ``Jan 27–Feb 2``."""
    monday = week_start(week_id)
    sunday = monday + timedelta(days=6)
    return f"{_short_date(monday)}–{_short_date(sunday)}"


def previous_week_id(week_id: str) -> str:
    year, week = parse_week_id(week_id)
    if week == 1:
        return format_week_id(year - 1, 52)
    return format_week_id(year, week - 1)


def next_week_id(week_id: str) -> str:
    year, week = parse_week_id(week_id)
    # W53 exists only as a current week; stepping on from it also rolls over.
    if week >= 52:
        return format_week_id(year + 1, 1)
    return format_week_id(year, week + 1)


def step_week_id(week_id: str, step: str) -> str:
    """Apply ``previous``/``next`` to ``week_id``."""
    if step == "previous":
        return previous_week_id(week_id)
    if step == "next":
        return next_week_id(week_id)
    raise ValueError(f"Unknown week step: {step!r}")
