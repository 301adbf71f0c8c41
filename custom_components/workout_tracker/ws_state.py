"""State payload helpers shared by the coordinator, entities and websocket API."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from homeassistant.util import dt as dt_util

from .catalog import PlanCatalog, day_progress, is_day_complete, iter_entry_keys
from .const import WEEKDAYS
from .progress import WeekData, get_week, last_weight
from .sessions import cardio_block
from .weeks import current_week_id, parse_week_id, step_week_id, week_label, weekday_name


def next_selected_week(
    selected: str | None,
    *,
    today: date,
    week_id: str | None = None,
    step: str | None = None,
) -> str | None:
    """New stored week selection; ``None`` means "follow the current week".

    Raises ``InvalidWeekIdError`` for a bad explicit id; callers keep their
    previous selection in that case.
    """
    current = current_week_id(today)
    if step == "current":
        return None
    if step in ("previous", "next"):
        target = step_week_id(selected or current, step)
    elif week_id:
        parse_week_id(week_id)
        target = str(week_id).strip()
    else:
        return selected
    return None if target == current else target


def resolve_day(day: str | None, *, today: date) -> str:
    """Selected weekday, falling back to today's."""
    if day in WEEKDAYS:
        return str(day)
    return weekday_name(today)


def runtime_payload() -> dict[str, Any]:
    """Values the UI needs for "this week" / "today" without doing date math itself."""
    today = dt_util.now().date()
    current = current_week_id(today)
    return {
        "today": today.isoformat(),
        "today_name": weekday_name(today),
        "current_week_id": current,
        "current_week_label": week_label(current),
    }


def public_state(
    catalog: PlanCatalog,
    weeks: Mapping[str, WeekData],
    *,
    selected_week: str,
    selected_day: str,
    runtime: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Return a stable public payload for the selected week and day."""
    week = get_week(weeks, selected_week)
    day_plan = catalog.day(selected_day)

    last: dict[str, str] = {}
    for key in iter_entry_keys(day_plan, selected_day):
        value = last_weight(weeks, selected_week, key)
        if value is not None:
            last[key] = value

    days: dict[str, Any] = {}
    for day in WEEKDAYS:
        done, total = day_progress(catalog, week, day)
        days[day] = {
            "label": catalog.day(day).label,
            "rest": catalog.day(day).is_rest,
            "complete": is_day_complete(catalog, week, day),
            "done": done,
            "total": total,
        }

    return {
        "plan": catalog.name,
        "title": catalog.title,
        "selected_week": selected_week,
        "week_label": week_label(selected_week),
        "selected_day": selected_day,
        "week": week,
        "last_weights": last,
        "days": days,
        "cardio": cardio_block(day_plan, selected_day),
        "runtime": runtime or {},
    }
