"""Progress exports: per-exercise history, Markdown report, JSON document."""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date
from typing import Any

from homeassistant.util import dt as dt_util

from .catalog import PlanCatalog, entry_key, has_second_exercise
from .const import HISTORY_WEEKS, WEEKDAYS
from .progress import WeekData
from .weeks import InvalidWeekIdError, week_label

_NONE = "—"


def _label(week_id: str) -> str:
    # Imported documents may carry keys that are not week ids.
    try:
        return week_label(week_id)
    except InvalidWeekIdError:
        return ""


def recent_week_ids(weeks: Mapping[str, Any], limit: int = HISTORY_WEEKS) -> list[str]:
    """Newest stored weeks first. Sparse weeks are skipped, not filled in."""
    return sorted(weeks, reverse=True)[: max(0, int(limit))]


def exercise_history(catalog: PlanCatalog, weeks: Mapping[str, WeekData]) -> dict[str, list[str]]:
    index = catalog.key_to_exercise_name
    by_exercise: dict[str, list[str]] = {}
    for week_id in recent_week_ids(weeks):
        row = weeks.get(week_id)
        if not isinstance(row, Mapping):
            continue
        recorded = row.get("weights")
        if not isinstance(recorded, Mapping):
            continue
        for key, value in recorded.items():
            if value is None or value == "":
                continue
            name = index.get(key)
            if name:
                by_exercise.setdefault(name, []).append(str(value))
    return by_exercise


def _item(name: str, week: Mapping[str, Any], key: str) -> str:
    weight = (week.get("weights") or {}).get(key)
    done = (week.get("completion") or {}).get(key)
    return f"{name} {_NONE if weight is None else weight} kg {'done' if done else _NONE}"


def _day_line(catalog: PlanCatalog, week: Mapping[str, Any], day: str) -> str:
    items: list[str] = []
    for gi, group in enumerate(catalog.day(day).groups):
        for pi, pair in enumerate(group.pairs):
            items.append(_item(pair.primary, week, entry_key(day, gi, pi, "A")))
            if has_second_exercise(pair):
                items.append(_item(str(pair.secondary).strip(), week, entry_key(day, gi, pi, "B")))
    return "; ".join(items) + "."


def markdown_report(catalog: PlanCatalog, weeks: Mapping[str, WeekData], today: date | None = None) -> str:
    export_day = today or dt_util.now().date()
    lines: list[str] = [
        "# Workout plan progress report",
        "",
        f"Export date: {export_day.isoformat()}",
        "",
        f"Plan: {catalog.summary}",
        "",
    ]
    for week_id in recent_week_ids(weeks):
        lines.append(f"## Week {week_id} ({_label(week_id)})")
        lines.append("")
        week = weeks.get(week_id)
        if not isinstance(week, Mapping):
            continue
        for day in WEEKDAYS:
            day_plan = catalog.day(day)
            if day_plan.is_rest:
                continue
            lines.append(f"### {day} — {day_plan.label}")
            lines.append(_day_line(catalog, week, day))
            lines.append("")

    lines.append(f"## Progress by exercise (last {HISTORY_WEEKS} weeks, newest first)")
    lines.append("")
    for name, values in exercise_history(catalog, weeks).items():
        lines.append(f"- **{name}**: {', '.join(values)} kg")
    return "\n".join(lines)


def json_report(catalog: PlanCatalog, weeks: Mapping[str, WeekData]) -> dict[str, Any]:
    """Export document; its ``weeks`` object is what import accepts."""
    out: dict[str, Any] = {}
    for week_id in sorted(weeks, reverse=True):
        row = weeks.get(week_id)
        if not isinstance(row, Mapping):
            continue
        out[week_id] = {
            "completion": dict(row.get("completion") or {}),
            "weights": dict(row.get("weights") or {}),
            "label": _label(week_id),
        }
    return {"weeks": out, "exerciseHistory": exercise_history(catalog, weeks)}


def json_report_text(catalog: PlanCatalog, weeks: Mapping[str, WeekData]) -> str:
    return json.dumps(json_report(catalog, weeks), indent=2, ensure_ascii=False)
