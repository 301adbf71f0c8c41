"""Progress state: week id -> {"completion": {...}, "weights": {...}}.

All functions here are pure; they never mutate their inputs. Persistence lives
in ``storage.ProgressStore``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .weeks import previous_week_id

WeekData = dict[str, dict[str, Any]]


class InvalidImportError(ValueError):
    """Raised when an import payload is not the export JSON shape."""


def empty_week() -> WeekData:
    return {"completion": {}, "weights": {}}


def _normalize_week(raw: Any) -> WeekData:
    row = raw if isinstance(raw, Mapping) else {}
    completion = row.get("completion")
    if completion is None:
        # Exports written before the rename carry the flags as "checked".
        completion = row.get("checked")
    weights = row.get("weights")
    return {
        "completion": dict(completion) if isinstance(completion, Mapping) else {},
        "weights": dict(weights) if isinstance(weights, Mapping) else {},
    }


def normalize_weeks(raw: Any) -> dict[str, WeekData]:
    """Coerce whatever came out of storage into a progress mapping."""
    if not isinstance(raw, Mapping):
        return {}
    return {str(week_id): _normalize_week(row) for week_id, row in raw.items()}


def get_week(weeks: Mapping[str, WeekData], week_id: str) -> WeekData:
    """Stored data for ``week_id`` or a fresh empty default (never written back)."""
    row = weeks.get(week_id)
    if row is None:
        return empty_week()
    return _normalize_week(row)


def _with_field(
    weeks: Mapping[str, WeekData], week_id: str, section: str, key: str, value: Any
) -> dict[str, WeekData]:
    current = get_week(weeks, week_id)
    updated = dict(current)
    updated[section] = {**current[section], key: value}
    return {**weeks, week_id: updated}


def with_completion(weeks: Mapping[str, WeekData], week_id: str, key: str, value: bool) -> dict[str, WeekData]:
    return _with_field(weeks, week_id, "completion", key, bool(value))


def toggle_completion(weeks: Mapping[str, WeekData], week_id: str, key: str) -> dict[str, WeekData]:
    done = bool(get_week(weeks, week_id)["completion"].get(key))
    return with_completion(weeks, week_id, key, not done)


def with_weight(weeks: Mapping[str, WeekData], week_id: str, key: str, value: str) -> dict[str, WeekData]:
    # Weights are opaque text; no numeric parsing or unit handling.
    return _with_field(weeks, week_id, "weights", key, "" if value is None else str(value))


def last_weight(weeks: Mapping[str, WeekData], week_id: str, key: str) -> str | None:
    """Weight logged for ``key`` in the week before ``week_id``, if any."""
    prev = weeks.get(previous_week_id(week_id))
    if not isinstance(prev, Mapping):
        return None
    value = (prev.get("weights") or {}).get(key)
    if value is None or value == "":
        return None
    return str(value)


def parse_import(payload: Any) -> dict[str, WeekData]:
    """Validate an import payload and return its normalized weeks.

    ``payload`` may be JSON text/bytes or an already decoded object. Only the
    ``weeks`` mapping is read; ``label`` and ``exerciseHistory`` are derived
    fields and are dropped.
    """
    data = payload
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            data = json.loads(payload)
        except ValueError as err:
            raise InvalidImportError("Import payload is not valid JSON") from err
    if not isinstance(data, Mapping):
        raise InvalidImportError("Import payload must be a JSON object")
    weeks = data.get("weeks")
    if not isinstance(weeks, Mapping):
        raise InvalidImportError("Import payload has no 'weeks' object")
    return {str(week_id): _normalize_week(row) for week_id, row in weeks.items()}


def merge_import(weeks: Mapping[str, WeekData], imported: Mapping[str, WeekData]) -> dict[str, WeekData]:
    """Imported weeks replace stored weeks wholesale; other weeks are kept."""
    return {**weeks, **imported}
