"""Diagnostics support for Workout Tracker.

This file is picked up by Home Assistant automatically when present.
"""

from __future__ import annotations

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .const import DOMAIN
from .version import BACKEND_VERSION
from .weeks import is_week_id


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant,
    entry: ConfigEntry,
) -> dict[str, Any]:
    """Return diagnostics for a config entry. Nothing here is sensitive."""
    coordinator = hass.data.get(DOMAIN, {}).get(entry.entry_id)

    payload: dict[str, Any] = {
        "version": BACKEND_VERSION,
        "entry": {
            "entry_id": entry.entry_id,
            "title": entry.title,
            "version": entry.version,
            "data": dict(entry.data),
            "options": dict(entry.options),
        },
    }

    if coordinator is not None:
        weeks = coordinator.store.weeks
        payload["coordinator"] = {
            "last_update_success": bool(getattr(coordinator, "last_update_success", False)),
            "last_exception": repr(getattr(coordinator, "last_exception", None)),
            "plan": coordinator.library.plan,
            "selected_week": coordinator.selected_week,
            "selected_day": coordinator.selected_day,
        }
        payload["progress"] = {
            "week_count": len(weeks),
            "invalid_week_ids": sorted(w for w in weeks if not is_week_id(w)),
            "weeks": weeks,
        }

    return payload
