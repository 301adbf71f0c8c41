"""Websocket API for Workout Tracker."""

from __future__ import annotations

from typing import Any

import voluptuous as vol

from homeassistant.components import websocket_api
from homeassistant.core import HomeAssistant

from .catalog import catalog_as_dict
from .const import DOMAIN, WEEKDAYS
from .report import json_report_text
from .weeks import InvalidWeekIdError
from .ws_state import public_state, runtime_payload


def _coordinator(hass: HomeAssistant, connection: websocket_api.ActiveConnection, msg: dict[str, Any]):
    entry_id = msg["entry_id"]
    coordinator = hass.data.get(DOMAIN, {}).get(entry_id)
    if coordinator is None:
        connection.send_error(msg["id"], "entry_not_found", f"No entry found for entry_id={entry_id}")
    return coordinator


def _state_payload(coordinator, *, week_id: str | None = None, day: str | None = None) -> dict[str, Any]:
    return public_state(
        coordinator.catalog,
        coordinator.store.weeks,
        selected_week=week_id or coordinator.selected_week,
        selected_day=day if day in WEEKDAYS else coordinator.selected_day,
        runtime=runtime_payload(),
    )


@websocket_api.websocket_command({vol.Required("type"): "workout_tracker/list_entries"})
@websocket_api.async_response
async def ws_list_entries(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    entries = hass.config_entries.async_entries(DOMAIN)
    payload = [{"entry_id": entry.entry_id, "title": entry.title} for entry in entries]
    connection.send_result(msg["id"], {"entries": payload})


@websocket_api.websocket_command(
    {
        vol.Required("type"): "workout_tracker/get_state",
        vol.Required("entry_id"): str,
        vol.Optional("week_id"): str,
        vol.Optional("day"): vol.In(WEEKDAYS),
        vol.Optional("include_plan", default=True): bool,
    }
)
@websocket_api.async_response
async def ws_get_state(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _coordinator(hass, connection, msg)
    if coordinator is None:
        return
    try:
        week_id = coordinator.resolve_week(msg.get("week_id"))
    except InvalidWeekIdError as e:
        connection.send_error(msg["id"], "invalid_week_id", str(e))
        return
    result: dict[str, Any] = {
        "entry_id": msg["entry_id"],
        "state": _state_payload(coordinator, week_id=week_id, day=msg.get("day")),
    }
    if msg.get("include_plan"):
        result["plan"] = catalog_as_dict(coordinator.catalog)
    connection.send_result(msg["id"], result)


@websocket_api.websocket_command(
    {
        vol.Required("type"): "workout_tracker/set_completion",
        vol.Required("entry_id"): str,
        vol.Required("key"): str,
        vol.Required("completed"): bool,
        vol.Optional("week_id"): str,
    }
)
@websocket_api.async_response
async def ws_set_completion(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _coordinator(hass, connection, msg)
    if coordinator is None:
        return
    try:
        week_id = coordinator.resolve_week(msg.get("week_id"))
    except InvalidWeekIdError as e:
        connection.send_error(msg["id"], "invalid_week_id", str(e))
        return
    await coordinator.async_set_completion(str(msg["key"]), bool(msg["completed"]), week_id=week_id)
    connection.send_result(msg["id"], {"entry_id": msg["entry_id"], "state": _state_payload(coordinator, week_id=week_id)})


@websocket_api.websocket_command(
    {
        vol.Required("type"): "workout_tracker/toggle_completion",
        vol.Required("entry_id"): str,
        vol.Required("key"): str,
        vol.Optional("week_id"): str,
    }
)
@websocket_api.async_response
async def ws_toggle_completion(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _coordinator(hass, connection, msg)
    if coordinator is None:
        return
    try:
        week_id = coordinator.resolve_week(msg.get("week_id"))
    except InvalidWeekIdError as e:
        connection.send_error(msg["id"], "invalid_week_id", str(e))
        return
    await coordinator.async_toggle_completion(str(msg["key"]), week_id=week_id)
    connection.send_result(msg["id"], {"entry_id": msg["entry_id"], "state": _state_payload(coordinator, week_id=week_id)})


@websocket_api.websocket_command(
    {
        vol.Required("type"): "workout_tracker/set_weight",
        vol.Required("entry_id"): str,
        vol.Required("key"): str,
        vol.Required("weight"): vol.Coerce(str),
        vol.Optional("week_id"): str,
    }
)
@websocket_api.async_response
async def ws_set_weight(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _coordinator(hass, connection, msg)
    if coordinator is None:
        return
    try:
        week_id = coordinator.resolve_week(msg.get("week_id"))
    except InvalidWeekIdError as e:
        connection.send_error(msg["id"], "invalid_week_id", str(e))
        return
    await coordinator.async_set_weight(str(msg["key"]), str(msg["weight"]), week_id=week_id)
    connection.send_result(msg["id"], {"entry_id": msg["entry_id"], "state": _state_payload(coordinator, week_id=week_id)})


@websocket_api.websocket_command(
    {
        vol.Required("type"): "workout_tracker/import",
        vol.Required("entry_id"): str,
        vol.Required("data"): vol.Any(str, dict),
    }
)
@websocket_api.async_response
async def ws_import(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _coordinator(hass, connection, msg)
    if coordinator is None:
        return
    result = await coordinator.async_import(msg["data"])
    # A rejected import is a normal outcome for the UI, not a command error.
    connection.send_result(
        msg["id"],
        {
            "entry_id": msg["entry_id"],
            "ok": result.ok,
            "message": result.message,
            "state": _state_payload(coordinator),
        },
    )


@websocket_api.websocket_command(
    {
        vol.Required("type"): "workout_tracker/export",
        vol.Required("entry_id"): str,
        vol.Optional("format", default="markdown"): vol.In(["markdown", "json"]),
    }
)
@websocket_api.async_response
async def ws_export(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _coordinator(hass, connection, msg)
    if coordinator is None:
        return
    fmt = msg.get("format") or "markdown"
    if fmt == "json":
        text = json_report_text(coordinator.catalog, coordinator.store.weeks)
    else:
        text = coordinator.export("markdown")
    connection.send_result(msg["id"], {"entry_id": msg["entry_id"], "format": fmt, "text": text})


def async_register(hass: HomeAssistant) -> None:
    websocket_api.async_register_command(hass, ws_list_entries)
    websocket_api.async_register_command(hass, ws_get_state)
    websocket_api.async_register_command(hass, ws_set_completion)
    websocket_api.async_register_command(hass, ws_toggle_completion)
    websocket_api.async_register_command(hass, ws_set_weight)
    websocket_api.async_register_command(hass, ws_import)
    websocket_api.async_register_command(hass, ws_export)
