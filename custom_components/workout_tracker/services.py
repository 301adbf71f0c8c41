"""Services for Workout Tracker."""

from __future__ import annotations

import voluptuous as vol

from homeassistant.core import HomeAssistant, ServiceCall, ServiceResponse, SupportsResponse

from .const import DOMAIN, WEEKDAYS
from .weeks import InvalidWeekIdError

SERVICE_SET_COMPLETION = "set_completion"
SERVICE_TOGGLE_COMPLETION = "toggle_completion"
SERVICE_SET_WEIGHT = "set_weight"
SERVICE_IMPORT = "import_progress"
SERVICE_EXPORT = "export_report"
SERVICE_SELECT_WEEK = "select_week"
SERVICE_SELECT_DAY = "select_day"

_SET_COMPLETION_SCHEMA = vol.Schema(
    {
        vol.Required("entry_id"): str,
        vol.Required("key"): str,
        vol.Required("completed"): bool,
        vol.Optional("week_id"): str,
    }
)
_TOGGLE_COMPLETION_SCHEMA = vol.Schema(
    {
        vol.Required("entry_id"): str,
        vol.Required("key"): str,
        vol.Optional("week_id"): str,
    }
)
_SET_WEIGHT_SCHEMA = vol.Schema(
    {
        vol.Required("entry_id"): str,
        vol.Required("key"): str,
        vol.Required("weight"): vol.Coerce(str),
        vol.Optional("week_id"): str,
    }
)
_IMPORT_SCHEMA = vol.Schema({vol.Required("entry_id"): str, vol.Required("data"): vol.Any(str, dict)})
_EXPORT_SCHEMA = vol.Schema(
    {
        vol.Required("entry_id"): str,
        vol.Optional("format", default="markdown"): vol.In(["markdown", "json"]),
    }
)
_SELECT_WEEK_SCHEMA = vol.Schema(
    {
        vol.Required("entry_id"): str,
        vol.Optional("week_id"): str,
        vol.Optional("step"): vol.In(["previous", "next", "current"]),
    }
)
_SELECT_DAY_SCHEMA = vol.Schema({vol.Required("entry_id"): str, vol.Required("day"): vol.In(WEEKDAYS)})


async def async_register(hass: HomeAssistant) -> None:
    def _coordinator_for_entry(entry_id: str):
        return hass.data.get(DOMAIN, {}).get(entry_id)

    async def _async_set_completion(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        try:
            week = await coordinator.async_set_completion(
                str(call.data["key"]), bool(call.data["completed"]), week_id=call.data.get("week_id")
            )
        except InvalidWeekIdError:
            return {"ok": False, "error": "invalid_week_id"}
        return {"ok": True, "entry_id": entry_id, "week": week}

    async def _async_toggle_completion(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        try:
            week = await coordinator.async_toggle_completion(str(call.data["key"]), week_id=call.data.get("week_id"))
        except InvalidWeekIdError:
            return {"ok": False, "error": "invalid_week_id"}
        return {"ok": True, "entry_id": entry_id, "week": week}

    async def _async_set_weight(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        try:
            week = await coordinator.async_set_weight(
                str(call.data["key"]), str(call.data["weight"]), week_id=call.data.get("week_id")
            )
        except InvalidWeekIdError:
            return {"ok": False, "error": "invalid_week_id"}
        return {"ok": True, "entry_id": entry_id, "week": week}

    async def _async_import(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        result = await coordinator.async_import(call.data["data"])
        return {"ok": result.ok, "entry_id": entry_id, "message": result.message, "weeks": result.weeks}

    async def _async_export(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        fmt = str(call.data.get("format") or "markdown")
        return {"ok": True, "entry_id": entry_id, "format": fmt, "report": coordinator.export(fmt)}

    async def _async_select_week(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        try:
            week_id = coordinator.select_week(call.data.get("week_id"), step=call.data.get("step"))
        except InvalidWeekIdError:
            return {"ok": False, "error": "invalid_week_id"}
        return {"ok": True, "entry_id": entry_id, "week_id": week_id}

    async def _async_select_day(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        day = coordinator.select_day(str(call.data["day"]))
        return {"ok": True, "entry_id": entry_id, "day": day}

    registrations = [
        (SERVICE_SET_COMPLETION, _async_set_completion, _SET_COMPLETION_SCHEMA, SupportsResponse.OPTIONAL),
        (SERVICE_TOGGLE_COMPLETION, _async_toggle_completion, _TOGGLE_COMPLETION_SCHEMA, SupportsResponse.OPTIONAL),
        (SERVICE_SET_WEIGHT, _async_set_weight, _SET_WEIGHT_SCHEMA, SupportsResponse.OPTIONAL),
        (SERVICE_IMPORT, _async_import, _IMPORT_SCHEMA, SupportsResponse.OPTIONAL),
        (SERVICE_EXPORT, _async_export, _EXPORT_SCHEMA, SupportsResponse.ONLY),
        (SERVICE_SELECT_WEEK, _async_select_week, _SELECT_WEEK_SCHEMA, SupportsResponse.OPTIONAL),
        (SERVICE_SELECT_DAY, _async_select_day, _SELECT_DAY_SCHEMA, SupportsResponse.OPTIONAL),
    ]
    for service, handler, schema, supports_response in registrations:
        if hass.services.has_service(DOMAIN, service):
            continue
        hass.services.async_register(
            DOMAIN,
            service,
            handler,
            schema=schema,
            supports_response=supports_response,
        )
