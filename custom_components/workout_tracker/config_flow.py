"""Config flow for Workout Tracker."""

from __future__ import annotations

from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.core import callback

from .const import CONF_NAME, CONF_PLAN, DEFAULT_NAME, DEFAULT_PLAN, DOMAIN, PLAN_CHOICES


def _schema(name: str, plan: str) -> vol.Schema:
    return vol.Schema(
        {
            vol.Required(CONF_NAME, default=name): str,
            vol.Required(CONF_PLAN, default=plan): vol.In(PLAN_CHOICES),
        }
    )


def _clean(user_input: dict[str, Any]) -> dict[str, Any]:
    name = str(user_input.get(CONF_NAME, DEFAULT_NAME)).strip() or DEFAULT_NAME
    plan = str(user_input.get(CONF_PLAN, DEFAULT_PLAN))
    if plan not in PLAN_CHOICES:
        plan = DEFAULT_PLAN
    return {CONF_NAME: name, CONF_PLAN: plan}


class WorkoutTrackerConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Workout Tracker."""

    VERSION = 1

    async def async_step_user(self, user_input: dict[str, Any] | None = None):
        # Progress lives under one fixed storage key, so only one entry makes sense.
        await self.async_set_unique_id(DOMAIN)
        self._abort_if_unique_id_configured()

        if user_input is not None:
            data = _clean(user_input)
            return self.async_create_entry(title=data[CONF_NAME], data=data)

        return self.async_show_form(step_id="user", data_schema=_schema(DEFAULT_NAME, DEFAULT_PLAN))

    @staticmethod
    @callback
    def async_get_options_flow(config_entry):
        return WorkoutTrackerOptionsFlow()


class WorkoutTrackerOptionsFlow(config_entries.OptionsFlow):
    """Rename the tracker or switch plan catalog; logged progress is kept."""

    async def async_step_init(self, user_input: dict[str, Any] | None = None):
        if user_input is not None:
            return self.async_create_entry(title="", data=_clean(user_input))

        entry = self.config_entry
        name = entry.options.get(CONF_NAME, entry.data.get(CONF_NAME, DEFAULT_NAME))
        plan = entry.options.get(CONF_PLAN, entry.data.get(CONF_PLAN, DEFAULT_PLAN))
        return self.async_show_form(step_id="init", data_schema=_schema(str(name), str(plan)))
