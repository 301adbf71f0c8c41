"""Coordinator for Workout Tracker."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator
from homeassistant.util import dt as dt_util

from .catalog import PlanCatalog
from .const import CONF_PLAN, DEFAULT_PLAN, DOMAIN, WEEKDAYS
from .library import PlanLibrary
from .report import json_report, markdown_report
from .storage import ImportResult, ProgressStore
from .weeks import current_week_id, parse_week_id
from .ws_state import next_selected_week, public_state, resolve_day, runtime_payload

_LOGGER = logging.getLogger(__name__)


class WorkoutTrackerCoordinator(DataUpdateCoordinator[dict[str, Any]]):
    """Owns the progress store, the plan catalog and the selected week/day."""

    def __init__(self, hass: HomeAssistant, entry: ConfigEntry, store: ProgressStore | None = None) -> None:
        self.entry = entry
        self.store = store or ProgressStore.for_hass(hass)
        plan = str(entry.options.get(CONF_PLAN, entry.data.get(CONF_PLAN, DEFAULT_PLAN)) or DEFAULT_PLAN)
        self.library = PlanLibrary(plan)
        self.catalog: PlanCatalog | None = None
        # None means "follow the current week / today".
        self._selected_week: str | None = None
        self._selected_day: str | None = None

        super().__init__(
            hass,
            logger=_LOGGER,
            name=f"{DOMAIN}_{entry.entry_id}",
            # Picks up the Monday rollover of the current week.
            update_interval=timedelta(hours=1),
        )

    @property
    def selected_week(self) -> str:
        return self._selected_week or current_week_id()

    @property
    def selected_day(self) -> str:
        return resolve_day(self._selected_day, today=dt_util.now().date())

    def resolve_week(self, week_id: str | None) -> str:
        """Validate an explicit week id, or fall back to the selected week."""
        if not week_id:
            return self.selected_week
        parse_week_id(week_id)
        return str(week_id).strip()

    def _require_catalog(self) -> PlanCatalog:
        if self.catalog is None:
            raise HomeAssistantError(f"Plan catalog {self.library.plan!r} is not loaded")
        return self.catalog

    def _snapshot(self) -> dict[str, Any]:
        return public_state(
            self._require_catalog(),
            self.store.weeks,
            selected_week=self.selected_week,
            selected_day=self.selected_day,
            runtime=runtime_payload(),
        )

    async def _async_update_data(self) -> dict[str, Any]:
        if self.catalog is None:
            self.catalog = await self.library.async_load(self.hass)
        await self.store.async_load()
        return self._snapshot()

    def _publish(self) -> None:
        self.async_set_updated_data(self._snapshot())

    async def async_set_completion(self, key: str, value: bool, *, week_id: str | None = None) -> dict[str, Any]:
        week = self.resolve_week(week_id)
        data = await self.store.async_set_completion(week, key, value)
        self._publish()
        return data

    async def async_toggle_completion(self, key: str, *, week_id: str | None = None) -> dict[str, Any]:
        week = self.resolve_week(week_id)
        data = await self.store.async_toggle_completion(week, key)
        self._publish()
        return data

    async def async_set_weight(self, key: str, value: str, *, week_id: str | None = None) -> dict[str, Any]:
        week = self.resolve_week(week_id)
        data = await self.store.async_set_weight(week, key, value)
        self._publish()
        return data

    async def async_import(self, payload: Any) -> ImportResult:
        result = await self.store.async_import(payload)
        if result.ok:
            self._publish()
        return result

    def export(self, fmt: str = "markdown") -> str | dict[str, Any]:
        catalog = self._require_catalog()
        if fmt == "json":
            return json_report(catalog, self.store.weeks)
        return markdown_report(catalog, self.store.weeks)

    def select_week(self, week_id: str | None = None, *, step: str | None = None) -> str:
        """Move the selected week; ``step`` is previous, next or current."""
        # A rejected id raises before the selection changes.
        self._selected_week = next_selected_week(
            self._selected_week, today=dt_util.now().date(), week_id=week_id, step=step
        )
        self._publish()
        return self.selected_week

    def select_day(self, day: str | None) -> str:
        self._selected_day = day if day in WEEKDAYS else None
        self._publish()
        return self.selected_day
