"""Sensor platform for Workout Tracker."""

from __future__ import annotations

from typing import Any

from homeassistant.components.sensor import SensorEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import PERCENTAGE
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .catalog import total_sets
from .const import DOMAIN
from .coordinator import WorkoutTrackerCoordinator
from .entity import WorkoutTrackerEntity


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    coordinator: WorkoutTrackerCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([WeekProgressSensor(entry, coordinator), SelectedDaySensor(entry, coordinator)])


class WeekProgressSensor(WorkoutTrackerEntity, SensorEntity):
    """Share of exercise slots completed in the selected week."""

    _attr_name = "Week progress"
    _attr_icon = "mdi:dumbbell"
    _attr_translation_key = "week_progress"
    _attr_native_unit_of_measurement = PERCENTAGE

    def __init__(self, entry: ConfigEntry, coordinator: WorkoutTrackerCoordinator) -> None:
        super().__init__(entry, coordinator, "week_progress")

    @property
    def native_value(self) -> float | None:
        days = (self.coordinator.data or {}).get("days") or {}
        done = sum(int(d.get("done") or 0) for d in days.values())
        total = sum(int(d.get("total") or 0) for d in days.values())
        if not total:
            return None
        return round(done * 100 / total, 1)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        data = self.coordinator.data or {}
        days = data.get("days") or {}
        return {
            "entry_id": self._entry.entry_id,
            "week_id": data.get("selected_week"),
            "week_label": data.get("week_label"),
            "current_week_id": (data.get("runtime") or {}).get("current_week_id"),
            "completed_days": [day for day, d in days.items() if d.get("complete")],
        }


class SelectedDaySensor(WorkoutTrackerEntity, SensorEntity):
    """Label of the selected day's workout."""

    _attr_name = "Selected day"
    _attr_icon = "mdi:calendar-today"
    _attr_translation_key = "selected_day"

    def __init__(self, entry: ConfigEntry, coordinator: WorkoutTrackerCoordinator) -> None:
        super().__init__(entry, coordinator, "selected_day")

    @property
    def native_value(self) -> str | None:
        data = self.coordinator.data or {}
        day = data.get("selected_day")
        return ((data.get("days") or {}).get(day) or {}).get("label")

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        data = self.coordinator.data or {}
        day = str(data.get("selected_day") or "")
        attrs: dict[str, Any] = {"day": day}
        catalog = self.coordinator.catalog
        if catalog is not None and day in catalog.days:
            day_plan = catalog.day(day)
            attrs["icon"] = day_plan.icon
            attrs["note"] = day_plan.note
            attrs["sessions"] = list(day_plan.sessions)
            attrs["total_sets"] = total_sets(day_plan)
        attrs["complete"] = bool(((data.get("days") or {}).get(day) or {}).get("complete"))
        attrs["cardio"] = data.get("cardio")
        return attrs
