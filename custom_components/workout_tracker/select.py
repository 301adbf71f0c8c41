"""Select platform for Workout Tracker."""

from __future__ import annotations

from homeassistant.components.select import SelectEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN, WEEKDAYS
from .coordinator import WorkoutTrackerCoordinator
from .entity import WorkoutTrackerEntity


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    coordinator: WorkoutTrackerCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([SelectedDaySelect(entry, coordinator)])


class SelectedDaySelect(WorkoutTrackerEntity, SelectEntity):
    """Which weekday of the plan is shown."""

    _attr_name = "Day"
    _attr_icon = "mdi:calendar-week"
    _attr_translation_key = "day"
    _attr_options = list(WEEKDAYS)

    def __init__(self, entry: ConfigEntry, coordinator: WorkoutTrackerCoordinator) -> None:
        super().__init__(entry, coordinator, "day")

    @property
    def current_option(self) -> str | None:
        return self.coordinator.selected_day

    async def async_select_option(self, option: str) -> None:
        self.coordinator.select_day(option)
