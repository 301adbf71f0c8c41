"""Button platform for Workout Tracker."""

from __future__ import annotations

from homeassistant.components.button import ButtonEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .coordinator import WorkoutTrackerCoordinator
from .entity import WorkoutTrackerEntity


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    coordinator: WorkoutTrackerCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        [
            WeekStepButton(entry, coordinator, step="previous", name="Previous week", icon="mdi:chevron-left"),
            WeekStepButton(entry, coordinator, step="next", name="Next week", icon="mdi:chevron-right"),
            WeekStepButton(entry, coordinator, step="current", name="This week", icon="mdi:calendar-today"),
        ]
    )


class WeekStepButton(WorkoutTrackerEntity, ButtonEntity):
    """Move the selected week back, forward, or to the current week."""

    def __init__(
        self,
        entry: ConfigEntry,
        coordinator: WorkoutTrackerCoordinator,
        *,
        step: str,
        name: str,
        icon: str,
    ) -> None:
        super().__init__(entry, coordinator, f"week_{step}")
        self._step = step
        self._attr_name = name
        self._attr_icon = icon
        self._attr_translation_key = f"week_{step}"

    async def async_press(self) -> None:
        self.coordinator.select_week(step=self._step)
