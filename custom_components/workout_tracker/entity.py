"""Base entity for Workout Tracker."""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import CONF_NAME, CONF_PLAN, DEFAULT_NAME, DEFAULT_PLAN, DOMAIN
from .coordinator import WorkoutTrackerCoordinator


class WorkoutTrackerEntity(CoordinatorEntity[WorkoutTrackerCoordinator]):
    """Shared device and unique id wiring; ``key`` names the entity within the entry."""

    _attr_has_entity_name = True

    def __init__(self, entry: ConfigEntry, coordinator: WorkoutTrackerCoordinator, key: str) -> None:
        super().__init__(coordinator)
        self._entry = entry
        self._attr_unique_id = f"{entry.entry_id}_{key}"
        name = entry.options.get(CONF_NAME, entry.data.get(CONF_NAME, DEFAULT_NAME))
        plan = entry.options.get(CONF_PLAN, entry.data.get(CONF_PLAN, DEFAULT_PLAN))
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, entry.entry_id)},
            name=str(name),
            manufacturer="Open source",
            model=f"Workout Tracker ({plan})",
        )
