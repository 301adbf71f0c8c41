"""Constants for Workout Tracker integration."""

from __future__ import annotations

from homeassistant.const import Platform

DOMAIN = "workout_tracker"

PLATFORMS: list[Platform] = [
    Platform.BUTTON,
    Platform.SENSOR,
    Platform.SELECT,
]

CONF_NAME = "name"
CONF_PLAN = "plan"

DEFAULT_NAME = "Workout Tracker"
DEFAULT_PLAN = "five_day_tennis"

PLAN_CHOICES = ["five_day_tennis", "five_day_rest_thursday"]

STORAGE_KEY = "workout-tracker-v1"
STORAGE_VERSION = 1

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

HISTORY_WEEKS = 8

IMPORT_OK = "Imported successfully"
IMPORT_INVALID = "Invalid data"
