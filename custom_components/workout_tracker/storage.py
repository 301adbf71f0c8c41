"""Persistent progress store (.storage/workout-tracker-v1).

State model (version 1): mapping week id -> {"completion": {key: bool},
"weights": {key: str}}. The whole mapping is rewritten on every mutation.

The backend is injected: anything with ``async_load()`` and
``async_save(data)`` works. In Home Assistant that is
``homeassistant.helpers.storage.Store``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.storage import Store

from .const import IMPORT_INVALID, IMPORT_OK, STORAGE_KEY, STORAGE_VERSION
from .progress import (
    InvalidImportError,
    WeekData,
    get_week,
    merge_import,
    normalize_weeks,
    parse_import,
    toggle_completion,
    with_completion,
    with_weight,
)

_LOGGER = logging.getLogger(__name__)


class StorageBackend(Protocol):
    async def async_load(self) -> Any: ...

    async def async_save(self, data: Any) -> None: ...


@dataclass(frozen=True, slots=True)
class ImportResult:
    ok: bool
    message: str
    weeks: int = 0


class ProgressStore:
    """Loads once, mutates copy-on-write, persists the full mapping."""

    def __init__(self, backend: StorageBackend) -> None:
        self._backend = backend
        self._weeks: dict[str, WeekData] | None = None

    @classmethod
    def for_hass(cls, hass: HomeAssistant) -> ProgressStore:
        return cls(Store(hass, STORAGE_VERSION, STORAGE_KEY))

    @property
    def loaded(self) -> bool:
        return self._weeks is not None

    @property
    def weeks(self) -> dict[str, WeekData]:
        return dict(self._weeks or {})

    async def async_load(self) -> dict[str, WeekData]:
        if self._weeks is None:
            try:
                raw = await self._backend.async_load()
            except (HomeAssistantError, OSError, ValueError) as err:
                _LOGGER.warning("Stored progress could not be read, starting empty: %s", err)
                raw = None
            if raw is not None and not isinstance(raw, dict):
                _LOGGER.warning("Stored progress has unexpected type %s, starting empty", type(raw).__name__)
            self._weeks = normalize_weeks(raw)
            _LOGGER.debug("Loaded %d week(s) of progress", len(self._weeks))
        return self.weeks

    def get(self, week_id: str) -> WeekData:
        return get_week(self._weeks or {}, week_id)

    async def _async_replace(self, weeks: dict[str, WeekData]) -> dict[str, WeekData]:
        self._weeks = weeks
        await self._backend.async_save(self._weeks)
        return self.weeks

    async def async_set_completion(self, week_id: str, key: str, value: bool) -> WeekData:
        weeks = await self.async_load()
        await self._async_replace(with_completion(weeks, week_id, key, value))
        return self.get(week_id)

    async def async_toggle_completion(self, week_id: str, key: str) -> WeekData:
        weeks = await self.async_load()
        await self._async_replace(toggle_completion(weeks, week_id, key))
        return self.get(week_id)

    async def async_set_weight(self, week_id: str, key: str, value: str) -> WeekData:
        weeks = await self.async_load()
        await self._async_replace(with_weight(weeks, week_id, key, value))
        return self.get(week_id)

    async def async_import(self, payload: Any) -> ImportResult:
        """Merge an exported JSON document; rejected payloads leave state untouched."""
        weeks = await self.async_load()
        try:
            imported = parse_import(payload)
        except InvalidImportError as err:
            _LOGGER.debug("Import rejected: %s", err)
            return ImportResult(ok=False, message=IMPORT_INVALID)
        await self._async_replace(merge_import(weeks, imported))
        _LOGGER.debug("Imported %d week(s)", len(imported))
        return ImportResult(ok=True, message=IMPORT_OK, weeks=len(imported))
