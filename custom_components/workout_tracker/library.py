"""Plan catalog loader."""

from __future__ import annotations

import json
from pathlib import Path

from homeassistant.core import HomeAssistant

from .catalog import PlanCatalog, catalog_from_dict
from .const import DEFAULT_PLAN, PLAN_CHOICES

PLANS_DIR = Path(__file__).parent / "data" / "plans"


def load_catalog(name: str) -> PlanCatalog:
    """Read a bundled catalog from disk (blocking)."""
    if name not in PLAN_CHOICES:
        raise ValueError(f"Unknown plan: {name}")
    raw = json.loads((PLANS_DIR / f"{name}.json").read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Plan file for {name} is not a JSON object")
    raw.setdefault("name", name)
    return catalog_from_dict(raw)


class PlanLibrary:
    """Loads one bundled catalog and caches it."""

    def __init__(self, plan: str = DEFAULT_PLAN) -> None:
        self.plan = plan if plan in PLAN_CHOICES else DEFAULT_PLAN
        self._cache: PlanCatalog | None = None

    async def async_load(self, hass: HomeAssistant) -> PlanCatalog:
        if self._cache is not None:
            return self._cache
        self._cache = await hass.async_add_executor_job(load_catalog, self.plan)
        return self._cache
