"""Plan catalog types and the derivations built on them.

A catalog maps the seven weekday names to a ``DayPlan``. Entry keys join the
catalog to the per-week logs and are identical every week:

- ``{day}-{group}-{pair}-A`` / ``-B`` for exercise slots
- ``{day}-cardio-{n}`` for the n-th cardio session of a day
- ``{day}-session-{n}`` for the n-th session slot of a day
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

from .const import WEEKDAYS

NO_EXERCISE_MARKERS = frozenset({"—", "–", "-", ""})


@dataclass(frozen=True, slots=True)
class ExercisePair:
    primary: str
    secondary: str | None = None
    reps: str = ""
    rest: str = ""


@dataclass(frozen=True, slots=True)
class ExerciseGroup:
    name: str
    sets: int
    rpe: str
    pairs: tuple[ExercisePair, ...] = ()


@dataclass(frozen=True, slots=True)
class DayPlan:
    label: str
    icon: str = ""
    note: str = ""
    sessions: tuple[str, ...] = ()
    groups: tuple[ExerciseGroup, ...] = ()

    @property
    def is_rest(self) -> bool:
        return not self.groups


@dataclass(frozen=True)
class PlanCatalog:
    name: str
    title: str
    summary: str
    days: Mapping[str, DayPlan] = field(default_factory=dict)

    def day(self, day: str) -> DayPlan:
        return self.days[day]

    @cached_property
    def key_to_exercise_name(self) -> dict[str, str]:
        """Entry key -> exercise display name, over every exercise slot."""
        index: dict[str, str] = {}
        for day in self.days:
            for key, _pair, name in iter_exercise_slots(self.days[day], day):
                index[key] = name
        return index


def has_second_exercise(pair: ExercisePair) -> bool:
    """True for a superset; False for a straight set (secondary missing or a dash)."""
    second = (pair.secondary or "").strip()
    return second not in NO_EXERCISE_MARKERS


def entry_key(day: str, group_index: int, pair_index: int, slot: str) -> str:
    return f"{day}-{group_index}-{pair_index}-{slot}"


def cardio_key(day: str, index: int) -> str:
    return f"{day}-cardio-{index}"


def session_key(day: str, index: int) -> str:
    return f"{day}-session-{index}"


def iter_exercise_slots(day_plan: DayPlan, day: str) -> Iterator[tuple[str, ExercisePair, str]]:
    """Yield ``(entry_key, pair, exercise_name)`` in display order (A before B)."""
    for gi, group in enumerate(day_plan.groups):
        for pi, pair in enumerate(group.pairs):
            yield entry_key(day, gi, pi, "A"), pair, pair.primary
            if has_second_exercise(pair):
                yield entry_key(day, gi, pi, "B"), pair, str(pair.secondary).strip()


def iter_entry_keys(day_plan: DayPlan, day: str) -> Iterator[str]:
    for key, _pair, _name in iter_exercise_slots(day_plan, day):
        yield key


def total_sets(day_plan: DayPlan) -> int:
    return sum(group.sets * len(group.pairs) for group in day_plan.groups)


def _completion(week_data: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not isinstance(week_data, Mapping):
        return {}
    completion = week_data.get("completion")
    return completion if isinstance(completion, Mapping) else {}


def is_day_complete(catalog: PlanCatalog, week_data: Mapping[str, Any] | None, day: str) -> bool:
    day_plan = catalog.day(day)
    if day_plan.is_rest:
        return False
    completion = _completion(week_data)
    return all(bool(completion.get(key)) for key in iter_entry_keys(day_plan, day))


def day_progress(catalog: PlanCatalog, week_data: Mapping[str, Any] | None, day: str) -> tuple[int, int]:
    """Return ``(completed, total)`` exercise slots for one day."""
    completion = _completion(week_data)
    keys = list(iter_entry_keys(catalog.day(day), day))
    done = sum(1 for key in keys if completion.get(key))
    return done, len(keys)


def _secondary_from_raw(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    if text in NO_EXERCISE_MARKERS:
        return None
    return text


def catalog_from_dict(raw: Mapping[str, Any]) -> PlanCatalog:
    """Build a catalog from its JSON form.

    Sentinel dashes in ``secondary`` are read as "no second exercise". All seven
    weekdays must be present.
    """
    days_raw = raw.get("days")
    if not isinstance(days_raw, Mapping):
        raise ValueError("Plan catalog has no 'days' mapping")

    days: dict[str, DayPlan] = {}
    for day in WEEKDAYS:
        d = days_raw.get(day)
        if not isinstance(d, Mapping):
            raise ValueError(f"Plan catalog is missing {day}")
        groups: list[ExerciseGroup] = []
        for g in d.get("groups") or []:
            pairs = tuple(
                ExercisePair(
                    primary=str(p.get("primary") or "").strip(),
                    secondary=_secondary_from_raw(p.get("secondary")),
                    reps=str(p.get("reps") or ""),
                    rest=str(p.get("rest") or ""),
                )
                for p in (g.get("pairs") or [])
                if isinstance(p, Mapping)
            )
            groups.append(
                ExerciseGroup(
                    name=str(g.get("name") or ""),
                    sets=int(g.get("sets") or 0),
                    rpe=str(g.get("rpe") or ""),
                    pairs=pairs,
                )
            )
        days[day] = DayPlan(
            label=str(d.get("label") or ""),
            icon=str(d.get("icon") or ""),
            note=str(d.get("note") or ""),
            sessions=tuple(str(s) for s in (d.get("sessions") or [])),
            groups=tuple(groups),
        )

    return PlanCatalog(
        name=str(raw.get("name") or ""),
        title=str(raw.get("title") or ""),
        summary=str(raw.get("summary") or ""),
        days=days,
    )


def catalog_as_dict(catalog: PlanCatalog) -> dict[str, Any]:
    """Public JSON shape of a catalog, with derived per-day figures for the UI."""
    days: dict[str, Any] = {}
    for day in WEEKDAYS:
        d = catalog.day(day)
        groups = []
        for gi, g in enumerate(d.groups):
            pairs = []
            for pi, p in enumerate(g.pairs):
                superset = has_second_exercise(p)
                pairs.append(
                    {
                        "primary": p.primary,
                        "secondary": p.secondary if superset else None,
                        "reps": p.reps,
                        "rest": p.rest,
                        "superset": superset,
                        "keys": [entry_key(day, gi, pi, "A"), *([entry_key(day, gi, pi, "B")] if superset else [])],
                    }
                )
            groups.append({"name": g.name, "sets": g.sets, "rpe": g.rpe, "pairs": pairs})
        days[day] = {
            "label": d.label,
            "icon": d.icon,
            "note": d.note,
            "sessions": list(d.sessions),
            "session_keys": [session_key(day, i) for i in range(len(d.sessions))],
            "groups": groups,
            "rest": d.is_rest,
            "total_sets": total_sets(d),
        }
    return {"name": catalog.name, "title": catalog.title, "summary": catalog.summary, "days": days}
