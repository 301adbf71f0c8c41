from __future__ import annotations

from datetime import date

import pytest

from custom_components.workout_tracker.library import load_catalog
from custom_components.workout_tracker.weeks import InvalidWeekIdError
from custom_components.workout_tracker.ws_state import next_selected_week, public_state, resolve_day

# Wednesday of 2025-W05.
TODAY = date(2025, 1, 29)


def test_steps_start_from_the_current_week() -> None:
    assert next_selected_week(None, today=TODAY, step="previous") == "2025-W04"
    assert next_selected_week(None, today=TODAY, step="next") == "2025-W06"
    assert next_selected_week("2025-W10", today=TODAY, step="next") == "2025-W11"
    assert next_selected_week("2025-W10", today=TODAY, step="current") is None


def test_landing_on_the_current_week_follows_it_again() -> None:
    assert next_selected_week("2025-W04", today=TODAY, step="next") is None
    assert next_selected_week("2025-W10", today=TODAY, week_id="2025-W05") is None
    assert next_selected_week(None, today=TODAY, week_id="2024-W40") == "2024-W40"


def test_no_week_and_no_step_keeps_selection() -> None:
    assert next_selected_week("2025-W10", today=TODAY) == "2025-W10"
    assert next_selected_week(None, today=TODAY) is None


@pytest.mark.parametrize("bad", ["2025-W00", "2025-W54", "2025-W99", "nonsense"])
def test_out_of_range_week_is_rejected(bad: str) -> None:
    selected = "2025-W10"
    with pytest.raises(InvalidWeekIdError):
        selected = next_selected_week(selected, today=TODAY, week_id=bad)
    assert selected == "2025-W10"


def test_stepping_from_range_edges_stays_renderable() -> None:
    catalog = load_catalog("five_day_tennis")
    for start, step in (("2025-W01", "previous"), ("2025-W52", "next"), ("2025-W53", "next")):
        week = next_selected_week(start, today=TODAY, step=step)
        state = public_state(catalog, {}, selected_week=week, selected_day="Monday")
        assert state["week_label"]
    assert next_selected_week("2025-W01", today=TODAY, step="previous") == "2024-W52"
    assert next_selected_week("2025-W53", today=TODAY, step="next") == "2026-W01"


def test_unknown_day_falls_back_to_today() -> None:
    assert resolve_day("Friday", today=TODAY) == "Friday"
    assert resolve_day(None, today=TODAY) == "Wednesday"
    assert resolve_day("Funday", today=TODAY) == "Wednesday"


def test_public_state_for_selected_week() -> None:
    catalog = load_catalog("five_day_tennis")
    weeks = {
        "2025-W04": {"completion": {}, "weights": {"Monday-0-0-A": "77.5"}},
        "2025-W05": {"completion": {"Monday-0-0-A": True}, "weights": {"Monday-0-0-A": "80"}},
    }
    state = public_state(catalog, weeks, selected_week="2025-W05", selected_day="Monday")
    assert state["week_label"] == "Jan 27–Feb 2"
    assert state["last_weights"] == {"Monday-0-0-A": "77.5"}
    assert state["days"]["Monday"] == {
        "label": "Chest + Back + Abs",
        "rest": False,
        "complete": False,
        "done": 1,
        "total": 8,
    }
    assert state["days"]["Sunday"]["rest"] is True
    assert state["cardio"]["sessions"][0]["key"] == "Monday-cardio-0"
    assert state["runtime"] == {}
