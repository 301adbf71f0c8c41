from __future__ import annotations

from datetime import date, timedelta

import pytest

from custom_components.workout_tracker.weeks import (
    InvalidWeekIdError,
    current_week_id,
    format_week_id,
    is_week_id,
    monday_of,
    next_week_id,
    parse_week_id,
    previous_week_id,
    step_week_id,
    week_label,
    week_start,
    weekday_name,
)


def _days(start: date, count: int) -> list[date]:
    return [start + timedelta(days=i) for i in range(count)]


def test_monday_of_is_idempotent_and_a_monday() -> None:
    for d in _days(date(2024, 12, 1), 120):
        m = monday_of(d)
        assert m.weekday() == 0
        assert monday_of(m) == m
        assert 0 <= (d - m).days <= 6


def test_sunday_maps_to_the_monday_six_days_earlier() -> None:
    sunday = date(2025, 2, 2)
    assert weekday_name(sunday) == "Sunday"
    assert monday_of(sunday) == date(2025, 1, 27)


def test_current_week_id_counts_from_monday_before_january_first() -> None:
    assert current_week_id(date(2025, 1, 29)) == "2025-W05"
    assert current_week_id(date(2025, 2, 2)) == "2025-W05"
    # Wednesday 2025-01-01 sits in the week of Monday 2024-12-30.
    assert current_week_id(date(2025, 1, 1)) == "2024-W53"
    assert current_week_id(date(2024, 1, 3)) == "2024-W01"


def test_current_week_id_uses_year_of_monday() -> None:
    # 2025-12-29 is a Monday; Jan 1 2026 still belongs to that week.
    assert current_week_id(date(2025, 12, 31)) == "2025-W53"
    assert current_week_id(date(2026, 1, 1)) == "2025-W53"
    assert current_week_id(date(2026, 1, 5)) == "2026-W02"


def test_week_label_anchors_on_january_fourth() -> None:
    assert week_start("2025-W05") == date(2025, 1, 27)
    assert week_label("2025-W05") == "Jan 27–Feb 2"
    assert week_label("2026-W01") == "Dec 29–Jan 4"


def test_week_rollover_uses_52_weeks() -> None:
    assert next_week_id("2025-W52") == "2026-W01"
    assert previous_week_id("2026-W01") == "2025-W52"
    assert next_week_id("2025-W09") == "2025-W10"
    assert previous_week_id("2025-W10") == "2025-W09"


def test_previous_of_next_round_trips_for_regular_weeks() -> None:
    for year in (2024, 2025, 2026):
        for week in range(1, 53):
            wid = format_week_id(year, week)
            assert previous_week_id(next_week_id(wid)) == wid
            assert next_week_id(previous_week_id(wid)) == wid


def test_week_53_is_not_reachable_by_stepping() -> None:
    long_week = current_week_id(date(2025, 12, 31))
    assert long_week == "2025-W53"
    assert next_week_id("2025-W52") != long_week
    assert previous_week_id("2026-W01") != long_week
    assert next_week_id(long_week) == "2026-W01"
    assert previous_week_id(long_week) == "2025-W52"


def test_lexicographic_order_matches_chronological_order() -> None:
    dates = _days(date(2023, 11, 1), 900)[::5]
    ids = [current_week_id(d) for d in dates]
    assert ids == sorted(ids)


def test_parse_week_id_rejects_malformed_ids() -> None:
    assert parse_week_id("2025-W05") == (2025, 5)
    for bad in ("2025-5", "2025-W5", "W05-2025", "", "2025-W005", "2025-W00", "2025-W54", "2025-W99"):
        with pytest.raises(InvalidWeekIdError):
            parse_week_id(bad)
    with pytest.raises(ValueError):
        next_week_id("nonsense")


def test_stepping_never_leaves_the_valid_range() -> None:
    for year in (2024, 2025):
        for week in range(1, 54):
            wid = format_week_id(year, week)
            assert is_week_id(wid)
            assert is_week_id(previous_week_id(wid))
            assert is_week_id(next_week_id(wid))
            week_label(step_week_id(wid, "previous"))
            week_label(step_week_id(wid, "next"))


def test_is_week_id_and_unknown_step() -> None:
    assert is_week_id("2025-W53") is True
    assert is_week_id("2025-W00") is False
    assert is_week_id("someday") is False
    with pytest.raises(ValueError):
        step_week_id("2025-W05", "sideways")
