from __future__ import annotations

import json

import pytest

from custom_components.workout_tracker.progress import (
    InvalidImportError,
    empty_week,
    get_week,
    last_weight,
    merge_import,
    normalize_weeks,
    parse_import,
    toggle_completion,
    with_completion,
    with_weight,
)


def _store() -> dict:
    return {
        "2025-W05": {"completion": {"Monday-0-0-A": True}, "weights": {"Monday-0-0-A": "80"}},
        "2025-W04": {"completion": {}, "weights": {"Monday-0-0-A": "77.5"}},
    }


def test_get_week_defaults_without_writing_back() -> None:
    weeks = _store()
    assert get_week(weeks, "2025-W10") == empty_week()
    assert "2025-W10" not in weeks
    assert get_week(weeks, "2025-W05")["weights"] == {"Monday-0-0-A": "80"}


def test_with_completion_is_copy_on_write() -> None:
    weeks = _store()
    updated = with_completion(weeks, "2025-W05", "Monday-0-0-B", True)
    assert updated["2025-W05"]["completion"] == {"Monday-0-0-A": True, "Monday-0-0-B": True}
    assert weeks["2025-W05"]["completion"] == {"Monday-0-0-A": True}
    assert updated["2025-W04"] is weeks["2025-W04"]


def test_set_completion_is_idempotent() -> None:
    once = with_completion({}, "2025-W05", "Monday-0-0-A", True)
    twice = with_completion(once, "2025-W05", "Monday-0-0-A", True)
    assert once == twice


def test_toggle_completion_flips_flag() -> None:
    on = toggle_completion({}, "2025-W05", "Monday-cardio-0")
    assert on["2025-W05"]["completion"]["Monday-cardio-0"] is True
    off = toggle_completion(on, "2025-W05", "Monday-cardio-0")
    assert off["2025-W05"]["completion"]["Monday-cardio-0"] is False


def test_weights_are_opaque_strings() -> None:
    weeks = with_weight({}, "2025-W05", "Monday-0-0-A", "80kg?")
    assert weeks["2025-W05"] == {"completion": {}, "weights": {"Monday-0-0-A": "80kg?"}}
    cleared = with_weight(weeks, "2025-W05", "Monday-0-0-A", "")
    assert cleared["2025-W05"]["weights"]["Monday-0-0-A"] == ""


def test_last_weight_reads_previous_week() -> None:
    weeks = _store()
    assert last_weight(weeks, "2025-W05", "Monday-0-0-A") == "77.5"
    assert last_weight(weeks, "2025-W06", "Monday-0-0-A") == "80"
    assert last_weight(weeks, "2025-W05", "Monday-0-0-B") is None
    assert last_weight(weeks, "2025-W09", "Monday-0-0-A") is None


def test_normalize_weeks_fails_open() -> None:
    assert normalize_weeks(None) == {}
    assert normalize_weeks("garbage") == {}
    assert normalize_weeks([1, 2]) == {}
    assert normalize_weeks({"2025-W01": None}) == {"2025-W01": empty_week()}
    assert normalize_weeks({"2025-W01": {"checked": {"k": True}}}) == {
        "2025-W01": {"completion": {"k": True}, "weights": {}}
    }


@pytest.mark.parametrize("payload", ["{not json", "[]", '"weeks"', '{"weeks": []}', '{"weeks": null}', "{}", b"\xff"])
def test_parse_import_rejects_bad_payloads(payload) -> None:
    with pytest.raises(InvalidImportError):
        parse_import(payload)


def test_parse_import_normalizes_weeks_and_drops_derived_fields() -> None:
    text = json.dumps(
        {
            "weeks": {
                "2025-W05": {"completion": {"a": True}, "label": "Jan 27–Feb 2"},
                "2025-W06": {},
            },
            "exerciseHistory": {"Bench Press": ["80"]},
        }
    )
    assert parse_import(text) == {
        "2025-W05": {"completion": {"a": True}, "weights": {}},
        "2025-W06": {"completion": {}, "weights": {}},
    }
    assert parse_import({"weeks": {}}) == {}


def test_merge_import_replaces_weeks_wholesale() -> None:
    weeks = _store()
    imported = {"2025-W05": {"completion": {}, "weights": {"Monday-0-1-A": "40"}}}
    merged = merge_import(weeks, imported)
    assert merged["2025-W05"] == {"completion": {}, "weights": {"Monday-0-1-A": "40"}}
    assert merged["2025-W04"] == weeks["2025-W04"]
    assert merge_import(weeks, {}) == weeks
