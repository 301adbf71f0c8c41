from __future__ import annotations

import json
from datetime import date

import pytest

from custom_components.workout_tracker.library import load_catalog
from custom_components.workout_tracker.progress import merge_import, parse_import
from custom_components.workout_tracker.report import (
    exercise_history,
    json_report,
    json_report_text,
    markdown_report,
    recent_week_ids,
)

MONDAY_LINE = (
    "Bench Press 80 kg done; Bent Over Row — kg —; Incline DB Press — kg —; "
    "Seated Cable Row — kg —; Cable Fly (mid-chest) — kg —; Lat Pulldown — kg —; "
    "Hanging Leg Raise — kg —; Cable Crunch — kg —."
)


@pytest.fixture
def catalog():
    return load_catalog("five_day_tennis")


@pytest.fixture
def weeks() -> dict:
    return {"2025-W05": {"completion": {"Monday-0-0-A": True}, "weights": {"Monday-0-0-A": "80"}}}


def test_exercise_history_single_week(catalog, weeks) -> None:
    assert exercise_history(catalog, weeks) == {"Bench Press": ["80"]}


def test_history_skips_blank_and_unknown_keys(catalog) -> None:
    weeks = {
        "2025-W05": {"completion": {}, "weights": {"Monday-0-0-A": "", "Monday-9-9-A": "10"}},
        "2025-W04": {"completion": {}, "weights": {"Monday-0-0-B": "60"}},
    }
    assert exercise_history(catalog, weeks) == {"Bent Over Row": ["60"]}


def test_history_uses_last_eight_stored_weeks_newest_first(catalog) -> None:
    ids = ["2024-W40", "2024-W44", "2024-W50", "2025-W01", "2025-W02", "2025-W03", "2025-W05", "2025-W07", "2025-W10"]
    weeks = {
        wid: {"completion": {}, "weights": {"Monday-0-0-A": str(i)}} for i, wid in enumerate(ids)
    }
    assert recent_week_ids(weeks) == list(reversed(ids))[:8]
    assert exercise_history(catalog, weeks) == {"Bench Press": ["8", "7", "6", "5", "4", "3", "2", "1"]}


def test_markdown_report_layout(catalog, weeks) -> None:
    text = markdown_report(catalog, weeks, today=date(2025, 2, 3))
    lines = text.split("\n")
    assert lines[0] == "# Workout plan progress report"
    assert "Export date: 2025-02-03" in lines
    assert f"Plan: {catalog.summary}" in lines
    assert "## Week 2025-W05 (Jan 27–Feb 2)" in lines

    heading = lines.index("### Monday — Chest + Back + Abs")
    assert lines[heading + 1] == MONDAY_LINE
    assert "### Tuesday — Shoulders + Arms + Core" in lines
    assert not any(line.startswith("### Sunday") for line in lines)

    assert "## Progress by exercise (last 8 weeks, newest first)" in lines
    assert lines[-1] == "- **Bench Press**: 80 kg"


def test_markdown_report_without_progress(catalog) -> None:
    text = markdown_report(catalog, {}, today=date(2025, 2, 3))
    assert "## Week" not in text
    assert text.endswith("## Progress by exercise (last 8 weeks, newest first)\n")


def test_json_report_adds_labels(catalog, weeks) -> None:
    doc = json_report(catalog, weeks)
    assert doc["weeks"]["2025-W05"] == {
        "completion": {"Monday-0-0-A": True},
        "weights": {"Monday-0-0-A": "80"},
        "label": "Jan 27–Feb 2",
    }
    assert doc["exerciseHistory"] == {"Bench Press": ["80"]}


def test_json_report_text_round_trips_through_import(catalog, weeks) -> None:
    text = json_report_text(catalog, weeks)
    assert "Jan 27–Feb 2" in text
    assert json.loads(text)["weeks"]["2025-W05"]["weights"] == {"Monday-0-0-A": "80"}
    assert merge_import({}, parse_import(text)) == weeks


def test_malformed_imported_week_ids_get_empty_label(catalog) -> None:
    doc = json_report(catalog, {"someday": {"completion": {}, "weights": {}}})
    assert doc["weeks"]["someday"]["label"] == ""
