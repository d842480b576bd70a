"""Tests for reading activity exports from disk."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from activity_import import ActivityImportError, load_activities


class TestLoadActivities:
    def test_list_payload(self, tmp_path: Path, strava_activity: dict, strava_ride: dict) -> None:
        path = tmp_path / "activities.json"
        path.write_text(json.dumps([strava_activity, strava_ride]))
        records = load_activities(path)
        assert [r.activity_id for r in records] == ["11223344556", "98765"]

    def test_wrapped_payload(self, tmp_path: Path, garmin_activity: dict) -> None:
        path = tmp_path / "export.json"
        path.write_text(json.dumps({"activities": [garmin_activity]}))
        assert len(load_activities(str(path))) == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ActivityImportError, match="not found"):
            load_activities(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ActivityImportError, match="not valid JSON"):
            load_activities(path)

    def test_wrong_shape(self, tmp_path: Path) -> None:
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"items": []}))
        with pytest.raises(ActivityImportError):
            load_activities(path)

    def test_non_finite_literals_dropped(self, tmp_path: Path, strava_activity: dict) -> None:
        strava_activity["moving_time"] = float("inf")
        strava_activity["average_heartrate"] = float("nan")
        path = tmp_path / "activities.json"
        # json.dumps writes Infinity / NaN literals, which json.load accepts.
        path.write_text(json.dumps([strava_activity]))
        (record,) = load_activities(path)
        assert record.moving_time_s is None
        assert record.avg_hr is None
