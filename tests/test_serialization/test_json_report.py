"""Tests for JSON serialization of engine results."""

from __future__ import annotations

import json
from datetime import date, datetime

from load_engine.engine import LoadEngine
from load_engine.models.enums import Confidence, DataQuality, ReadinessLevel, TrainingStatus
from load_engine.models.load import DailyLoadPoint
from load_engine.models.workout import WorkoutRecord
from load_engine.serialization import to_json_dict, to_json_string


class TestToJsonDict:
    def test_dates_iso(self) -> None:
        point = DailyLoadPoint(day=date(2024, 3, 15), load=42.123, activity_count=1)
        assert to_json_dict(point) == {
            "day": "2024-03-15",
            "load": 42.12,
            "trimp": 0.0,
            "activity_count": 1,
        }

    def test_enums(self) -> None:
        assert to_json_dict(TrainingStatus.BUILD) == "build"
        assert to_json_dict(DataQuality.EXCELLENT) == "excellent"
        assert to_json_dict(ReadinessLevel.HIGH) == "high"

    def test_non_finite_floats(self) -> None:
        assert to_json_dict([float("nan"), float("inf"), 1.0]) == [None, None, 1.0]

    def test_enum_keys(self) -> None:
        assert to_json_dict({Confidence.LOW: 1, 50: 2.0}) == {"low": 1, 50: 2.0}


class TestEngineResults:
    def test_training_load(self, steady_history: list[WorkoutRecord], now: datetime) -> None:
        result = LoadEngine().training_load(steady_history, now=now, tz="UTC", days=14)
        data = to_json_dict(result)
        assert data["start"] == "2024-03-02"
        assert data["end"] == "2024-03-15"
        assert len(data["points"]) == 14
        assert data["metrics"]["status"] in {s.value for s in TrainingStatus}
        assert data["data_quality"] == "fair"

    def test_analysis_includes_derived_flag(self, steady_history: list[WorkoutRecord]) -> None:
        data = to_json_dict(LoadEngine().analyze_zones(steady_history))
        assert data["needs_more_data"] is False
        assert data["max_hr_source"] == "estimated"
        assert data["zone_model"]["zones"][0]["lower_bpm"] == 0

    def test_report_string_is_valid_json(
        self, mixed_history: list[WorkoutRecord], now: datetime
    ) -> None:
        report = LoadEngine().report(mixed_history, now=now, tz="Europe/Paris")
        parsed = json.loads(to_json_string(report))
        assert set(parsed) == {"training_load", "zones", "readiness"}
        assert parsed["readiness"]["level"] in {"low", "medium", "high"}
