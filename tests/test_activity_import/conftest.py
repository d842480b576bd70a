"""Fixtures with realistic provider activity dicts for testing."""

from __future__ import annotations

import pytest


@pytest.fixture
def strava_activity() -> dict:
    """Strava-style activity as stored by the activity sync."""
    return {
        "id": 11223344556,
        "name": "Morning Run",
        "sport_type": "TrailRun",
        "type": "Run",
        "start_date": "2025-01-15T06:30:00Z",
        "start_date_local": "2025-01-15T07:30:00Z",
        "moving_time": 3120,
        "elapsed_time": 3300,
        "distance": 10234.5,
        "average_heartrate": 148.3,
        "max_heartrate": 176.0,
        "has_heartrate": True,
        "perceived_exertion": 6,
        "training_stress_score": None,
        "recovery_time": 18,
    }


@pytest.fixture
def strava_ride() -> dict:
    return {
        "id": "98765",
        "name": "Zwift - Watopia",
        "sport_type": "VirtualRide",
        "start_date": "2025-01-14T18:00:00Z",
        "moving_time": 3600,
        "distance": 35000.0,
        "average_heartrate": 139.0,
        "average_watts": 205.4,
        "weighted_average_watts": 221.0,
    }


@pytest.fixture
def garmin_activity() -> dict:
    """Garmin Connect activity summary."""
    return {
        "activityId": 17654321098,
        "activityName": "Lunch Swim",
        "activityType": {"typeId": 26, "typeKey": "lap_swimming", "parentTypeId": 4},
        "startTimeLocal": "2025-01-13 12:05:00",
        "startTimeGMT": "2025-01-13 11:05:00",
        "duration": 2700.4,
        "movingDuration": 2410.0,
        "distance": 2000.0,
        "averageHR": 132.0,
        "maxHR": 158.0,
        "trainingStressScore": 41.5,
    }
