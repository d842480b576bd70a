"""Tests for heart-rate zone model construction."""

from __future__ import annotations

import pytest

from load_engine.math.zones import build_all_zone_models, build_zone_model
from load_engine.models.enums import ZoneScheme


class TestZoneModel:
    @pytest.mark.parametrize("scheme", list(ZoneScheme))
    @pytest.mark.parametrize("max_hr", [150, 185, 190, 203])
    def test_partitions_zero_to_max(self, scheme: ZoneScheme, max_hr: int) -> None:
        model = build_zone_model(max_hr, scheme)
        assert model.zones[0].lower_bpm == 0
        assert model.zones[-1].upper_bpm == max_hr
        for lower, upper in zip(model.zones, model.zones[1:]):
            assert lower.upper_bpm == upper.lower_bpm
        for zone in model.zones:
            assert zone.lower_bpm < zone.upper_bpm

    def test_five_zone_boundaries(self) -> None:
        model = build_zone_model(190, ZoneScheme.FIVE_ZONE)
        bounds = [(z.lower_bpm, z.upper_bpm) for z in model.zones]
        assert bounds == [(0, 114), (114, 133), (133, 152), (152, 171), (171, 190)]

    def test_three_zone_boundaries(self) -> None:
        model = build_zone_model(200, ZoneScheme.THREE_ZONE)
        bounds = [(z.lower_bpm, z.upper_bpm) for z in model.zones]
        assert bounds == [(0, 140), (140, 170), (170, 200)]

    def test_power_based_has_four_zones(self) -> None:
        model = build_zone_model(200, ZoneScheme.POWER_BASED)
        assert [z.upper_bpm for z in model.zones] == [136, 166, 188, 200]

    def test_zone_numbers_and_names(self) -> None:
        model = build_zone_model(185)
        assert [z.number for z in model.zones] == [1, 2, 3, 4, 5]
        assert model.zones[0].name == "Recovery"
        assert model.zones[-1].name == "VO2 Max"
        assert model.name == "5-Zone Model"

    def test_percentages_recorded(self) -> None:
        model = build_zone_model(185, ZoneScheme.THREE_ZONE)
        assert [(z.lower_pct, z.upper_pct) for z in model.zones] == [
            (0.0, 70.0),
            (70.0, 85.0),
            (85.0, 100.0),
        ]


class TestZoneFor:
    def test_lookup(self) -> None:
        model = build_zone_model(190)
        assert model.zone_for(100).number == 1
        assert model.zone_for(114).number == 2
        assert model.zone_for(160).number == 4

    def test_max_hr_in_top_zone(self) -> None:
        model = build_zone_model(190)
        assert model.zone_for(190).number == 5
        assert model.zone_for(205).number == 5


class TestAllModels:
    def test_one_model_per_scheme(self) -> None:
        models = build_all_zone_models(180)
        assert set(models) == set(ZoneScheme)
        assert all(m.max_hr == 180 for m in models.values())
