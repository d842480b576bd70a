"""Heart-rate zone models anchored on max HR.

Every model partitions ``[0, max_hr]``: zone 1 starts at 0, each zone's upper
bound is the next zone's lower bound, and the top zone ends at max HR.
"""

from __future__ import annotations

from load_engine.config import ZoneConfig
from load_engine.models.enums import ZoneScheme
from load_engine.models.zones import Zone, ZoneModel

_DEFAULT_ZONE_CONFIG = ZoneConfig()

# (name, description, color) per zone, lowest first.
_ZONE_LABELS: dict[ZoneScheme, tuple[tuple[str, str, str], ...]] = {
    ZoneScheme.FIVE_ZONE: (
        ("Recovery", "Active recovery, very easy effort", "#22c55e"),
        ("Base/Aerobic", "Comfortable, conversational pace", "#3b82f6"),
        ("Tempo", "Comfortably hard, moderate effort", "#f59e0b"),
        ("Threshold", "Hard effort, lactate threshold", "#f97316"),
        ("VO2 Max", "Very hard, maximum effort", "#ef4444"),
    ),
    ZoneScheme.THREE_ZONE: (
        ("Easy", "Easy, aerobic base building", "#22c55e"),
        ("Moderate", "Moderate, tempo efforts", "#f59e0b"),
        ("Hard", "Hard, threshold and VO2 max", "#ef4444"),
    ),
    ZoneScheme.POWER_BASED: (
        ("Active Recovery", "Active recovery, below 68% max HR", "#22c55e"),
        ("Endurance", "Endurance, 68-83% max HR", "#3b82f6"),
        ("Tempo", "Tempo, 83-94% max HR", "#f59e0b"),
        ("Threshold", "Lactate threshold and above, 94-100% max HR", "#ef4444"),
    ),
}

_MODEL_INFO: dict[ZoneScheme, tuple[str, str]] = {
    ZoneScheme.FIVE_ZONE: ("5-Zone Model", "Classic 5-zone heart rate training model"),
    ZoneScheme.THREE_ZONE: ("3-Zone Model", "Simplified 3-zone model for beginners"),
    ZoneScheme.POWER_BASED: ("Coggan Model", "Coggan-style power zones adapted for heart rate"),
}


def build_zone_model(
    max_hr: int, scheme: ZoneScheme = ZoneScheme.FIVE_ZONE, config: ZoneConfig = _DEFAULT_ZONE_CONFIG
) -> ZoneModel:
    """Build one zone model from a max heart rate.

    Args:
        max_hr: Maximum heart rate in bpm (must be positive).
        scheme: Which zone scheme to instantiate.
        config: Supplies the percentage boundaries per scheme.

    Returns:
        ZoneModel whose zones partition ``[0, max_hr]`` without gaps.
    """
    max_hr = int(max_hr)
    bounds_pct = config.boundaries_pct[scheme]
    labels = _ZONE_LABELS[scheme]
    if len(labels) != len(bounds_pct) - 1:
        raise ValueError(f"{scheme.value}: {len(labels)} labels for {len(bounds_pct) - 1} zones")

    bounds_bpm = [int(round(max_hr * pct / 100.0)) for pct in bounds_pct]
    bounds_bpm[0] = 0
    bounds_bpm[-1] = max_hr

    zones = tuple(
        Zone(
            number=i + 1,
            name=name,
            description=description,
            lower_bpm=bounds_bpm[i],
            upper_bpm=bounds_bpm[i + 1],
            lower_pct=float(bounds_pct[i]),
            upper_pct=float(bounds_pct[i + 1]),
            color=color,
        )
        for i, (name, description, color) in enumerate(labels)
    )
    name, description = _MODEL_INFO[scheme]
    return ZoneModel(scheme=scheme, name=name, description=description, max_hr=max_hr, zones=zones)


def build_all_zone_models(
    max_hr: int, config: ZoneConfig = _DEFAULT_ZONE_CONFIG
) -> dict[ZoneScheme, ZoneModel]:
    """One model per scheme, all sharing the same max HR."""
    return {scheme: build_zone_model(max_hr, scheme, config) for scheme in ZoneScheme}
