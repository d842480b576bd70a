"""Zone analysis, readiness evaluation and weekly target personalisation."""

from load_engine.analysis.readiness import evaluate_readiness
from load_engine.analysis.targets import personalized_weekly_target
from load_engine.analysis.zone_analyzer import analyze_zones

__all__ = ["analyze_zones", "evaluate_readiness", "personalized_weekly_target"]
