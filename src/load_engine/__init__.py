"""Training load engine: workout stress, PMC trends, heart-rate zones and readiness."""

from load_engine.config import EngineConfig
from load_engine.engine import EngineReport, LoadEngine
from load_engine.exceptions import ConfigError, LoadEngineError

__all__ = [
    "ConfigError",
    "EngineConfig",
    "EngineReport",
    "LoadEngine",
    "LoadEngineError",
]
