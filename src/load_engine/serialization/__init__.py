"""Serialization module: export engine results as plain JSON."""

from load_engine.serialization.json_report import to_json_dict, to_json_string

__all__ = ["to_json_dict", "to_json_string"]
