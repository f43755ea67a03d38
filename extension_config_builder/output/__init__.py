"""
Output exporters for extension configs.
"""

from .json_exporter import config_to_json, export_to_json

__all__ = [
    "config_to_json",
    "export_to_json",
]
