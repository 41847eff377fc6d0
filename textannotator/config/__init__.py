"""Configuration system for the textannotator package.

Examples
--------
>>> from textannotator.config import AnnotatorConfig, get_profile
>>> get_profile("dev").logging.level
'DEBUG'
>>> AnnotatorConfig().export.default_format
'json'
"""

from __future__ import annotations

from textannotator.config.config import AnnotatorConfig
from textannotator.config.env import load_from_env
from textannotator.config.export import ExportConfig
from textannotator.config.loader import apply_layer, load_config, read_config_file
from textannotator.config.logging import LoggingConfig, configure_logging
from textannotator.config.profiles import (
    DEV_CONFIG,
    PROFILES,
    TEST_CONFIG,
    get_profile,
    list_profiles,
)
from textannotator.config.serialization import config_to_dict, save_yaml, to_yaml

__all__ = [
    "DEV_CONFIG",
    "PROFILES",
    "TEST_CONFIG",
    "AnnotatorConfig",
    "ExportConfig",
    "LoggingConfig",
    "apply_layer",
    "config_to_dict",
    "configure_logging",
    "get_profile",
    "list_profiles",
    "load_config",
    "load_from_env",
    "read_config_file",
    "save_yaml",
    "to_yaml",
]
