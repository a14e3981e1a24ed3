"""Configuration module for modelgen."""

from .settings import Settings, get_settings, reset_settings
from .options import GeneratorOptions, merge_options
from .logging import setup_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "GeneratorOptions",
    "merge_options",
    "setup_logging",
    "get_logger",
]
