"""Resource naming utilities."""

from .inflector import (
    camelize,
    underscore,
    humanize,
    inflect,
    params,
    check_module_name_availability,
)

__all__ = [
    "camelize",
    "underscore",
    "humanize",
    "inflect",
    "params",
    "check_module_name_availability",
]
