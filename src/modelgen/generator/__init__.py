"""Attribute parsing and binding derivation for the model generator."""

from .errors import (
    GeneratorError,
    InvalidArguments,
    InvalidAttributeSyntax,
    MissingReferenceTarget,
    UnknownType,
    DuplicateModuleName,
)
from .classifier import classify, classify_all
from .types import resolve, resolve_attribute, resolve_all, KNOWN_TYPES
from .partition import partition
from .associations import derive_associations, derive_indexes
from .defaults import derive_defaults, derive_types
from .binding import assemble

__all__ = [
    "GeneratorError",
    "InvalidArguments",
    "InvalidAttributeSyntax",
    "MissingReferenceTarget",
    "UnknownType",
    "DuplicateModuleName",
    "classify",
    "classify_all",
    "resolve",
    "resolve_attribute",
    "resolve_all",
    "KNOWN_TYPES",
    "partition",
    "derive_associations",
    "derive_indexes",
    "derive_defaults",
    "derive_types",
    "assemble",
]
