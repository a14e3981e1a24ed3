"""Default clauses and canonical type maps for plain attributes."""

from typing import Dict, Sequence
from modelgen.ir.attribute import CanonicalType, ResolvedAttribute

# Appended to a migration column definition
DEFAULT_FALSE = ", server_default=sa.false()"
NO_DEFAULT = ""


def derive_defaults(attrs: Sequence[ResolvedAttribute]) -> Dict[str, str]:
    """
    Default clause for every attribute key.

    Boolean columns default to false; every other type, arrays included,
    gets an empty clause.
    """
    return {
        attr.key: DEFAULT_FALSE if attr.type == "boolean" else NO_DEFAULT
        for attr in attrs
    }


def derive_types(attrs: Sequence[ResolvedAttribute]) -> Dict[str, CanonicalType]:
    """Map each attribute key to its canonical type."""
    return {attr.key: attr.type for attr in attrs}
