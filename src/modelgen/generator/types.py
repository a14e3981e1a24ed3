"""Type vocabulary and resolution of attribute kinds to canonical types."""

from typing import Dict, FrozenSet, List, Sequence
from modelgen.ir.attribute import (
    AttributeKind,
    AttributeToken,
    PlainKind,
    ArrayKind,
    ReferenceKind,
    ArrayType,
    ReferenceType,
    CanonicalType,
    ResolvedAttribute,
)
from modelgen.generator.errors import UnknownType, MissingReferenceTarget
from modelgen.config.logging import get_logger

logger = get_logger(__name__)

# Tokens that resolve to a different canonical type
CANONICAL_TYPES: Dict[str, str] = {
    "text": "string",
    "uuid": "UUID",
    "date": "Date",
    "time": "Time",
    "datetime": "DateTime",
}

# Tokens that pass through unchanged
PRIMITIVE_TYPES: FrozenSet[str] = frozenset(
    {
        "string",
        "integer",
        "float",
        "decimal",
        "boolean",
        "binary",
        "map",
        "id",
        "binary_id",
    }
)

KNOWN_TYPES: FrozenSet[str] = PRIMITIVE_TYPES | frozenset(CANONICAL_TYPES)


def resolve_primitive(token: str) -> str:
    """
    Map one type token to its canonical type.

    Raises:
        UnknownType: If the token is not in the vocabulary
    """
    if token in CANONICAL_TYPES:
        return CANONICAL_TYPES[token]
    if token in PRIMITIVE_TYPES:
        return token
    raise UnknownType(token)


def resolve(kind: AttributeKind, key: str = "field") -> CanonicalType:
    """
    Resolve a classified kind to its canonical type.

    Arrays resolve their element type through the same vocabulary.
    A reference resolves to the referenced table.

    Raises:
        UnknownType: If a type token is not in the vocabulary
        MissingReferenceTarget: If a reference has no table
    """
    if isinstance(kind, PlainKind):
        return resolve_primitive(kind.name)
    if isinstance(kind, ArrayKind):
        return ArrayType(element=resolve_primitive(kind.element))
    if isinstance(kind, ReferenceKind):
        if not kind.table:
            raise MissingReferenceTarget(key)
        return ReferenceType(table=kind.table)
    raise TypeError(f"Unsupported attribute kind: {type(kind).__name__}")


def resolve_attribute(token: AttributeToken) -> ResolvedAttribute:
    """Resolve the type of one classified token."""
    try:
        resolved = resolve(token.kind, key=token.key)
    except UnknownType as e:
        raise UnknownType(e.token, key=token.key) from e
    return ResolvedAttribute(key=token.key, kind=token.kind, type=resolved)


def resolve_all(tokens: Sequence[AttributeToken]) -> List[ResolvedAttribute]:
    """Resolve every classified token, preserving order."""
    resolved = [resolve_attribute(token) for token in tokens]
    logger.debug(f"Resolved {len(resolved)} attributes")
    return resolved
