"""Classification of raw `key:kind[:modifier]` attribute tokens."""

import keyword
from typing import FrozenSet, List, Sequence, Set
from modelgen.ir.attribute import AttributeToken, PlainKind, ArrayKind, ReferenceKind
from modelgen.generator.errors import InvalidAttributeSyntax, MissingReferenceTarget
from modelgen.generator.associations import relationship_name
from modelgen.config.logging import get_logger

logger = get_logger(__name__)

SEPARATOR = ":"
DEFAULT_KIND = "string"
ARRAY = "array"
REFERENCES = "references"

# Columns every generated table has, and names the model class already uses
RESERVED_KEYS: FrozenSet[str] = frozenset(
    {"id", "inserted_at", "updated_at", "metadata", "registry", "changeset"}
)


def classify(raw: str) -> AttributeToken:
    """
    Parse one attribute token into a key and a tagged kind.

    Args:
        raw: Token such as "name", "age:integer", "tags:array:string"
            or "user_id:references:users"

    Returns:
        AttributeToken with a PlainKind, ArrayKind or ReferenceKind

    Raises:
        InvalidAttributeSyntax: Empty, non-identifier or keyword key, empty parts,
            more than three parts, or an unsupported compound kind
        MissingReferenceTarget: `key:references` without a table
    """
    parts = raw.split(SEPARATOR)
    if len(parts) > 3:
        raise InvalidAttributeSyntax(raw, "expected at most three `:`-separated parts")

    key = parts[0]
    if not key:
        raise InvalidAttributeSyntax(raw, "attribute name is empty")
    if not key.isidentifier():
        raise InvalidAttributeSyntax(raw, f"`{key}` is not a valid identifier")
    if keyword.iskeyword(key):
        raise InvalidAttributeSyntax(raw, f"`{key}` is a reserved word")

    if len(parts) == 1:
        return AttributeToken(key=key, kind=PlainKind(name=DEFAULT_KIND), raw=raw)

    kind = parts[1]
    if not kind:
        raise InvalidAttributeSyntax(raw, "type is empty")

    if len(parts) == 2:
        if kind == REFERENCES:
            raise MissingReferenceTarget(key)
        return AttributeToken(key=key, kind=PlainKind(name=kind), raw=raw)

    modifier = parts[2]
    if not modifier:
        raise InvalidAttributeSyntax(raw, f"`{kind}` needs a value after the last `:`")

    if kind == ARRAY:
        return AttributeToken(key=key, kind=ArrayKind(element=modifier), raw=raw)
    if kind == REFERENCES:
        return AttributeToken(key=key, kind=ReferenceKind(table=modifier), raw=raw)

    raise InvalidAttributeSyntax(
        raw, f"`{kind}` cannot take a modifier, only `{ARRAY}` and `{REFERENCES}` can"
    )


def classify_all(tokens: Sequence[str]) -> List[AttributeToken]:
    """
    Classify every token, in order, before any of them is resolved.

    Raises:
        InvalidAttributeSyntax: A key is reserved by the generated model, or
            is taken by an earlier attribute or association
    """
    classified = []
    taken: Set[str] = set()
    for token in tokens:
        attr = classify(token)
        if attr.key in RESERVED_KEYS:
            raise InvalidAttributeSyntax(token, f"`{attr.key}` is reserved by the generated model")
        names = {attr.key}
        if isinstance(attr.kind, ReferenceKind):
            names.add(relationship_name(attr.key))
        clash = sorted(names & taken)
        if clash:
            raise InvalidAttributeSyntax(token, f"`{clash[0]}` is already taken by another attribute")
        taken |= names
        classified.append(attr)
    logger.debug(f"Classified {len(classified)} attribute tokens")
    return classified
