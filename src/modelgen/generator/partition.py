"""Split resolved attributes into associations and plain columns."""

from typing import List, Sequence, Tuple
from modelgen.ir.attribute import ReferenceKind, ResolvedAttribute, ReferenceAttribute
from modelgen.generator.errors import MissingReferenceTarget


def partition(
    attrs: Sequence[ResolvedAttribute],
) -> Tuple[List[ReferenceAttribute], List[ResolvedAttribute]]:
    """
    Stable two-way split of attributes.

    Args:
        attrs: Resolved attributes in command-line order

    Returns:
        (associations, plain attributes), each in input order

    Raises:
        MissingReferenceTarget: If a reference carries no table
    """
    assocs: List[ReferenceAttribute] = []
    plain: List[ResolvedAttribute] = []

    for attr in attrs:
        if isinstance(attr.kind, ReferenceKind):
            if not attr.kind.table:
                raise MissingReferenceTarget(attr.key)
            assocs.append(
                ReferenceAttribute(
                    key=attr.key,
                    kind=attr.kind,
                    type=attr.type,
                    target_table=attr.kind.table,
                )
            )
        else:
            plain.append(attr)

    return assocs, plain
