"""Association bindings and index statements for reference attributes."""

from typing import Callable, List, Sequence
from modelgen.ir.attribute import ReferenceAttribute
from modelgen.ir.binding import AssociationBinding, Inflection

FOREIGN_KEY_SUFFIX = "_id"
# Appended to a relationship whose reference key has no `_id` suffix
RELATIONSHIP_SUFFIX = "_ref"


def strip_id_suffix(key: str) -> str:
    """Remove a literal trailing `_id` from a foreign-key column name."""
    if key.endswith(FOREIGN_KEY_SUFFIX):
        return key[: -len(FOREIGN_KEY_SUFFIX)]
    return key


def relationship_name(key: str) -> str:
    """Model attribute for the related object, never equal to the FK column."""
    field_name = strip_id_suffix(key)
    if field_name == key:
        return f"{field_name}{RELATIONSHIP_SUFFIX}"
    return field_name


def derive_associations(
    refs: Sequence[ReferenceAttribute],
    inflect: Callable[[str], Inflection],
) -> List[AssociationBinding]:
    """
    Build one association binding per reference attribute.

    Args:
        refs: Reference attributes in input order
        inflect: Naming collaborator turning a field name into an Inflection

    Returns:
        AssociationBinding list in the same order
    """
    assocs = []
    for ref in refs:
        field_name = strip_id_suffix(ref.key)
        assocs.append(
            AssociationBinding(
                field_name=field_name,
                foreign_key_column=ref.key,
                target_module=inflect(field_name).module,
                target_table=ref.target_table,
                relationship_name=relationship_name(ref.key),
            )
        )
    return assocs


def index_statement(plural: str, column: str) -> str:
    """Alembic directive creating an index on one column of a table."""
    return f'op.create_index("ix_{plural}_{column}", "{plural}", ["{column}"])'


def derive_indexes(plural: str, refs: Sequence[ReferenceAttribute]) -> List[str]:
    """One index statement per reference, on its raw foreign-key column."""
    return [index_statement(plural, ref.key) for ref in refs]
