"""Assembly of the generation binding."""

from typing import Any, Dict, Sequence
from modelgen.ir.attribute import CanonicalType, ResolvedAttribute
from modelgen.ir.binding import AssociationBinding, GenerationBinding, Inflection


def assemble(
    inflection: Inflection,
    plural: str,
    attrs: Sequence[ResolvedAttribute],
    types: Dict[str, CanonicalType],
    assocs: Sequence[AssociationBinding],
    indexes: Sequence[str],
    defaults: Dict[str, str],
    params: Dict[str, Any],
    binary_id: bool,
) -> GenerationBinding:
    """Merge naming, derived attribute data and flags into one binding."""
    return GenerationBinding(
        **inflection.model_dump(),
        plural=plural,
        attrs=tuple(attrs),
        types=types,
        assocs=tuple(assocs),
        indexes=tuple(indexes),
        defaults=defaults,
        params=params,
        binary_id=binary_id,
    )
