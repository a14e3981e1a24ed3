"""Attribute models: parsed tokens, their kinds and resolved types."""

from typing import Optional, Literal, Union, Annotated
from pydantic import BaseModel, ConfigDict, Discriminator


class PlainKind(BaseModel):
    """A primitive kind, e.g. `age:integer`."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["plain"] = "plain"
    name: str


class ArrayKind(BaseModel):
    """An array kind, e.g. `nicknames:array:string`."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["array"] = "array"
    element: str


class ReferenceKind(BaseModel):
    """A foreign-key kind, e.g. `user_id:references:users`."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["references"] = "references"
    table: Optional[str] = None  # Plural name of the referenced table


AttributeKind = Annotated[
    Union[PlainKind, ArrayKind, ReferenceKind],
    Discriminator("tag"),
]


class AttributeToken(BaseModel):
    """One classified `key:kind[:modifier]` token."""

    model_config = ConfigDict(frozen=True)

    key: str
    kind: AttributeKind
    raw: str = ""


class ArrayType(BaseModel):
    """Canonical array type with a resolved element type."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["array"] = "array"
    element: str


class ReferenceType(BaseModel):
    """Canonical type of a foreign-key column."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["references"] = "references"
    table: str


CanonicalType = Union[str, ArrayType, ReferenceType]


class ResolvedAttribute(BaseModel):
    """An attribute whose type has been checked against the vocabulary."""

    model_config = ConfigDict(frozen=True)

    key: str
    kind: AttributeKind
    type: CanonicalType


class ReferenceAttribute(ResolvedAttribute):
    """A resolved attribute pointing at another table."""

    target_table: str
