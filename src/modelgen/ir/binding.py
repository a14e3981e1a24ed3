"""Binding models handed to the template renderer."""

from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .attribute import CanonicalType, ResolvedAttribute


class Inflection(BaseModel):
    """Naming variants derived from a resource name such as `Admin.User`."""

    model_config = ConfigDict(frozen=True)

    alias: str  # "User"
    human: str  # "User"
    base: str  # "app"
    scoped: str  # "Admin.User"
    singular: str  # "user"
    path: str  # "admin/user"
    import_path: str  # "app.models.admin.user"
    module: str  # "app.models.admin.user.User"


class AssociationBinding(BaseModel):
    """A belongs-to association derived from a reference attribute."""

    model_config = ConfigDict(frozen=True)

    field_name: str  # "user"
    foreign_key_column: str  # "user_id"
    target_module: str  # "app.models.user.User"
    target_table: str  # "users"
    relationship_name: str  # "user", or "owner_ref" when the key is "owner"


class GenerationBinding(BaseModel):
    """
    Everything the templates need, assembled once per run.

    Sequences are stored as tuples and mappings as read-only views, so
    nothing can change the binding after assembly.
    """

    model_config = ConfigDict(frozen=True)

    # Naming
    alias: str
    human: str
    base: str
    scoped: str
    singular: str
    path: str
    import_path: str
    module: str
    plural: str

    # Attributes
    attrs: Tuple[ResolvedAttribute, ...] = ()
    types: Mapping[str, CanonicalType] = Field(default_factory=dict, validate_default=True)
    assocs: Tuple[AssociationBinding, ...] = ()
    indexes: Tuple[str, ...] = ()
    defaults: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    params: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    binary_id: bool = False

    @field_validator("types", "defaults", "params", mode="after")
    @classmethod
    def freeze_mapping(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    def template_context(self) -> Dict[str, Any]:
        """Flat name → value mapping for template rendering."""
        return {name: getattr(self, name) for name in type(self).model_fields}


class OutputFile(BaseModel):
    """A template and where its rendering goes, relative to the project root."""

    model_config = ConfigDict(frozen=True)

    template: str
    destination: Path
