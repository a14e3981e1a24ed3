"""Jinja filters mapping attribute types to SQLAlchemy source text."""

from typing import Any, Dict, Mapping
from modelgen.ir.attribute import (
    AttributeKind,
    PlainKind,
    ArrayKind,
    ReferenceKind,
    ArrayType,
    ReferenceType,
    CanonicalType,
)

# Migration columns use the raw type token
MIGRATION_TYPES: Dict[str, str] = {
    "string": "sa.String()",
    "text": "sa.Text()",
    "integer": "sa.Integer()",
    "float": "sa.Float()",
    "decimal": "sa.Numeric()",
    "boolean": "sa.Boolean()",
    "binary": "sa.LargeBinary()",
    "map": "sa.JSON()",
    "id": "sa.Integer()",
    "binary_id": "sa.Uuid()",
    "uuid": "sa.Uuid()",
    "date": "sa.Date()",
    "time": "sa.Time()",
    "datetime": "sa.DateTime()",
}

# Model columns use the canonical type
COLUMN_TYPES: Dict[str, str] = {
    "string": "sa.String()",
    "integer": "sa.Integer()",
    "float": "sa.Float()",
    "decimal": "sa.Numeric()",
    "boolean": "sa.Boolean()",
    "binary": "sa.LargeBinary()",
    "map": "sa.JSON()",
    "id": "sa.Integer()",
    "binary_id": "sa.Uuid()",
    "UUID": "sa.Uuid()",
    "Date": "sa.Date()",
    "Time": "sa.Time()",
    "DateTime": "sa.DateTime()",
}

PYTHON_TYPES: Dict[str, str] = {
    "string": "str",
    "integer": "int",
    "float": "float",
    "decimal": "decimal.Decimal",
    "boolean": "bool",
    "binary": "bytes",
    "map": "Dict[str, Any]",
    "id": "int",
    "binary_id": "uuid.UUID",
    "UUID": "uuid.UUID",
    "Date": "datetime.date",
    "Time": "datetime.time",
    "DateTime": "datetime.datetime",
}


def migration_type(kind: AttributeKind) -> str:
    """SQLAlchemy type expression for a migration column."""
    if isinstance(kind, PlainKind):
        return MIGRATION_TYPES[kind.name]
    if isinstance(kind, ArrayKind):
        return f"sa.ARRAY({MIGRATION_TYPES[kind.element]})"
    if isinstance(kind, ReferenceKind):
        return "sa.Integer()"
    raise TypeError(f"Unsupported attribute kind: {type(kind).__name__}")


def column_type(type_: CanonicalType) -> str:
    """SQLAlchemy type expression for a model column."""
    if isinstance(type_, ArrayType):
        return f"sa.ARRAY({COLUMN_TYPES[type_.element]})"
    if isinstance(type_, ReferenceType):
        return "sa.Integer()"
    return COLUMN_TYPES[type_]


def python_type(type_: CanonicalType) -> str:
    """Python annotation for a model attribute."""
    if isinstance(type_, ArrayType):
        return f"List[{PYTHON_TYPES[type_.element]}]"
    if isinstance(type_, ReferenceType):
        return "int"
    return PYTHON_TYPES[type_]


def pyrepr(value: Any) -> str:
    """Python literal for a value. Read-only mappings render as dicts."""
    if isinstance(value, Mapping):
        return repr(dict(value))
    return repr(value)


FILTERS = {
    "migration_type": migration_type,
    "column_type": column_type,
    "python_type": python_type,
    "pyrepr": pyrepr,
}
