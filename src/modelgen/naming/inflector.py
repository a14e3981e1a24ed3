"""Naming helpers: inflection of resource names and example params."""

import copy
import re
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Dict, Sequence
from modelgen.ir.attribute import ResolvedAttribute, PlainKind, ArrayKind, ReferenceKind
from modelgen.ir.binding import Inflection
from modelgen.generator.errors import DuplicateModuleName
from modelgen.config.logging import get_logger

logger = get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

# Example values for the generated test, keyed by raw type token
EXAMPLE_VALUES: Dict[str, Any] = {
    "integer": 42,
    "float": 120.5,
    "decimal": "120.5",
    "boolean": True,
    "map": {},
    "text": "some content",
    "date": date(2010, 4, 17),
    "time": time(14, 0),
    "datetime": datetime(2010, 4, 17, 14, 0),
    "uuid": "7488a646-e31f-11e4-aace-600308960662",
}
DEFAULT_EXAMPLE = "some content"


def camelize(value: str) -> str:
    """
    Convert `admin.user_profile` to `Admin.UserProfile`.

    Segments separated by `.` or `/` are camelized independently and joined with `.`.
    """
    segments = re.split(r"[./]", value)
    return ".".join(
        "".join(part[:1].upper() + part[1:] for part in segment.split("_"))
        for segment in segments
    )


def underscore(value: str) -> str:
    """Convert `Admin.UserProfile` to `admin/user_profile`."""
    return "/".join(
        _CAMEL_BOUNDARY.sub("_", segment).lower() for segment in value.split(".")
    )


def humanize(value: str) -> str:
    """Convert `user_profile` or `author_id` to `User profile` / `Author`."""
    if value.endswith("_id"):
        value = value[:-3]
    words = value.replace("_", " ").strip()
    return words[:1].upper() + words[1:]


def inflect(singular: str, base: str = "app") -> Inflection:
    """
    Derive the naming variants of a possibly namespaced resource.

    Args:
        singular: Resource name, e.g. "User", "Admin.User" or "user_profile"
        base: Application package holding the models

    Returns:
        Inflection for templates and output paths
    """
    scoped = camelize(singular)
    path = underscore(scoped)
    alias = scoped.split(".")[-1]
    import_path = f"{base}.models.{path.replace('/', '.')}"
    return Inflection(
        alias=alias,
        human=humanize(underscore(alias)),
        base=base,
        scoped=scoped,
        singular=underscore(alias),
        path=path,
        import_path=import_path,
        module=f"{import_path}.{alias}",
    )


def _is_id_like(key: str) -> bool:
    return key == "id" or key.endswith("_id")


def _example_value(attr: ResolvedAttribute) -> Any:
    if isinstance(attr.kind, ArrayKind):
        return []
    if isinstance(attr.kind, PlainKind):
        return copy.deepcopy(EXAMPLE_VALUES.get(attr.kind.name, DEFAULT_EXAMPLE))
    return DEFAULT_EXAMPLE


def params(attrs: Sequence[ResolvedAttribute]) -> Dict[str, Any]:
    """
    Example attribute values for the generated test.

    References, ID-like keys and password fields are left out.
    """
    return {
        attr.key: _example_value(attr)
        for attr in attrs
        if not isinstance(attr.kind, ReferenceKind)
        and not _is_id_like(attr.key)
        and "password" not in attr.key
    }


def check_module_name_availability(inflection: Inflection, project_root: Path) -> None:
    """
    Fail if the model module would overwrite an existing one.

    Raises:
        DuplicateModuleName: If the module's source file exists under project_root
    """
    module_file = Path(project_root) / Path(*inflection.import_path.split(".")).with_suffix(".py")
    if module_file.exists():
        logger.debug(f"Model module already present at {module_file}")
        raise DuplicateModuleName(inflection.module)
