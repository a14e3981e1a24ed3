"""Utilities for loading and rendering generator templates."""

from pathlib import Path
from typing import Any, Dict, List, Optional
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError
from .filters import FILTERS
from modelgen.config.logging import get_logger

logger = get_logger(__name__)

# Packaged templates for the model generator
TEMPLATES_DIR = Path(__file__).resolve().parent / "model_gen"


def template_search_path(overrides_dir: Optional[Path] = None) -> List[Path]:
    """Project overrides first, then the packaged templates."""
    paths = []
    if overrides_dir is not None:
        paths.append(Path(overrides_dir))
    paths.append(TEMPLATES_DIR)
    return paths


def create_environment(overrides_dir: Optional[Path] = None) -> Environment:
    """
    Build the Jinja environment used to render generated files.

    Args:
        overrides_dir: Optional project directory whose templates shadow
            the packaged ones

    Returns:
        Configured Environment
    """
    env = Environment(
        loader=FileSystemLoader([str(p) for p in template_search_path(overrides_dir)]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters.update(FILTERS)
    return env


def render_template(env: Environment, name: str, context: Dict[str, Any]) -> str:
    """
    Render one template with the given bindings.

    Args:
        env: Environment from create_environment()
        name: Template file name, e.g. "model.py.j2"
        context: Template bindings

    Returns:
        Rendered text
    """
    try:
        rendered = env.get_template(name).render(**context)
        logger.debug(f"Rendered template {name} with {len(context)} bindings")
        return rendered
    except TemplateError as e:
        logger.error(f"Error rendering template {name}: {e}")
        raise
