"""Template loading and rendering utilities."""

from .loader import create_environment, render_template, template_search_path, TEMPLATES_DIR

__all__ = ["create_environment", "render_template", "template_search_path", "TEMPLATES_DIR"]
