"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError as JinjaTemplateError,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        self.template_dir = template_dir
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            # Use in-memory templates
            loader = DictLoader({})

        # Undefined variables are errors; generated source is never escaped
        self._env = Environment(
            loader=loader,
            autoescape=False,
            undefined=StrictUndefined,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        # Add custom filters for code generation
        self._env.filters["backquote"] = self._backquote_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Templates are compiled on first use and cached by the environment.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        if not isinstance(self._env.loader, DictLoader):
            # Convert to DictLoader to support in-memory templates
            self._env.loader = DictLoader({})

        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template can be loaded."""
        return template_name in self._env.loader.list_templates()

    def _backquote_filter(self, value: str) -> str:
        """Wrap a value in backticks, as Go struct tags and raw strings need."""
        return f"`{value}`"


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, optionally backed by a template directory."""
    return TemplateEngine(template_dir)
