"""Jinja2 template loading and caching for letter paragraphs."""

from pathlib import Path
from typing import Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from lettersmith.contexts.templating.exceptions import TemplateRenderError

TEMPLATES_PATH = Path(__file__).resolve().parent / "templates"
TEMPLATE_SUFFIX = ".txt.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 letter templates.

    Templates are stored as {templates_path}/{name}.txt.jinja. Undefined
    variables raise TemplateRenderError.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding the templates. Defaults to the
                            packaged lettersmith/contexts/templating/templates/
        """
        self.templates_path = Path(templates_path) if templates_path else TEMPLATES_PATH
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            autoescape=False,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name (e.g., 'opening')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        template_file = f"{name}{TEMPLATE_SUFFIX}"
        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.templates_path / template_file}"
            ) from e

        self._cache[name] = template
        return template

    def render(self, name: str, **context) -> str:
        """
        Render a template with the given context, stripped of outer whitespace.

        Raises:
            TemplateRenderError: If the template is missing or fails to render
        """
        try:
            return self.get_template(name).render(**context).strip()
        except Exception as e:
            raise TemplateRenderError(
                f"Failed to render letter template '{name}'",
                template_name=name,
                template_path=self.get_template_path(name),
                original_error=e,
            ) from e

    def get_template_path(self, name: str) -> Path:
        return self.templates_path / f"{name}{TEMPLATE_SUFFIX}"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache
