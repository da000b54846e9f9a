"""Custom exceptions for the templating context."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    Raised when a packaged letter template is missing or fails to render.

    Attributes:
        message: Error description
        template_name: Template name (e.g., 'opening')
        template_path: Template file the registry resolved the name to
        original_error: Underlying Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.template_path = template_path
        self.original_error = original_error

        details = [message]
        if template_path is not None:
            details.append(f"template: {template_path}")
        if original_error is not None:
            details.append(f"cause: {type(original_error).__name__}: {original_error}")
        super().__init__(" | ".join(details))
