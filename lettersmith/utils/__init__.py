"""
Shared utilities for Lettersmith.

Common functionality used across contexts:
- Logging setup
- Configuration loading
- Text processing
- LLM provider access
"""

from lettersmith.utils.config import load_config
from lettersmith.utils.text_processing import (
    collapse_blank_lines,
    normalize_line_breaks,
    truncate_display,
)

__all__ = [
    "load_config",
    "collapse_blank_lines",
    "normalize_line_breaks",
    "truncate_display",
]
