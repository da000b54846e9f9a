"""
Rendering Context

Responsibilities:
- Lays marked text out on a monospace grid (coordinates <-> offsets)
- Produces raw (with markers) and clean (final) exports
- Writes export files

Owns: Geometry and output formats
Never: Mutates documents (that's the editing context)
"""

from lettersmith.contexts.rendering.exporter import (
    CLEAN,
    DEFAULT_FILENAMES,
    RAW,
    ExportArtifact,
    build_artifact,
    export_clean,
    export_raw,
    write_export,
)
from lettersmith.contexts.rendering.layout import MonospaceLayout, VisualLine

__all__ = [
    "CLEAN",
    "DEFAULT_FILENAMES",
    "RAW",
    "ExportArtifact",
    "MonospaceLayout",
    "VisualLine",
    "build_artifact",
    "export_clean",
    "export_raw",
    "write_export",
]
