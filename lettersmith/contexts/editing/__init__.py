"""
Editing Context

Responsibilities:
- Owns the segment-based Document model (text runs and atomic markers)
- Resolves pointer coordinates to caret targets
- Places, lists, and strips field-value markers
- Runs the drag-and-drop editing session

Owns: Document state and edit semantics
Never: Measures text or writes files (that's the rendering context)
"""

from lettersmith.contexts.editing.caret import CaretResolver, Point, snap_to_marker_boundary
from lettersmith.contexts.editing.document import (
    DEFAULT_SENTINELS,
    CaretTarget,
    Document,
    Marker,
    PlacedMarker,
    SentinelPair,
    TextRun,
)
from lettersmith.contexts.editing.exceptions import DocumentInvariantError, ReentrantEditError
from lettersmith.contexts.editing.fields import FieldBoard
from lettersmith.contexts.editing.markers import (
    caret_after,
    find_sentinel_collisions,
    insert_marker,
    list_markers,
    strip_markers,
)
from lettersmith.contexts.editing.session import EditingSession

__all__ = [
    "DEFAULT_SENTINELS",
    "CaretResolver",
    "CaretTarget",
    "Document",
    "DocumentInvariantError",
    "EditingSession",
    "FieldBoard",
    "Marker",
    "PlacedMarker",
    "Point",
    "ReentrantEditError",
    "SentinelPair",
    "TextRun",
    "caret_after",
    "find_sentinel_collisions",
    "insert_marker",
    "list_markers",
    "snap_to_marker_boundary",
    "strip_markers",
]
