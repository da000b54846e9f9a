"""
Caret resolution: pointer coordinates to document offsets.

The editing context knows nothing about fonts or wrapping. The rendering layer
injects a `resolve_coordinate` capability (Point -> offset or None) built for
the current document; the resolver clamps the result and keeps drops from
splitting a Marker.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from lettersmith.contexts.editing.document import CaretTarget, Document

__all__ = [
    "Point",
    "CaretTarget",
    "CaretResolver",
    "CoordinateResolver",
    "GeometryProvider",
    "snap_to_marker_boundary",
]


@dataclass(frozen=True)
class Point:
    """Pointer position in rendering-surface coordinates."""

    x: float
    y: float


CoordinateResolver = Callable[[Point], Optional[int]]
GeometryProvider = Callable[[Document], CoordinateResolver]


def snap_to_marker_boundary(document: Document, offset: int) -> int:
    """
    Move an offset that falls strictly inside a Marker to its nearer boundary.

    Ties go to the marker end. Offsets outside markers are returned unchanged.
    """
    placed = document.marker_containing(offset)
    if placed is None:
        return offset
    if offset - placed.offset < placed.end - offset:
        return placed.offset
    return placed.end


class CaretResolver:
    """
    Resolves pointer coordinates to a CaretTarget in a document.

    Usage:
        resolver = CaretResolver(layout)
        target = resolver.resolve(document, Point(120.0, 40.0))
        if target is None:
            ...  # insert at document end
    """

    def __init__(self, resolve_coordinate: CoordinateResolver, snap_to_markers: bool = True):
        self.resolve_coordinate = resolve_coordinate
        self.snap_to_markers = snap_to_markers

    def resolve(self, document: Document, point: Optional[Point]) -> Optional[CaretTarget]:
        """
        Resolve a point to an insertion target.

        Returns:
            CaretTarget, or None when there is no point or it falls outside
            the editable area
        """
        if point is None:
            return None

        offset = self.resolve_coordinate(point)
        if offset is None:
            return None

        offset = document.clamp(offset)
        if self.snap_to_markers:
            offset = snap_to_marker_boundary(document, offset)
        return document.caret_at(offset)

    def __call__(self, document: Document, point: Optional[Point]) -> Optional[CaretTarget]:
        return self.resolve(document, point)
