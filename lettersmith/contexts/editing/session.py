"""
Editing session: single owner of a Document during interactive editing.

Holds the current document, the caret, and the transient drop indicator.
The indicator is display state only; it is never written into the document.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from lettersmith.contexts.editing.caret import CaretResolver, GeometryProvider, Point
from lettersmith.contexts.editing.document import CaretTarget, Document, SentinelPair
from lettersmith.contexts.editing.exceptions import ReentrantEditError
from lettersmith.contexts.editing.logger import _log_debug, _log_info
from lettersmith.contexts.editing.markers import caret_after, insert_marker

DEFAULT_INDICATOR_GLYPH = "|"


class EditingSession:
    """
    Drag-and-drop marker placement plus basic typing over one Document.

    Every entry point runs under a non-reentrant guard: calling back into the
    session from inside an operation (e.g. from a geometry callback) raises
    ReentrantEditError.

    Usage:
        session = EditingSession(Document.load(letter_text), MonospaceLayout.factory())
        session.hover(Point(96.0, 8.0))
        session.drop(Point(96.0, 8.0), "Acme Corp")
        print(session.document.marked_text())
    """

    def __init__(
        self,
        document: Optional[Document] = None,
        geometry: Optional[GeometryProvider] = None,
        sentinels: Optional[SentinelPair] = None,
        snap_to_markers: bool = True,
    ):
        self._document = document if document is not None else Document(sentinels=sentinels or SentinelPair())
        self.geometry = geometry
        self.sentinels = sentinels or self._document.sentinels
        self.snap_to_markers = snap_to_markers
        self._caret = len(self._document)
        self._indicator: Optional[CaretTarget] = None
        self._active_operation: Optional[str] = None

    @property
    def document(self) -> Document:
        return self._document

    @property
    def caret(self) -> int:
        return self._caret

    @property
    def indicator(self) -> Optional[CaretTarget]:
        return self._indicator

    @contextmanager
    def _exclusive(self, operation: str) -> Iterator[None]:
        if self._active_operation is not None:
            raise ReentrantEditError(operation, self._active_operation)
        self._active_operation = operation
        try:
            yield
        finally:
            self._active_operation = None

    def _resolve(self, point: Optional[Point]) -> Optional[CaretTarget]:
        if point is None or self.geometry is None:
            return None
        resolver = CaretResolver(self.geometry(self._document), snap_to_markers=self.snap_to_markers)
        return resolver.resolve(self._document, point)

    # ------------------------------------------------------------------
    # Drag gesture
    # ------------------------------------------------------------------

    def hover(self, point: Optional[Point]) -> Optional[CaretTarget]:
        """Show the drop indicator at the resolved point (cleared when unresolved)."""
        with self._exclusive("hover"):
            self._indicator = None
            self._indicator = self._resolve(point)
            return self._indicator

    def drop(self, point: Optional[Point], field_value: str) -> Document:
        """
        Insert a Marker holding a copy of field_value at the resolved point.

        No point, or one that cannot be resolved, inserts at the document end.
        The caret moves to just after the new marker.
        """
        with self._exclusive("drop"):
            self._indicator = None
            target = self._resolve(point)
            offset = len(self._document) if target is None else target.offset

            self._document = insert_marker(self._document, target, field_value, self.sentinels)
            placed = self._document.caret_at(offset)
            marker = self._document.segments[placed.segment_index]
            self._caret = caret_after(offset, marker)

            _log_info(
                f"Dropped '{field_value}' at offset {offset}"
                + ("" if target is not None else " (document end)")
            )
            return self._document

    def cancel(self) -> None:
        """Abandon the gesture: clear the indicator, leave the document untouched."""
        with self._exclusive("cancel"):
            self._indicator = None

    def preview(self, glyph: str = DEFAULT_INDICATOR_GLYPH) -> str:
        """Marked text with the indicator glyph at the indicator offset (display only)."""
        text = self._document.marked_text()
        if self._indicator is None:
            return text
        offset = self._indicator.offset
        return text[:offset] + glyph + text[offset:]

    # ------------------------------------------------------------------
    # Typing
    # ------------------------------------------------------------------

    def move_caret(self, offset: int) -> int:
        with self._exclusive("move_caret"):
            self._caret = self._document.clamp(offset)
            return self._caret

    def type_text(self, text: str) -> Document:
        """Insert text at the caret and advance past it."""
        with self._exclusive("type_text"):
            before = len(self._document)
            self._document = self._document.insert(self._caret, text)
            self._caret += len(self._document) - before
            return self._document

    def backspace(self, count: int = 1) -> Document:
        """Delete up to count characters before the caret."""
        with self._exclusive("backspace"):
            start = max(0, self._caret - max(0, count))
            self._document = self._document.delete_range(start, self._caret)
            self._caret = start
            return self._document

    def delete_range(self, start: int, end: int) -> Document:
        with self._exclusive("delete_range"):
            start, end = sorted((self._document.clamp(start), self._document.clamp(end)))
            self._document = self._document.delete_range(start, end)
            if self._caret > end:
                self._caret -= end - start
            elif self._caret > start:
                self._caret = start
            _log_debug(f"Deleted range {start}-{end}")
            return self._document
