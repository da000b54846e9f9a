"""
Marker lifecycle: placing field values into a document and removing them.
"""

from typing import List, Optional

from lettersmith.contexts.editing.document import (
    CaretTarget,
    Document,
    Marker,
    PlacedMarker,
    SentinelPair,
    TextRun,
)
from lettersmith.contexts.editing.logger import _log_debug


def insert_marker(
    document: Document,
    target: Optional[CaretTarget],
    field_value: str,
    sentinels: Optional[SentinelPair] = None,
) -> Document:
    """
    Splice a Marker holding a copy of the field value into the document.

    Args:
        document: Document to insert into
        target: Insertion point; None inserts at the document end
        field_value: Value to copy into the marker
        sentinels: Delimiters for the marker (defaults to the document's pair)

    Returns:
        New Document containing the marker
    """
    marker = Marker(str(field_value or ""), sentinels or document.sentinels)
    offset = len(document) if target is None else target.offset
    _log_debug(f"Placing marker '{marker.value}' at offset {offset}")
    return document.insert(offset, marker)


def caret_after(target_offset: int, marker: Marker) -> int:
    """Offset immediately after a marker inserted at target_offset."""
    return target_offset + len(marker)


def strip_markers(document: Document) -> Document:
    """Convert every Marker to plain text holding its bare value."""
    return document.replace_segments(
        TextRun(segment.value) if isinstance(segment, Marker) else segment
        for segment in document.segments
    )


def list_markers(document: Document) -> List[PlacedMarker]:
    return document.markers()


def find_sentinel_collisions(text: str, sentinels: Optional[SentinelPair] = None) -> List[int]:
    """
    Offsets where either sentinel occurs in text.

    Run on prose before loading it: any hit will be indistinguishable from a
    marker delimiter in the raw export and stripped from the clean export.
    """
    sentinels = sentinels or SentinelPair()
    text = text or ""
    offsets = set()
    for token in (sentinels.open, sentinels.close):
        start = text.find(token)
        while start != -1:
            offsets.add(start)
            start = text.find(token, start + len(token))
    return sorted(offsets)
