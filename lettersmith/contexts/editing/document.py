"""
Editable document model.

A Document is an immutable, ordered tuple of segments: plain TextRuns and
atomic Markers (a field value wrapped in a sentinel pair). Every edit returns
a new Document whose segments are normalized:

- concatenating the rendered segments reproduces the document text
- no two adjacent TextRuns
- no empty TextRun

Offsets are logical character positions in the marked text (markers rendered
with their sentinels), so the caret, the layout, and the raw export all agree
on positions.

Edits that reach into a Marker's interior dissolve it: the marker's rendered
characters become plain text and the edit applies to them. Edits at a marker's
boundaries leave it intact.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from omegaconf import DictConfig

from lettersmith.contexts.editing.exceptions import DocumentInvariantError
from lettersmith.contexts.editing.logger import _log_debug, _log_warning
from lettersmith.utils.text_processing import normalize_line_breaks


@dataclass(frozen=True)
class SentinelPair:
    """Delimiters wrapping a marker value in the marked text. Default: "}}" opens, "{{" closes."""

    open: str = "}}"
    close: str = "{{"

    def __post_init__(self):
        for name, token in (("open", self.open), ("close", self.close)):
            if not isinstance(token, str) or not token:
                raise ValueError(f"Sentinel '{name}' must be a non-empty string")
            if "\n" in token or "\r" in token:
                raise ValueError(f"Sentinel '{name}' must not contain line breaks: {token!r}")
        if self.open == self.close:
            raise ValueError(f"Open and close sentinels must differ (both {self.open!r})")

    @classmethod
    def from_config(cls, cfg: DictConfig) -> "SentinelPair":
        """Build from the `markers` config section."""
        return cls(open=cfg.open, close=cfg.close)

    def wrap(self, value: str) -> str:
        return f"{self.open}{value}{self.close}"

    def __str__(self) -> str:
        return f"{self.open} / {self.close}"


DEFAULT_SENTINELS = SentinelPair()


@dataclass(frozen=True)
class TextRun:
    """Contiguous plain text."""

    text: str

    def render(self) -> str:
        return self.text

    def plain(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class Marker:
    """
    Atomic field value placed in the document.

    Owns a copy of the value taken at drop time; later edits to the source
    field do not reach it.
    """

    value: str
    sentinels: SentinelPair = DEFAULT_SENTINELS

    def __post_init__(self):
        # Same line-break form as TextRuns, so offsets match the exported text
        object.__setattr__(self, "value", normalize_line_breaks(self.value))

    def render(self) -> str:
        return self.sentinels.wrap(self.value)

    def plain(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.sentinels.open) + len(self.value) + len(self.sentinels.close)


Segment = Union[TextRun, Marker]


@dataclass(frozen=True)
class CaretTarget:
    """
    Resolved insertion point.

    Attributes:
        offset: Logical offset in the marked text
        segment_index: Segment the offset falls in (len(segments) at document end)
        segment_offset: Offset within that segment (0 at a segment boundary)
    """

    offset: int
    segment_index: int
    segment_offset: int


@dataclass(frozen=True)
class PlacedMarker:
    """A Marker together with its start offset in the marked text."""

    offset: int
    marker: Marker

    @property
    def end(self) -> int:
        return self.offset + len(self.marker)

    @property
    def value(self) -> str:
        return self.marker.value


def _normalize(segments: Iterable[Segment]) -> Tuple[Segment, ...]:
    """Drop empty TextRuns and merge adjacent ones."""
    result: List[Segment] = []
    for segment in segments:
        if isinstance(segment, TextRun):
            if not segment.text:
                continue
            if result and isinstance(result[-1], TextRun):
                result[-1] = TextRun(result[-1].text + segment.text)
                continue
        result.append(segment)
    return tuple(result)


def _dissolve(marker: Marker) -> TextRun:
    return TextRun(marker.render())


@dataclass(frozen=True)
class Document:
    """
    Immutable segment sequence with offset-based editing.

    Construct through Document.load() or the editing operations; constructing
    directly with non-normalized segments raises DocumentInvariantError.
    """

    segments: Tuple[Segment, ...] = ()
    sentinels: SentinelPair = DEFAULT_SENTINELS

    def __post_init__(self):
        if not isinstance(self.segments, tuple):
            object.__setattr__(self, "segments", tuple(self.segments))
        self._check_invariants()

    def _check_invariants(self):
        previous_was_text = False
        for index, segment in enumerate(self.segments):
            if isinstance(segment, TextRun):
                if not segment.text:
                    raise DocumentInvariantError("Empty TextRun in document", index)
                if previous_was_text:
                    raise DocumentInvariantError("Adjacent TextRuns in document", index)
                previous_was_text = True
            elif isinstance(segment, Marker):
                previous_was_text = False
            else:
                raise DocumentInvariantError(
                    f"Unknown segment type {type(segment).__name__}", index
                )

    def _replace(self, segments: Iterable[Segment]) -> "Document":
        return Document(_normalize(segments), self.sentinels)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def load(
        cls,
        text: str,
        sentinels: Optional[SentinelPair] = None,
        parse_markers: bool = False,
    ) -> "Document":
        """
        Create a document from text.

        Args:
            text: Source text (line breaks are normalized to \\n)
            sentinels: Sentinel pair for markers (default "}}" / "{{")
            parse_markers: Reconstruct sentinel-wrapped spans (no line break
                inside) as Markers, e.g. when reopening a raw export

        Returns:
            New Document
        """
        sentinels = sentinels or DEFAULT_SENTINELS
        text = normalize_line_breaks(text or "")

        if not parse_markers:
            document = cls(_normalize([TextRun(text)]), sentinels)
        else:
            pattern = re.compile(
                re.escape(sentinels.open) + r"([^\n]*?)" + re.escape(sentinels.close)
            )
            segments: List[Segment] = []
            position = 0
            for match in pattern.finditer(text):
                segments.append(TextRun(text[position : match.start()]))
                segments.append(Marker(match.group(1), sentinels))
                position = match.end()
            segments.append(TextRun(text[position:]))
            document = cls(_normalize(segments), sentinels)
            _log_debug(f"Reconstructed {len(document.markers())} markers from loaded text")

        collisions = document.sentinel_collisions()
        if collisions:
            _log_warning(
                f"Loaded text contains {len(collisions)} sentinel occurrence(s) ({sentinels}) "
                f"outside markers; clean export will strip them"
            )
        return document

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return sum(len(segment) for segment in self.segments)

    def marked_text(self) -> str:
        """Document text with markers wrapped in their sentinels."""
        return "".join(segment.render() for segment in self.segments)

    def plain_text(self) -> str:
        """Document text with markers rendered as their bare values."""
        return "".join(segment.plain() for segment in self.segments)

    def is_empty(self) -> bool:
        return not self.segments

    def clamp(self, offset: int) -> int:
        return max(0, min(int(offset), len(self)))

    def _ordered_range(self, start: int, end: int) -> Tuple[int, int]:
        start, end = self.clamp(start), self.clamp(end)
        return (start, end) if start <= end else (end, start)

    def read_range(self, start: int, end: int) -> str:
        """Marked text between two offsets (clamped and ordered)."""
        start, end = self._ordered_range(start, end)
        return self.marked_text()[start:end]

    def caret_at(self, offset: int) -> CaretTarget:
        """
        Locate an offset within the segment sequence.

        A boundary offset belongs to the following segment (segment_offset 0);
        the document end maps to segment_index == len(segments).
        """
        offset = self.clamp(offset)
        position = 0
        for index, segment in enumerate(self.segments):
            if offset < position + len(segment):
                return CaretTarget(offset, index, offset - position)
            position += len(segment)
        return CaretTarget(offset, len(self.segments), 0)

    def markers(self) -> List[PlacedMarker]:
        placed = []
        position = 0
        for segment in self.segments:
            if isinstance(segment, Marker):
                placed.append(PlacedMarker(position, segment))
            position += len(segment)
        return placed

    def marker_containing(self, offset: int) -> Optional[PlacedMarker]:
        """Marker whose interior (strictly between its boundaries) holds the offset."""
        for placed in self.markers():
            if placed.offset < offset < placed.end:
                return placed
        return None

    def sentinel_collisions(self) -> List[int]:
        """Offsets of sentinel occurrences inside plain TextRuns."""
        collisions = []
        position = 0
        for segment in self.segments:
            if isinstance(segment, TextRun):
                for token in (self.sentinels.open, self.sentinels.close):
                    start = segment.text.find(token)
                    while start != -1:
                        collisions.append(position + start)
                        start = segment.text.find(token, start + len(token))
            position += len(segment)
        return sorted(set(collisions))

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def insert(self, offset: int, item: Union[str, Marker]) -> "Document":
        """
        Insert text or a Marker at an offset (clamped).

        Inserting strictly inside a Marker dissolves it into plain text first.
        """
        if isinstance(item, str):
            item = normalize_line_breaks(item)
            if not item:
                return self
            new_segment: Segment = TextRun(item)
        elif isinstance(item, Marker):
            new_segment = item
        else:
            raise TypeError(f"Cannot insert {type(item).__name__} into a Document")

        target = self.caret_at(offset)
        segments = list(self.segments)

        if target.segment_index == len(segments):
            segments.append(new_segment)
            return self._replace(segments)

        current = segments[target.segment_index]
        if target.segment_offset == 0:
            segments.insert(target.segment_index, new_segment)
            return self._replace(segments)

        if isinstance(current, Marker):
            _log_debug(f"Insert at {target.offset} dissolves marker '{current.value}'")
            current = _dissolve(current)

        split = target.segment_offset
        segments[target.segment_index : target.segment_index + 1] = [
            TextRun(current.text[:split]),
            new_segment,
            TextRun(current.text[split:]),
        ]
        return self._replace(segments)

    def delete_range(self, start: int, end: int) -> "Document":
        """
        Delete the marked text between two offsets (clamped and ordered).

        A Marker fully inside the range is removed; one the range only
        partially covers is dissolved and its uncovered characters are kept.
        """
        start, end = self._ordered_range(start, end)
        if start == end:
            return self

        segments: List[Segment] = []
        position = 0
        for segment in self.segments:
            seg_start, seg_end = position, position + len(segment)
            position = seg_end

            if seg_end <= start or seg_start >= end:
                segments.append(segment)
                continue
            if start <= seg_start and seg_end <= end:
                continue

            if isinstance(segment, Marker):
                _log_debug(f"Delete {start}-{end} dissolves marker '{segment.value}'")
            text = segment.render()
            keep_head = text[: max(0, start - seg_start)]
            keep_tail = text[max(0, end - seg_start) :]
            segments.append(TextRun(keep_head + keep_tail))

        return self._replace(segments)

    def replace_segments(self, segments: Iterable[Segment]) -> "Document":
        """New document with the given segments, normalized."""
        return self._replace(segments)
