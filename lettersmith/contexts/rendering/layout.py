"""
Monospace layout geometry.

Lays a document's marked text out on a fixed character grid and converts
between surface coordinates and logical offsets. An instance is the
`resolve_coordinate` capability the editing context's CaretResolver expects;
`MonospaceLayout.factory()` is the geometry provider an EditingSession takes.
"""

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from omegaconf import DictConfig

from lettersmith.contexts.editing import Document, Point

DEFAULT_COLUMNS = 80
DEFAULT_CHAR_WIDTH = 8.0
DEFAULT_LINE_HEIGHT = 16.0


@dataclass(frozen=True)
class VisualLine:
    """One row of the grid: starting offset and length in characters."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


def wrap_lines(text: str, columns: int) -> List[VisualLine]:
    """
    Split text into visual lines: break at \\n, then hard-wrap at `columns`.

    An empty logical line still occupies one visual line. The \\n itself is
    not part of any visual line.
    """
    lines: List[VisualLine] = []
    position = 0
    for logical in text.split("\n"):
        if not logical:
            lines.append(VisualLine(position, 0))
        for chunk_start in range(0, len(logical), columns):
            lines.append(VisualLine(position + chunk_start, min(columns, len(logical) - chunk_start)))
        position += len(logical) + 1
    return lines


class MonospaceLayout:
    """
    Fixed-width grid geometry for a block of text.

    Calling the layout with a Point returns the nearest character-boundary
    offset on that row (x rounded, clamped to the row's length), or None when
    the point lies outside the editable rectangle.
    """

    def __init__(
        self,
        text: str,
        columns: int = DEFAULT_COLUMNS,
        char_width: float = DEFAULT_CHAR_WIDTH,
        line_height: float = DEFAULT_LINE_HEIGHT,
        origin: Tuple[float, float] = (0.0, 0.0),
    ):
        if columns < 1:
            raise ValueError(f"columns must be positive, got {columns}")
        if char_width <= 0 or line_height <= 0:
            raise ValueError("char_width and line_height must be positive")

        self.text = text
        self.columns = columns
        self.char_width = float(char_width)
        self.line_height = float(line_height)
        self.origin = (float(origin[0]), float(origin[1]))
        self.lines = wrap_lines(text, columns)

    @classmethod
    def for_document(
        cls,
        document: Document,
        columns: int = DEFAULT_COLUMNS,
        char_width: float = DEFAULT_CHAR_WIDTH,
        line_height: float = DEFAULT_LINE_HEIGHT,
        origin: Tuple[float, float] = (0.0, 0.0),
    ) -> "MonospaceLayout":
        return cls(document.marked_text(), columns, char_width, line_height, origin)

    @classmethod
    def factory(
        cls,
        columns: int = DEFAULT_COLUMNS,
        char_width: float = DEFAULT_CHAR_WIDTH,
        line_height: float = DEFAULT_LINE_HEIGHT,
        origin: Tuple[float, float] = (0.0, 0.0),
    ) -> Callable[[Document], "MonospaceLayout"]:
        """Geometry provider: builds a layout for whatever document is current."""

        def build(document: Document) -> "MonospaceLayout":
            return cls.for_document(document, columns, char_width, line_height, origin)

        return build

    @classmethod
    def factory_from_config(cls, cfg: DictConfig) -> Callable[[Document], "MonospaceLayout"]:
        """Geometry provider from the `layout` config section."""
        return cls.factory(columns=cfg.columns, char_width=cfg.char_width, line_height=cfg.line_height)

    @property
    def width(self) -> float:
        return self.columns * self.char_width

    @property
    def height(self) -> float:
        return len(self.lines) * self.line_height

    def resolve(self, point: Point) -> Optional[int]:
        x = point.x - self.origin[0]
        y = point.y - self.origin[1]
        if x < 0 or y < 0 or x > self.width or y >= self.height:
            return None

        line = self.lines[int(y // self.line_height)]
        column = math.floor(x / self.char_width + 0.5)
        return line.start + max(0, min(column, line.length))

    def __call__(self, point: Point) -> Optional[int]:
        return self.resolve(point)

    def row_of(self, offset: int) -> int:
        """Visual row holding an offset; a wrap boundary belongs to the later row."""
        offset = max(0, min(offset, len(self.text)))
        row = 0
        for index, line in enumerate(self.lines):
            if line.start <= offset:
                row = index
            else:
                break
        return row

    def point_for(self, offset: int) -> Point:
        """Surface point (vertical middle of the row) that resolves back to offset."""
        offset = max(0, min(offset, len(self.text)))
        row = self.row_of(offset)
        line = self.lines[row]
        column = min(offset - line.start, line.length)
        return Point(
            x=self.origin[0] + column * self.char_width,
            y=self.origin[1] + (row + 0.5) * self.line_height,
        )

    def offset_at(self, line_number: int, column: int) -> int:
        """
        Offset for a 1-based logical line and 1-based column, both clamped.

        Logical lines are the \\n-separated lines of the text, independent of wrapping.
        """
        logical_lines = self.text.split("\n")
        line_index = max(0, min(line_number - 1, len(logical_lines) - 1))
        start = sum(len(line) + 1 for line in logical_lines[:line_index])
        return start + max(0, min(column - 1, len(logical_lines[line_index])))
