"""Plain-text helpers shared by intake, editing, and export."""

import re

# Every line-break spelling collapses to "\n"
_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\u2028|\u2029")

# A newline followed by one or more blank (empty or space/tab-only) lines
_BLANK_RUN_PATTERN = re.compile(r"\n(?:[ \t]*\n)+")


def normalize_line_breaks(text: str) -> str:
    """
    Collapse every line-break representation to a single canonical newline.

    Example:
        >>> normalize_line_breaks("a\\r\\nb\\rc")
        'a\\nb\\nc'
    """
    return _LINE_BREAK_PATTERN.sub("\n", text)


def collapse_blank_lines(text: str, max_blank_lines: int = 1) -> str:
    """
    Shorten runs of blank lines to at most max_blank_lines (0 removes them all).

    Runs already within the limit are left as they are, whitespace included.

    Example:
        >>> collapse_blank_lines("text\\n\\n\\n\\nmore")
        'text\\n\\nmore'
        >>> collapse_blank_lines("text\\n\\n\\n\\nmore", max_blank_lines=0)
        'text\\nmore'
    """
    newlines = max(0, max_blank_lines) + 1

    def shorten(match: re.Match) -> str:
        run = match.group(0)
        return "\n" * newlines if run.count("\n") > newlines else run

    return _BLANK_RUN_PATTERN.sub(shorten, text)


def truncate_display(text: str, max_len: int, ellipsis: str = "...") -> str:
    """Clip text to max_len characters for table output, marking the cut with ellipsis."""
    if len(text) <= max_len:
        return text
    return text[: max(0, max_len - len(ellipsis))] + ellipsis
