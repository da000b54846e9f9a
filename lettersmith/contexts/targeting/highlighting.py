"""
Keyword highlighting.

Locates occurrences of highlight terms in source text as character spans so a
display layer can emphasize them without re-tokenizing.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable


@dataclass(frozen=True)
class TermSpan:
    """Occurrence of a term in text: text[start:end] matches term case-insensitively."""

    start: int
    end: int
    term: str


def _term_pattern(term: str) -> re.Pattern:
    # Boundaries are "not next to a letter or digit", so "c++" and "c#" still match
    return re.compile(r"(?<![^\W_])" + re.escape(term) + r"(?![^\W_])", re.IGNORECASE)


def find_term_spans(text: str, terms: Iterable[str]) -> list[TermSpan]:
    """
    Find whole-term, case-insensitive occurrences of terms.

    Spans are sorted by start and never overlap; at the same start the longer
    term wins.

    Example:
        >>> find_term_spans("Python and python-based tools", ["python"])
        [TermSpan(start=0, end=6, term='python'), TermSpan(start=11, end=17, term='python')]
    """
    candidates = []
    for term in dict.fromkeys(t for t in terms if t):
        for match in _term_pattern(term).finditer(text):
            candidates.append(TermSpan(match.start(), match.end(), term))

    candidates.sort(key=lambda span: (span.start, -(span.end - span.start)))

    spans = []
    last_end = -1
    for span in candidates:
        if span.start >= last_end:
            spans.append(span)
            last_end = span.end
    return spans


def highlight_text(text: str, terms: Iterable[str], render: Callable[[str], str]) -> str:
    """
    Rewrite text with every term occurrence passed through render.

    Example:
        >>> highlight_text("Led billing work", ["billing"], lambda s: f"**{s}**")
        'Led **billing** work'
    """
    pieces = []
    cursor = 0
    for span in find_term_spans(text, terms):
        pieces.append(text[cursor : span.start])
        pieces.append(render(text[span.start : span.end]))
        cursor = span.end
    pieces.append(text[cursor:])
    return "".join(pieces)
