"""
Term frequency index.

Builds a term -> count table from a token sequence, tracking each term's
first-occurrence position so that ranking ties break the same way on every
run and every platform.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass(frozen=True)
class TermFrequencyTable:
    """
    Term counts for one document.

    Attributes:
        counts: Term -> positive occurrence count
        first_seen: Term -> index of its first occurrence in the source token sequence
    """

    counts: dict[str, int] = field(default_factory=dict)
    first_seen: dict[str, int] = field(default_factory=dict)

    def count(self, term: str) -> int:
        return self.counts.get(term, 0)

    def __contains__(self, term: object) -> bool:
        return term in self.counts

    def __len__(self) -> int:
        return len(self.counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.counts)

    def total(self) -> int:
        """Total number of counted occurrences."""
        return sum(self.counts.values())


def build_frequency_table(
    tokens: Iterable[str],
    stopwords: Iterable[str] = frozenset(),
    min_length: int = 2,
) -> TermFrequencyTable:
    """
    Count terms, discarding short tokens and stopwords.

    Args:
        tokens: Token sequence (source order)
        stopwords: Terms to discard
        min_length: Minimum term length to keep

    Returns:
        TermFrequencyTable

    Example:
        >>> table = build_frequency_table(["python", "a", "the", "python", "go"], {"the"})
        >>> table.counts
        {'python': 2, 'go': 1}
        >>> table.first_seen
        {'python': 0, 'go': 4}
    """
    stopwords = stopwords if isinstance(stopwords, (set, frozenset)) else frozenset(stopwords)

    counts: dict[str, int] = {}
    first_seen: dict[str, int] = {}
    for position, term in enumerate(tokens):
        if len(term) < min_length or term in stopwords:
            continue
        if term not in counts:
            counts[term] = 0
            first_seen[term] = position
        counts[term] += 1

    return TermFrequencyTable(counts=counts, first_seen=first_seen)
