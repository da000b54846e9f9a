"""
Relevance matching between a resume and a job posting.

Ranks each document's terms by frequency and derives the prioritized
intersection (the "highlight set") that drives letter phrasing.
"""

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from omegaconf import DictConfig

from lettersmith.contexts.targeting.frequency import TermFrequencyTable, build_frequency_table
from lettersmith.contexts.targeting.logger import _log_debug
from lettersmith.contexts.targeting.stopwords import MINIMAL_STOPWORDS, load_stopwords
from lettersmith.contexts.targeting.tokenizer import Tokenizer

DEFAULT_TOP_N = 20
DEFAULT_MAX_HIGHLIGHTS = 8
DEFAULT_FALLBACK_COUNT = 6


def top_terms(table: TermFrequencyTable, n: int) -> list[str]:
    """
    Return the n highest-count terms.

    Ties break by first-seen position in the source token sequence.
    """
    if n <= 0:
        return []
    ranked = sorted(table.counts, key=lambda term: (-table.counts[term], table.first_seen[term]))
    return ranked[:n]


def prioritized_intersection(
    job_terms: Sequence[str],
    resume_terms: Iterable[str],
    limit: int = DEFAULT_MAX_HIGHLIGHTS,
) -> list[str]:
    """
    Keep job terms (in job rank order) that also appear among resume terms.

    Example:
        >>> prioritized_intersection(["senior", "engineer", "python", "remote"],
        ...                          {"python", "engineer", "cloud"})
        ['engineer', 'python']
    """
    resume_set = set(resume_terms)
    matches = []
    for term in job_terms:
        if len(matches) >= limit:
            break
        if term in resume_set:
            matches.append(term)
    return matches


@dataclass(frozen=True)
class HighlightSet:
    """
    Prioritized terms used to phrase the letter.

    Attributes:
        terms: Highlight terms in priority order
        resume_terms: Resume's ranked top terms
        job_terms: Job posting's ranked top terms
        from_intersection: False when the resume fallback was used
    """

    terms: tuple[str, ...] = ()
    resume_terms: tuple[str, ...] = field(default=(), repr=False)
    job_terms: tuple[str, ...] = field(default=(), repr=False)
    from_intersection: bool = False

    @property
    def phrase(self) -> str:
        return ", ".join(self.terms)

    def __bool__(self) -> bool:
        return bool(self.terms)


class RelevanceMatcher:
    """
    Ranks document vocabulary and matches resume terms against a job posting.

    Attributes:
        tokenizer: Callable producing tokens from raw text
        stopwords: Terms excluded from counting
        min_length: Minimum counted term length
        top_n: Ranked terms kept per document
        max_highlights: Cap on intersection size
        fallback_count: Resume terms used when nothing intersects
    """

    def __init__(
        self,
        tokenizer: Tokenizer = None,
        stopwords: Iterable[str] = MINIMAL_STOPWORDS,
        min_length: int = 2,
        top_n: int = DEFAULT_TOP_N,
        max_highlights: int = DEFAULT_MAX_HIGHLIGHTS,
        fallback_count: int = DEFAULT_FALLBACK_COUNT,
    ):
        self.tokenizer = tokenizer or Tokenizer()
        self.stopwords = frozenset(stopwords)
        self.min_length = min_length
        self.top_n = top_n
        self.max_highlights = max_highlights
        self.fallback_count = fallback_count

    @classmethod
    def from_config(cls, cfg: DictConfig) -> "RelevanceMatcher":
        """Build from the `targeting` config section."""
        return cls(
            tokenizer=Tokenizer(ascii_only=cfg.ascii_only),
            stopwords=load_stopwords(cfg.stopword_pack, extra=cfg.get("extra_stopwords") or ()),
            min_length=cfg.min_term_length,
            top_n=cfg.top_n,
            max_highlights=cfg.max_highlights,
            fallback_count=cfg.fallback_count,
        )

    def frequency_table(self, text: str) -> TermFrequencyTable:
        return build_frequency_table(self.tokenizer(text), self.stopwords, self.min_length)

    def rank(self, text: str, n: int = None) -> list[str]:
        """Rank a document's terms, keeping the top n (default: top_n)."""
        return top_terms(self.frequency_table(text), self.top_n if n is None else n)

    def highlights(self, resume_text: str, job_text: str) -> HighlightSet:
        """
        Derive the highlight set for a resume/job pair.

        Iterates the job ranking, keeping terms also ranked for the resume,
        up to max_highlights. With no overlap, falls back to the resume's
        own top fallback_count terms.
        """
        resume_terms = self.rank(resume_text)
        job_terms = self.rank(job_text)

        matched = prioritized_intersection(job_terms, resume_terms, self.max_highlights)
        if matched:
            terms, from_intersection = matched, True
        else:
            terms, from_intersection = resume_terms[: self.fallback_count], False

        _log_debug(
            f"Highlights ({'intersection' if from_intersection else 'resume fallback'}): "
            f"{', '.join(terms) or '(none)'}"
        )

        return HighlightSet(
            terms=tuple(terms),
            resume_terms=tuple(resume_terms),
            job_terms=tuple(job_terms),
            from_intersection=from_intersection,
        )
