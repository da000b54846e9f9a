"""
Targeting Context

Responsibilities:
- Tokenizes resume and job posting text into normalized terms
- Counts term frequencies against a swappable stopword pack
- Ranks terms deterministically and derives the resume/job highlight set
- Locates highlight terms in text for display

Owns: Term scoring, ranking, and matching logic
Never: Composes letter text or touches the editing document
"""

from lettersmith.contexts.targeting.frequency import TermFrequencyTable, build_frequency_table
from lettersmith.contexts.targeting.highlighting import TermSpan, find_term_spans, highlight_text
from lettersmith.contexts.targeting.matcher import (
    HighlightSet,
    RelevanceMatcher,
    prioritized_intersection,
    top_terms,
)
from lettersmith.contexts.targeting.stopwords import MINIMAL_STOPWORDS, load_stopwords
from lettersmith.contexts.targeting.tokenizer import Tokenizer, tokenize

__all__ = [
    "Tokenizer",
    "tokenize",
    "MINIMAL_STOPWORDS",
    "load_stopwords",
    "TermFrequencyTable",
    "build_frequency_table",
    "top_terms",
    "prioritized_intersection",
    "HighlightSet",
    "RelevanceMatcher",
    "TermSpan",
    "find_term_spans",
    "highlight_text",
]
