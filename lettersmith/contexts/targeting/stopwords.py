"""
Stopword language packs.

A pack is a named loader returning a frozen set of stopwords. The "minimal"
pack is a short built-in English list (the default); "nltk-english"
loads the NLTK corpus, downloading it on first use.
"""

from typing import Callable, Iterable

import nltk
from nltk.corpus import stopwords

MINIMAL_STOPWORDS = frozenset(
    [
        "a", "an", "the", "and", "or", "of", "to", "for", "in", "on", "with", "as",
        "by", "is", "are", "be", "that", "this", "we", "you", "your", "our", "at",
        "from", "will", "have", "has", "it", "its",
    ]
)


def _load_nltk_stopwords() -> frozenset[str]:
    """Load NLTK English stopwords, downloading if necessary."""
    try:
        return frozenset(stopwords.words("english"))
    except LookupError:
        nltk.download("stopwords", quiet=True)
        return frozenset(stopwords.words("english"))


STOPWORD_PACKS: dict[str, Callable[[], frozenset[str]]] = {
    "minimal": lambda: MINIMAL_STOPWORDS,
    "nltk-english": _load_nltk_stopwords,
}


def load_stopwords(pack: str = "minimal", extra: Iterable[str] = ()) -> frozenset[str]:
    """
    Load a stopword pack, optionally extended with extra words.

    Args:
        pack: Pack name (see STOPWORD_PACKS)
        extra: Additional stopwords (lowercased before merging)

    Returns:
        Frozen set of stopwords

    Raises:
        ValueError: If pack is not registered
    """
    if pack not in STOPWORD_PACKS:
        raise ValueError(f"Unknown stopword pack '{pack}'. Available packs: {sorted(STOPWORD_PACKS)}")

    words = STOPWORD_PACKS[pack]()
    extra = {w.lower() for w in extra}
    return words | extra if extra else words
