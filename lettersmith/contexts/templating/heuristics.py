"""
Structural heuristics for letter composition.

Title, name, and achievement extraction are regex heuristics, so they sit
behind the LetterHeuristics interface: the composer only asks questions and
applies fallbacks, and an alternative strategy can be swapped in.

Pattern classes follow the frozen-dataclass convention used for regex
constants elsewhere in the codebase.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

DEFAULT_ACHIEVEMENT_VERBS = ("project", "led", "developed", "built", "created", "improved")


@dataclass(frozen=True)
class LetterPatterns:
    """Regex patterns for resume/job structural extraction."""

    # Full line of exactly two capitalized words, optionally after a "Name:" label
    # e.g., "Jane Doe", "name: Jane Doe", "Name - Jane Doe"
    CANDIDATE_NAME: re.Pattern = re.compile(r"(?:(?i:name)[:\-\s]*)?([A-Z][a-z]+\s[A-Z][a-z]+)")

    # Markdown header prefix ("## ") or bold wrappers around a title line
    TITLE_MARKUP: re.Pattern = re.compile(r"^#+(?:\s+|$)|^\*\*|\*\*$")


def achievement_pattern(verbs: Iterable[str]) -> re.Pattern:
    """Compile a whole-word, case-insensitive alternation of achievement verbs."""
    alternation = "|".join(re.escape(v) for v in verbs)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


def _lines(text: str) -> list[str]:
    return [line.strip() for line in (text or "").splitlines()]


class LetterHeuristics(ABC):
    """
    Strategy interface for structural extraction.

    Each method returns None when nothing matches; the composer owns fallbacks.
    """

    @abstractmethod
    def job_title(self, job_text: str) -> Optional[str]:
        pass

    @abstractmethod
    def candidate_name(self, resume_text: str) -> Optional[str]:
        pass

    @abstractmethod
    def achievement_line(self, resume_text: str) -> Optional[str]:
        pass


class PatternHeuristics(LetterHeuristics):
    """Line-oriented regex heuristics (the default strategy)."""

    def __init__(self, achievement_verbs: Iterable[str] = DEFAULT_ACHIEVEMENT_VERBS):
        self.achievement_verbs = tuple(achievement_verbs)
        self._achievement = achievement_pattern(self.achievement_verbs)

    def job_title(self, job_text: str) -> Optional[str]:
        """First non-empty line of the posting, with markdown wrappers removed."""
        for line in _lines(job_text):
            title = LetterPatterns.TITLE_MARKUP.sub("", line).strip()
            if title:
                return title
        return None

    def candidate_name(self, resume_text: str) -> Optional[str]:
        """First line that is exactly a two-word capitalized name."""
        for line in _lines(resume_text):
            match = LetterPatterns.CANDIDATE_NAME.fullmatch(line)
            if match:
                return match.group(1)
        return None

    def achievement_line(self, resume_text: str) -> Optional[str]:
        """First line mentioning an achievement verb."""
        for line in _lines(resume_text):
            if line and self._achievement.search(line):
                return line
        return None
