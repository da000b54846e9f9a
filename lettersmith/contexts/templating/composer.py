"""
Template-based cover letter composer.

Combines the targeting context's highlight set with structural heuristics and
renders the letter through Jinja2 templates. Deterministic: the same resume and
job text always produce the same letter, and no external service is called.
"""

from dataclasses import dataclass
from typing import Optional

from omegaconf import DictConfig

from lettersmith.contexts.targeting import HighlightSet, RelevanceMatcher
from lettersmith.contexts.templating.heuristics import LetterHeuristics, PatternHeuristics
from lettersmith.contexts.templating.logger import _log_debug, _log_info
from lettersmith.contexts.templating.registries import TemplateRegistry

SALUTATION = "Dear Hiring Manager,"
SIGN_OFF = "Sincerely,"


@dataclass(frozen=True)
class LetterDefaults:
    """Substitutes used when a heuristic finds nothing."""

    job_title: str = "the role"
    candidate_name: str = "[Your Name]"
    achievement: str = "Relevant project experience and measurable outcomes."
    highlight_phrase: str = "the skills outlined in your posting"

    @classmethod
    def from_config(cls, cfg: DictConfig) -> "LetterDefaults":
        return cls(
            job_title=cfg.default_job_title,
            candidate_name=cfg.default_candidate_name,
            achievement=cfg.default_achievement,
            highlight_phrase=cfg.default_highlight_phrase,
        )


@dataclass(frozen=True)
class CoverLetter:
    """
    Composed cover letter.

    Attributes:
        salutation: Greeting line
        opening: Paragraph referencing job title and highlight terms
        body: Paragraph referencing highlight terms and the achievement line
        closing: Closing paragraph ending with the sign-off and candidate name
        signature: Candidate name the closing is signed with
        text: Full letter text with paragraph breaks
        highlights: Highlight set the letter was phrased from
    """

    salutation: str = ""
    opening: str = ""
    body: str = ""
    closing: str = ""
    signature: str = ""
    text: str = ""
    highlights: Optional[HighlightSet] = None

    @classmethod
    def empty(cls) -> "CoverLetter":
        return cls()

    @property
    def paragraphs(self) -> tuple[str, ...]:
        if not self.text:
            return ()
        return (self.opening, self.body, self.closing)

    def __str__(self) -> str:
        return self.text


class LetterComposer:
    """
    Composes a three-paragraph cover letter from resume and job posting text.

    Usage:
        composer = LetterComposer()
        letter = composer.compose(resume_text, job_text)
        print(letter.text)
    """

    def __init__(
        self,
        matcher: RelevanceMatcher = None,
        heuristics: LetterHeuristics = None,
        registry: TemplateRegistry = None,
        defaults: LetterDefaults = None,
    ):
        self.matcher = matcher or RelevanceMatcher()
        self.heuristics = heuristics or PatternHeuristics()
        self.registry = registry or TemplateRegistry()
        self.defaults = defaults or LetterDefaults()

    @classmethod
    def from_config(cls, cfg: DictConfig) -> "LetterComposer":
        """Build from the full config (uses `targeting` and `templating` sections)."""
        return cls(
            matcher=RelevanceMatcher.from_config(cfg.targeting),
            heuristics=PatternHeuristics(cfg.templating.achievement_verbs),
            defaults=LetterDefaults.from_config(cfg.templating),
        )

    def compose(self, resume_text: str, job_text: str) -> CoverLetter:
        """
        Compose the letter.

        Both inputs empty -> empty letter. One input empty -> the letter is
        still produced, with fallbacks filling whatever cannot be derived.
        """
        resume_text = resume_text or ""
        job_text = job_text or ""
        if not resume_text.strip() and not job_text.strip():
            _log_debug("Both resume and job text empty; nothing to compose")
            return CoverLetter.empty()

        highlights = self.matcher.highlights(resume_text, job_text)
        job_title = self.heuristics.job_title(job_text) or self.defaults.job_title
        candidate_name = self.heuristics.candidate_name(resume_text) or self.defaults.candidate_name
        achievement = self.heuristics.achievement_line(resume_text) or self.defaults.achievement
        highlight_phrase = highlights.phrase or self.defaults.highlight_phrase

        context = {
            "job_title": job_title,
            "candidate_name": candidate_name,
            "achievement": achievement,
            "highlight_phrase": highlight_phrase,
            "sign_off": SIGN_OFF,
        }
        opening = self.registry.render("opening", **context)
        body = self.registry.render("body", **context)
        closing = self.registry.render("closing", **context)

        text = self.registry.render(
            "letter",
            salutation=SALUTATION,
            paragraphs=[opening, body, closing],
        )

        _log_info(f"Composed letter for '{job_title}' ({len(highlights.terms)} highlight terms)")

        return CoverLetter(
            salutation=SALUTATION,
            opening=opening,
            body=body,
            closing=closing,
            signature=candidate_name,
            text=text,
            highlights=highlights,
        )
