"""
Templating Context

Responsibilities:
- Extracts structural cues (job title, candidate name, achievement line)
- Renders the three-paragraph cover letter from Jinja2 templates
- Optionally delegates letter generation to an LLM provider

Owns: Letter templates and composition
Never: Scores terms itself (consumes the targeting context's highlight set)
"""

from lettersmith.contexts.templating.composer import CoverLetter, LetterComposer, LetterDefaults
from lettersmith.contexts.templating.exceptions import TemplateRenderError
from lettersmith.contexts.templating.heuristics import LetterHeuristics, PatternHeuristics
from lettersmith.contexts.templating.llm_composer import GenerationResult, compose_with_llm
from lettersmith.contexts.templating.registries import TemplateRegistry

__all__ = [
    "CoverLetter",
    "LetterComposer",
    "LetterDefaults",
    "LetterHeuristics",
    "PatternHeuristics",
    "TemplateRegistry",
    "TemplateRenderError",
    "GenerationResult",
    "compose_with_llm",
]
