"""
LLM-backed cover letter generation.

Optional alternative to the template composer. The provider call is an
external collaborator: any failure comes back as status text on the result,
and the template composer remains usable with the same inputs.
"""

from dataclasses import dataclass
from typing import Optional

from omegaconf import DictConfig

from lettersmith.contexts.templating.logger import _log_error, _log_success
from lettersmith.utils.llm import GenerationSettings, LLMProvider, get_provider

_SYSTEM_PROMPT = """\
You are a professional resume and cover letter writer.
Produce only the cover letter, with no preamble or commentary."""

_USER_PROMPT_TEMPLATE = """\
Generate a concise, persuasive cover letter (approx. 3 short paragraphs) tailored to the following job posting and resume.

Job posting:

{job_text}

Resume:

{resume_text}"""


@dataclass(frozen=True)
class GenerationResult:
    """Generated letter text, or an error status to show in place of it."""

    text: str = ""
    error: Optional[str] = None
    model: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def field_text(self) -> str:
        return self.text if self.ok else self.error


def build_prompt(resume_text: str, job_text: str) -> str:
    return _USER_PROMPT_TEMPLATE.format(job_text=job_text or "", resume_text=resume_text or "")


def provider_from_config(cfg: DictConfig) -> LLMProvider:
    """Build a provider from the `llm` config section (may raise ValueError/ImportError)."""
    return get_provider(cfg.provider, GenerationSettings.from_config(cfg))


def compose_with_llm(
    resume_text: str,
    job_text: str,
    provider: Optional[LLMProvider] = None,
    cfg: Optional[DictConfig] = None,
) -> GenerationResult:
    """
    Generate a cover letter with an LLM provider.

    Args:
        resume_text: Resume text
        job_text: Job posting text
        provider: Provider instance (built from cfg or environment when None)
        cfg: Optional `llm` config section used to build the provider

    Returns:
        GenerationResult; never raises for provider, SDK, or key failures
    """
    try:
        if provider is None:
            provider = provider_from_config(cfg) if cfg is not None else get_provider()
        response = provider.generate(_SYSTEM_PROMPT, build_prompt(resume_text, job_text))
    except Exception as e:
        _log_error(f"LLM generation failed: {e}")
        return GenerationResult(error=f"LLM error: {e}")

    _log_success(
        f"Generated letter with {provider.name} "
        f"({response.input_tokens} in / {response.output_tokens} out tokens)"
    )
    return GenerationResult(text=response.content.strip(), model=response.model)
