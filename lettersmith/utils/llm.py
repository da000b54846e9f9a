"""
Chat-completion providers for letter generation.

Each provider wraps one vendor SDK behind `generate(system_prompt, user_prompt)`.
SDKs are imported when a provider is constructed, so the template composer
works without them installed.
"""

import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Iterator, Optional, Tuple, TypeVar

from dotenv import load_dotenv
from loguru import logger
from omegaconf import DictConfig

load_dotenv()

T = TypeVar("T")


@dataclass(frozen=True)
class GenerationSettings:
    """Model selection and sampling parameters shared by every provider."""

    model: Optional[str] = None
    max_tokens: int = 600
    temperature: float = 0.2

    @classmethod
    def from_config(cls, cfg: DictConfig) -> "GenerationSettings":
        """Build from the `llm` config section (model null = provider default)."""
        return cls(
            model=cfg.get("model") or None,
            max_tokens=cfg.max_tokens,
            temperature=cfg.temperature,
        )


@dataclass(frozen=True)
class Backoff:
    """
    Exponential backoff: `attempts` calls in total, waiting base_delay * 2^n between them.

    Example:
        >>> list(Backoff(attempts=4, base_delay=1.0).delays())
        [1.0, 2.0, 4.0]
    """

    attempts: int = 5
    base_delay: float = 1.0

    def delays(self) -> Iterator[float]:
        for n in range(self.attempts - 1):
            yield self.base_delay * (2**n)

    def run(
        self,
        operation: Callable[[], T],
        retry_on: type[Exception],
        label: str,
        sleep: Callable[[float], None] = time.sleep,
    ) -> T:
        """Call operation, retrying only on retry_on; the last failure propagates."""
        for attempt, delay in enumerate(self.delays(), start=1):
            try:
                return operation()
            except retry_on:
                logger.warning(f"{label}, retrying in {delay:.1f}s (attempt {attempt}/{self.attempts})")
                sleep(delay)
        return operation()


@dataclass
class LLMResponse:
    """Completion text plus token accounting."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int


class LLMProvider(ABC):
    """
    Base class for vendor providers.

    Subclasses set `vendor`, `default_model` and `api_key_env`, and implement
    `_connect()` (import the SDK, return the client and its transient error type)
    and `_complete()` (one API call, no retries).
    """

    vendor: str
    default_model: str
    api_key_env: str
    backoff: Backoff = Backoff()

    client: Any
    retry_on: type[Exception]

    def __init__(self, settings: Optional[GenerationSettings] = None):
        self.settings = settings or GenerationSettings()
        self.model = self.settings.model or self.default_model
        self.client, self.retry_on = self._connect()

    @property
    def name(self) -> str:
        return f"{self.vendor}/{self.model}"

    def _api_key(self) -> str:
        api_key = os.getenv(self.api_key_env)
        if not api_key:
            raise ValueError(f"{self.api_key_env} environment variable not set")
        return api_key

    @abstractmethod
    def _connect(self) -> Tuple[Any, type[Exception]]:
        pass

    @abstractmethod
    def _complete(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        pass

    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        sleep: Callable[[float], None] = time.sleep,
    ) -> LLMResponse:
        """Complete the prompt, backing off on the vendor's transient error."""
        return self.backoff.run(
            partial(self._complete, system_prompt, user_prompt),
            self.retry_on,
            f"{self.name} unavailable",
            sleep,
        )


class AnthropicProvider(LLMProvider):
    vendor = "anthropic"
    default_model = "claude-sonnet-4-20250514"
    api_key_env = "ANTHROPIC_API_KEY"

    def _connect(self):
        try:
            import anthropic
        except ImportError:
            raise ImportError("anthropic package required. Install with: pip install lettersmith[llm]")
        return anthropic.Anthropic(api_key=self._api_key()), anthropic.OverloadedError

    def _complete(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.settings.max_tokens,
            temperature=self.settings.temperature,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )
        return LLMResponse(
            content="".join(block.text for block in response.content if block.type == "text"),
            model=self.model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )


class OpenAIProvider(LLMProvider):
    vendor = "openai"
    default_model = "gpt-4o-mini"
    api_key_env = "OPENAI_API_KEY"

    def _connect(self):
        try:
            import openai
        except ImportError:
            raise ImportError("openai package required. Install with: pip install lettersmith[llm]")
        return openai.OpenAI(api_key=self._api_key()), openai.RateLimitError

    def _complete(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        response = self.client.chat.completions.create(
            model=self.model,
            max_tokens=self.settings.max_tokens,
            temperature=self.settings.temperature,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        )
        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=response.model or self.model,
            input_tokens=response.usage.prompt_tokens,
            output_tokens=response.usage.completion_tokens,
        )


PROVIDERS: dict[str, Callable[[GenerationSettings], LLMProvider]] = {
    "anthropic": AnthropicProvider,
    "openai": OpenAIProvider,
}


def get_provider(
    provider_name: Optional[str] = None,
    settings: Optional[GenerationSettings] = None,
) -> LLMProvider:
    """
    Construct a registered provider.

    Args:
        provider_name: Key in PROVIDERS, case-insensitive (default: LLM_PROVIDER env var, else "openai")
        settings: Model and sampling settings (default: provider defaults)

    Raises:
        ValueError: Unknown provider name or missing API key
        ImportError: Provider SDK not installed
    """
    name = (provider_name or os.getenv("LLM_PROVIDER", "openai")).lower()
    if name not in PROVIDERS:
        raise ValueError(f"Unknown provider: {name}. Available: {', '.join(sorted(PROVIDERS))}")
    return PROVIDERS[name](settings or GenerationSettings())
