"""AI artifact client built on pydantic-ai.

One client covers both calls the pipeline makes to the provider: free-form
completions (note formatting, titles) and structured front/back card pairs.
Provider imports stay lazy so the rest of the package works without
credentials; tests inject a pydantic-ai test model instead.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional, Protocol, TypeVar

from pydantic_ai import Agent

from notecraft.core.config import AISettings, settings as app_settings
from notecraft.core.errors import AIServiceError
from notecraft.core.logging import get_logger
from notecraft.modules.ai.models import CardPair, CardPairSet
from notecraft.modules.ai.prompts import (
    FLASHCARD_SYSTEM_PROMPT,
    NOTE_SYSTEM_PROMPT,
    build_flashcard_prompt,
)

logger = get_logger(__name__)

OutputT = TypeVar("OutputT")


class ArtifactClient(Protocol):
    """The narrow AI surface the generators depend on."""

    async def complete(self, prompt: str) -> str: ...

    async def generate_card_pairs(
        self, content: str, title: str, count: int = 15
    ) -> list[CardPair]: ...


def _build_google_model(cfg: AISettings):
    """Build the Google Gemini model provider (lazy import)."""
    from pydantic_ai.models.google import GoogleModel
    from pydantic_ai.providers.google import GoogleProvider

    provider = GoogleProvider(api_key=cfg.gemini_api_key)
    return GoogleModel(cfg.google_model, provider=provider)


def _build_openrouter_model(cfg: AISettings):
    """Build the OpenRouter model via the OpenAI-compatible provider (lazy import)."""
    from pydantic_ai.models.openai import OpenAIChatModel
    from pydantic_ai.providers.openai import OpenAIProvider

    if not cfg.openrouter_api_key:
        raise RuntimeError(
            "OpenRouter API key not configured. Set OPENROUTER_API_KEY in your environment."
        )

    provider = OpenAIProvider(
        api_key=cfg.openrouter_api_key,
        base_url="https://openrouter.ai/api/v1",
    )
    return OpenAIChatModel(cfg.openrouter_model, provider=provider)


def _build_model_by_settings(cfg: AISettings):
    """Return a pydantic-ai Model based on configured provider selection."""
    if cfg.is_openrouter:
        return _build_openrouter_model(cfg)
    return _build_google_model(cfg)


class AIArtifactClient:
    def __init__(self, model: Any = None, *, settings: Optional[AISettings] = None) -> None:
        self.settings = settings or app_settings.ai
        self._model = model

    @property
    def model(self):
        if self._model is None:
            self._model = _build_model_by_settings(self.settings)
        return self._model

    async def _run(self, output_type: type[OutputT], system_prompt: str, prompt: str) -> OutputT:
        """Run one agent call with a bounded wait.

        Every failure surfaces as ``AIServiceError``; cancellation propagates
        untouched so no partial result is ever returned.
        """
        timeout = self.settings.timeout_seconds
        try:
            agent: Agent[None, OutputT] = Agent(
                self.model,
                output_type=output_type,
                system_prompt=system_prompt,
                retries=self.settings.output_retries,
            )
            res = await asyncio.wait_for(agent.run(prompt), timeout=timeout)
        except asyncio.TimeoutError as exc:
            logger.warning("AI request timed out after %.1fs", timeout)
            raise AIServiceError(f"AI request timed out after {timeout}s", cause=exc) from exc
        except Exception as exc:  # noqa: BLE001
            logger.warning("AI request failed: %s", exc)
            raise AIServiceError(f"API error: {exc}", cause=exc) from exc
        return res.output

    async def complete(self, prompt: str) -> str:
        if not (prompt or "").strip():
            raise AIServiceError("Empty prompt provided")
        logger.debug("Requesting completion for prompt length %d", len(prompt))
        text = await self._run(str, NOTE_SYSTEM_PROMPT, prompt)
        if not (text or "").strip():
            raise AIServiceError("Invalid response from server")
        return text

    async def generate_card_pairs(
        self, content: str, title: str, count: int = 15
    ) -> list[CardPair]:
        logger.debug("Requesting %d card pairs for note %r", count, title)
        result = await self._run(
            CardPairSet,
            FLASHCARD_SYSTEM_PROMPT,
            build_flashcard_prompt(content, title, count),
        )
        cards: list[CardPair] = []
        for c in result.cards or []:
            front = (c.front or "").strip()
            back = (c.back or "").strip()
            if front and back:
                cards.append(CardPair(front=front, back=back))
        return cards
