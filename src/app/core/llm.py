"""LLM provider client built on the OpenAI SDK.

One request per call: the SDK's own retries are disabled and every call is
bounded by an overall deadline, so a hung provider surfaces as
ProviderTimeoutError instead of stalling the request.
"""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

import openai
from openai import AsyncOpenAI

from src.app.core.config import Settings, get_settings
from src.app.core.exceptions import GenerationError, ProviderTimeoutError
from src.app.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class LLMClient:
    """Thin async wrapper over the chat completions and responses APIs."""

    def __init__(self, settings: Settings, client: AsyncOpenAI | None = None):
        self.settings = settings
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.settings.openai_api_key:
                raise GenerationError("OPENAI_API_KEY is not configured")
            self._client = AsyncOpenAI(
                api_key=self.settings.openai_api_key,
                base_url=self.settings.openai_base_url,
                timeout=self.settings.llm_timeout_seconds,
                max_retries=0,
            )
        return self._client

    async def _bounded(self, call: Awaitable[T], model: str) -> T:
        timeout = self.settings.llm_timeout_seconds
        try:
            async with asyncio.timeout(timeout):
                return await call
        except (TimeoutError, openai.APITimeoutError) as e:
            logger.error("LLM provider timed out", model=model, timeout=timeout)
            raise ProviderTimeoutError() from e
        except openai.OpenAIError as e:
            raise GenerationError(f"LLM provider error: {type(e).__name__}") from e

    async def complete_chat(
        self,
        *,
        system: str,
        prompt: str,
        model: str,
        temperature: float,
    ) -> str:
        """Run a single system + user chat completion and return its text."""
        client = self._get_client()
        response = await self._bounded(
            client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
                temperature=temperature,
            ),
            model,
        )
        content = response.choices[0].message.content if response.choices else None
        return self._require_text(content, model)

    async def complete(self, *, prompt: str, model: str, temperature: float) -> str:
        """Run a single Responses API call and return its aggregated text."""
        client = self._get_client()
        response = await self._bounded(
            client.responses.create(model=model, input=prompt, temperature=temperature),
            model,
        )
        return self._require_text(response.output_text, model)

    @staticmethod
    def _require_text(text: str | None, model: str) -> str:
        if not text or not text.strip():
            logger.error("LLM provider returned empty output", model=model)
            raise GenerationError("LLM provider returned empty output")
        return text

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None


_llm_client: LLMClient | None = None


def get_llm_client() -> LLMClient:
    """Get the process-wide LLM client (the SDK client itself is created lazily)."""
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient(get_settings())
    return _llm_client


async def close_llm_client() -> None:
    """Close the LLM client's connection pool. Call during shutdown."""
    global _llm_client
    if _llm_client is not None:
        await _llm_client.aclose()
        _llm_client = None
