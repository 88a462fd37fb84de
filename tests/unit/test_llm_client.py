"""Tests for the OpenAI-backed LLM client (src/app/core/llm.py)."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from src.app.core.config import Settings
from src.app.core.exceptions import GenerationError, ProviderTimeoutError
from src.app.core.llm import LLMClient

pytestmark = pytest.mark.unit


def make_settings(**overrides) -> Settings:
    values = {
        "database_url": "sqlite+aiosqlite:///:memory:",
        "openai_api_key": "sk-test",
        "llm_timeout_seconds": 5.0,
    }
    values.update(overrides)
    return Settings(**values)


def chat_response(content: str | None) -> SimpleNamespace:
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def sdk() -> MagicMock:
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=chat_response("Report text"))
    client.responses.create = AsyncMock(return_value=SimpleNamespace(output_text="Draft text"))
    client.close = AsyncMock()
    return client


async def test_complete_chat_sends_system_and_user_messages(sdk):
    llm = LLMClient(make_settings(), client=sdk)

    text = await llm.complete_chat(system="sys", prompt="user", model="gpt-4o", temperature=0.5)

    assert text == "Report text"
    sdk.chat.completions.create.assert_awaited_once_with(
        model="gpt-4o",
        messages=[
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "user"},
        ],
        temperature=0.5,
    )


async def test_complete_uses_responses_output_text(sdk):
    llm = LLMClient(make_settings(), client=sdk)

    text = await llm.complete(prompt="draft it", model="gpt-4.1", temperature=0.5)

    assert text == "Draft text"
    sdk.responses.create.assert_awaited_once_with(
        model="gpt-4.1", input="draft it", temperature=0.5
    )


@pytest.mark.parametrize("content", [None, "", "   \n"])
async def test_empty_chat_output_is_generation_error(sdk, content):
    sdk.chat.completions.create.return_value = chat_response(content)
    llm = LLMClient(make_settings(), client=sdk)

    with pytest.raises(GenerationError):
        await llm.complete_chat(system="s", prompt="p", model="gpt-4o", temperature=0.5)


async def test_no_choices_is_generation_error(sdk):
    sdk.chat.completions.create.return_value = SimpleNamespace(choices=[])
    llm = LLMClient(make_settings(), client=sdk)

    with pytest.raises(GenerationError):
        await llm.complete_chat(system="s", prompt="p", model="gpt-4o", temperature=0.5)


async def test_empty_responses_output_is_generation_error(sdk):
    sdk.responses.create.return_value = SimpleNamespace(output_text="")
    llm = LLMClient(make_settings(), client=sdk)

    with pytest.raises(GenerationError):
        await llm.complete(prompt="p", model="gpt-4.1", temperature=0.5)


async def test_deadline_exceeded_is_provider_timeout(sdk):
    async def hang(**kwargs):
        await asyncio.sleep(10)

    sdk.responses.create = AsyncMock(side_effect=hang)
    llm = LLMClient(make_settings(llm_timeout_seconds=0.05), client=sdk)

    with pytest.raises(ProviderTimeoutError):
        await llm.complete(prompt="p", model="gpt-4.1", temperature=0.5)


async def test_sdk_timeout_is_provider_timeout(sdk):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    sdk.chat.completions.create.side_effect = openai.APITimeoutError(request=request)
    llm = LLMClient(make_settings(), client=sdk)

    with pytest.raises(ProviderTimeoutError):
        await llm.complete_chat(system="s", prompt="p", model="gpt-4o", temperature=0.5)


async def test_sdk_error_is_generation_error(sdk):
    request = httpx.Request("POST", "https://api.openai.com/v1/responses")
    sdk.responses.create.side_effect = openai.APIConnectionError(request=request)
    llm = LLMClient(make_settings(), client=sdk)

    with pytest.raises(GenerationError):
        await llm.complete(prompt="p", model="gpt-4.1", temperature=0.5)


async def test_missing_api_key_is_generation_error():
    llm = LLMClient(make_settings(openai_api_key=None))

    with pytest.raises(GenerationError):
        await llm.complete(prompt="p", model="gpt-4.1", temperature=0.5)


async def test_aclose_closes_sdk_client(sdk):
    llm = LLMClient(make_settings(), client=sdk)

    await llm.aclose()

    sdk.close.assert_awaited_once()
