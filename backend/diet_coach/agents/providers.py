"""
Coach Providers - Groq, Ollama and the local fallback behind a common interface
"""
import json
from typing import Any, Optional

import httpx
from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from ..schemas.coach import (
    MAX_RECIPES, CoachContext, CoachPayload, CoachResult, ProviderName,
)
from .prompts import FALLBACK_RECIPES, build_coach_messages, fallback_coach_message


class ProviderError(Exception):
    """A provider could not produce a usable coaching answer"""

    def __init__(self, provider: str, reason: str):
        super().__init__(f"{provider}: {reason}")
        self.provider = provider
        self.reason = reason


def parse_coach_content(provider: str, content: Optional[str]) -> CoachPayload:
    """
    Parse the message content of a provider into a CoachPayload.

    Raises ProviderError when the content is blank, not JSON, not an object,
    or misses one of the two required keys.
    """
    if not isinstance(content, str) or not content.strip():
        raise ProviderError(provider, "empty model response")

    try:
        data = json.loads(content.strip())
    except json.JSONDecodeError as e:
        raise ProviderError(provider, f"content is not JSON ({e.msg})") from e

    if not isinstance(data, dict):
        raise ProviderError(provider, "unexpected JSON format")

    try:
        return CoachPayload.model_validate(data)
    except ValidationError as e:
        raise ProviderError(provider, "unexpected JSON format") from e


class CoachProvider:
    """
    Base provider. `attempt` returns a CoachResult or raises.
    """

    name: ProviderName

    @property
    def available(self) -> bool:
        return True

    async def attempt(self, context: CoachContext) -> CoachResult:
        raise NotImplementedError

    async def aclose(self) -> None:
        pass

    def _result(self, payload: CoachPayload) -> CoachResult:
        return CoachResult(
            coach_message=payload.coachMessage,
            recipes=payload.recipes[:MAX_RECIPES],
            llm_used=True,
            llm_provider=self.name,
        )


class GroqProvider(CoachProvider):
    """
    Groq chat completions through the OpenAI SDK (bearer auth, OpenAI envelope).
    Only available when an API key is configured.
    """

    name: ProviderName = "groq"

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        temperature: float = 0.4,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.model = model
        self.temperature = temperature
        self.client: Optional[AsyncOpenAI] = None
        if api_key:
            self.client = AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                max_retries=0,
                http_client=http_client,
            )

    @property
    def available(self) -> bool:
        return self.client is not None

    async def attempt(self, context: CoachContext) -> CoachResult:
        if self.client is None:
            raise ProviderError(self.name, "GROQ_API_KEY missing")

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                messages=build_coach_messages(context),
            )
        except OpenAIError as e:
            raise ProviderError(self.name, f"request failed: {e}") from e

        content = None
        if response.choices:
            message = response.choices[0].message
            content = getattr(message, "content", None)

        return self._result(parse_coach_content(self.name, content))

    async def aclose(self) -> None:
        if self.client is not None:
            await self.client.close()


class OllamaProvider(CoachProvider):
    """
    Local Ollama /api/chat (no auth, non-streaming envelope).
    """

    name: ProviderName = "ollama"

    def __init__(
        self,
        url: str,
        model: str,
        timeout: float = 60.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self.model = model
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout)

    async def attempt(self, context: CoachContext) -> CoachResult:
        body = {
            "model": self.model,
            "stream": False,
            "messages": build_coach_messages(context),
        }

        try:
            response = await self.http_client.post(self.url, json=body)
        except httpx.HTTPError as e:
            raise ProviderError(self.name, f"request failed: {e}") from e

        if not response.is_success:
            raise ProviderError(self.name, f"Ollama error {response.status_code}")

        try:
            data: Any = response.json()
        except ValueError as e:
            raise ProviderError(self.name, "response body is not JSON") from e

        message = data.get("message") if isinstance(data, dict) else None
        content = message.get("content") if isinstance(message, dict) else None

        return self._result(parse_coach_content(self.name, content))

    async def aclose(self) -> None:
        await self.http_client.aclose()


class LocalFallbackProvider(CoachProvider):
    """
    Deterministic, networkless answer. Never fails.
    """

    name: ProviderName = "local"

    async def attempt(self, context: CoachContext) -> CoachResult:
        return CoachResult(
            coach_message=fallback_coach_message(context.kcal, context.goal),
            recipes=list(FALLBACK_RECIPES),
            llm_used=False,
            llm_provider=self.name,
        )
