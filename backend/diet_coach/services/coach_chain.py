"""
Coach Chain - ordered provider fallback ending on the local answer
"""
import logging
from typing import Optional

import httpx

from ..config import Settings
from ..schemas.coach import CoachContext, CoachResult
from ..agents.providers import (
    CoachProvider, GroqProvider, OllamaProvider, LocalFallbackProvider,
)


logger = logging.getLogger(__name__)


class CoachChain:
    """
    Tries each available provider once, in priority order.

    A provider failure of any kind moves on to the next one; the terminal
    local provider always answers, so `coach` never raises.
    """

    def __init__(
        self,
        providers: list[CoachProvider],
        fallback: Optional[CoachProvider] = None,
    ):
        self.providers = list(providers)
        self.fallback = fallback or LocalFallbackProvider()

    async def coach(self, context: CoachContext) -> CoachResult:
        for provider in self.providers:
            if not provider.available:
                continue

            try:
                result = await provider.attempt(context)
            except Exception as e:
                logger.warning("Coach provider %s failed, falling back: %s", provider.name, e)
                continue

            logger.info("Coach answer served by %s", provider.name)
            return result

        return await self.fallback.attempt(context)

    async def aclose(self) -> None:
        for provider in self.providers:
            await provider.aclose()


def build_coach_chain(
    settings: Settings,
    groq_http_client: Optional[httpx.AsyncClient] = None,
    ollama_http_client: Optional[httpx.AsyncClient] = None,
) -> CoachChain:
    """Groq (when a key is configured), then Ollama, then the local fallback"""
    return CoachChain([
        GroqProvider(
            api_key=settings.GROQ_API_KEY,
            model=settings.GROQ_MODEL,
            base_url=settings.groq_base_url,
            temperature=settings.GROQ_TEMPERATURE,
            http_client=groq_http_client,
        ),
        OllamaProvider(
            url=settings.OLLAMA_URL,
            model=settings.OLLAMA_MODEL,
            timeout=settings.OLLAMA_TIMEOUT_SECONDS,
            http_client=ollama_http_client,
        ),
    ])
