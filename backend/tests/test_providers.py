import json

import httpx
import pytest
from pydantic import ValidationError

from diet_coach.agents.prompts import COACH_SYSTEM, FALLBACK_RECIPES, fallback_coach_message
from diet_coach.agents.providers import (
    GroqProvider,
    LocalFallbackProvider,
    OllamaProvider,
    ProviderError,
    parse_coach_content,
)
from diet_coach.schemas.coach import MAX_RECIPES, CoachContext, CoachResult
from stubs import coach_content, groq_envelope, ollama_envelope, stub_client, unreachable


CONTEXT = CoachContext(meal="saumon et riz", goal="perdre", kcal=486, verdict="Très bien")


def make_groq(handler, calls=None) -> GroqProvider:
    return GroqProvider(
        api_key="test-key",
        model="llama-3.1-8b-instant",
        base_url="https://api.groq.com/openai/v1",
        http_client=stub_client(handler, calls),
    )


def make_ollama(handler, calls=None) -> OllamaProvider:
    return OllamaProvider(
        url="http://ollama.test/api/chat",
        model="llama3.1:8b",
        http_client=stub_client(handler, calls),
    )


# =============================================================================
# Content parsing
# =============================================================================

def test_parse_valid_content() -> None:
    payload = parse_coach_content("groq", coach_content("Top !", ["a", "b"]))
    assert payload.coachMessage == "Top !"
    assert payload.recipes == ["a", "b"]


def test_parse_rejects_fenced_json() -> None:
    fenced = "```json\n" + coach_content() + "\n```"
    with pytest.raises(ProviderError):
        parse_coach_content("ollama", fenced)


def test_parse_trims_surrounding_whitespace() -> None:
    assert parse_coach_content("ollama", "\n  " + coach_content() + "  \n").recipes


@pytest.mark.parametrize(
    "content",
    [
        None,
        "",
        "   ",
        "pas du JSON",
        "[1, 2, 3]",
        json.dumps({"coachMessage": "ok"}),
        json.dumps({"recipes": ["a"]}),
        json.dumps({"coachMessage": "", "recipes": ["a"]}),
        json.dumps({"coachMessage": "ok", "recipes": "a, b"}),
        json.dumps({"coachMessage": 12, "recipes": ["a"]}),
    ],
)
def test_parse_rejects_unusable_content(content) -> None:
    with pytest.raises(ProviderError):
        parse_coach_content("groq", content)


# =============================================================================
# Groq
# =============================================================================

@pytest.mark.asyncio
async def test_groq_success_sends_openai_envelope() -> None:
    calls: list[httpx.Request] = []
    provider = make_groq(
        lambda request: httpx.Response(200, json=groq_envelope(coach_content())),
        calls,
    )

    result = await provider.attempt(CONTEXT)

    assert result.llm_used is True
    assert result.llm_provider == "groq"
    assert result.coach_message == "Bravo, continue !"

    assert len(calls) == 1
    request = calls[0]
    assert request.url.path == "/openai/v1/chat/completions"
    assert request.headers["authorization"] == "Bearer test-key"
    body = json.loads(request.content)
    assert body["model"] == "llama-3.1-8b-instant"
    assert body["temperature"] == 0.4
    assert body["messages"][0] == {"role": "system", "content": COACH_SYSTEM}
    assert body["messages"][1]["content"] == (
        "Repas: saumon et riz\nObjectif: perdre\nEstimation kcal: 486\nVerdict: Très bien"
    )
    await provider.aclose()


@pytest.mark.asyncio
async def test_groq_truncates_recipes_to_three() -> None:
    recipes = ["r1", "r2", "r3", "r4", "r5"]
    provider = make_groq(
        lambda request: httpx.Response(200, json=groq_envelope(coach_content(recipes=recipes))),
    )

    result = await provider.attempt(CONTEXT)

    assert result.recipes == ["r1", "r2", "r3"]
    assert len(result.recipes) == MAX_RECIPES


def test_coach_result_caps_recipes() -> None:
    with pytest.raises(ValidationError):
        CoachResult(
            coach_message="ok",
            recipes=["a"] * (MAX_RECIPES + 1),
            llm_used=True,
            llm_provider="groq",
        )


@pytest.mark.asyncio
async def test_groq_error_status_is_not_retried() -> None:
    calls: list[httpx.Request] = []
    provider = make_groq(lambda request: httpx.Response(500, json={"error": "boom"}), calls)

    with pytest.raises(ProviderError):
        await provider.attempt(CONTEXT)
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_groq_empty_content_fails() -> None:
    provider = make_groq(lambda request: httpx.Response(200, json=groq_envelope(None)))

    with pytest.raises(ProviderError):
        await provider.attempt(CONTEXT)


def test_groq_without_key_is_unavailable() -> None:
    provider = GroqProvider(api_key="", model="m", base_url="https://api.groq.com/openai/v1")
    assert provider.available is False


# =============================================================================
# Ollama
# =============================================================================

@pytest.mark.asyncio
async def test_ollama_success_sends_chat_envelope() -> None:
    calls: list[httpx.Request] = []
    provider = make_ollama(
        lambda request: httpx.Response(200, json=ollama_envelope(coach_content())),
        calls,
    )

    result = await provider.attempt(CONTEXT)

    assert result.llm_provider == "ollama"
    assert result.llm_used is True
    body = json.loads(calls[0].content)
    assert body["model"] == "llama3.1:8b"
    assert body["stream"] is False
    assert "authorization" not in calls[0].headers
    await provider.aclose()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "handler",
    [
        unreachable,
        lambda request: httpx.Response(
            200, json=ollama_envelope("```json\n" + coach_content() + "\n```")
        ),
        lambda request: httpx.Response(503, text="busy"),
        lambda request: httpx.Response(200, text="not json"),
        lambda request: httpx.Response(200, json={"done": True}),
        lambda request: httpx.Response(200, json=ollama_envelope("  ")),
        lambda request: httpx.Response(200, json=ollama_envelope("{\"coachMessage\": \"ok\"}")),
    ],
)
async def test_ollama_failures_raise_provider_error(handler) -> None:
    provider = make_ollama(handler)

    with pytest.raises(ProviderError):
        await provider.attempt(CONTEXT)


# =============================================================================
# Local fallback
# =============================================================================

@pytest.mark.asyncio
async def test_local_fallback_is_deterministic() -> None:
    result = await LocalFallbackProvider().attempt(CONTEXT)

    assert result.llm_used is False
    assert result.llm_provider == "local"
    assert result.recipes == list(FALLBACK_RECIPES)
    assert len(result.recipes) == 3
    assert result.coach_message == fallback_coach_message(486, "perdre")


def test_fallback_messages_by_goal_and_kcal() -> None:
    light = fallback_coach_message(550, "perdre")
    medium = fallback_coach_message(800, "perdre")
    heavy = fallback_coach_message(801, "perdre")
    assert len({light, medium, heavy}) == 3
    assert light.startswith("Super repas")
    assert heavy.startswith("Repas un peu riche")

    assert fallback_coach_message(300, "maintenir") == fallback_coach_message(1500, "maintenir")
    assert fallback_coach_message(300, "prendre").startswith("Bonne base pour prise de masse")
