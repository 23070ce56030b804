"""
API Request/Response Schemas - wire format of /api/coach/analyze and /api/health
"""
from typing import Any
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from .coach import Goal, Verdict, ProviderName


MEAL_MIN_LENGTH = 6
MEAL_TOO_SHORT_MESSAGE = "Décris un peu plus ton repas."
GOAL_INVALID_MESSAGE = "Objectif invalide."
GOALS: tuple[str, ...] = ("perdre", "maintenir", "prendre")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Analyze
# ============================================================================

class AnalyzeRequest(BaseModel):
    meal: str
    goal: Goal = "perdre"

    @field_validator("meal")
    @classmethod
    def meal_long_enough(cls, value: str) -> str:
        # length in UTF-16 code units, as counted by the browser form
        if len(value.encode("utf-16-le", "surrogatepass")) // 2 < MEAL_MIN_LENGTH:
            raise PydanticCustomError("meal_too_short", MEAL_TOO_SHORT_MESSAGE)
        return value

    @field_validator("goal", mode="before")
    @classmethod
    def goal_known(cls, value: Any) -> Any:
        if value not in GOALS:
            raise PydanticCustomError("goal_invalid", GOAL_INVALID_MESSAGE)
        return value


class AnalyzeResponse(CamelModel):
    kcal_estimate: int
    verdict: Verdict
    coach_message: str
    recipes: list[str]
    llm_used: bool
    llm_provider: ProviderName
    disclaimer: str


class ErrorResponse(BaseModel):
    error: str


# ============================================================================
# Health
# ============================================================================

class ProvidersInfo(CamelModel):
    groq_configured: bool
    groq_model: str
    ollama_model: str


class HealthResponse(CamelModel):
    ok: bool = True
    providers: ProvidersInfo
