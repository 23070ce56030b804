"""
Coach I/O Schemas - internal models passed between estimator, chain and providers
"""
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, StrictStr


Goal = Literal["perdre", "maintenir", "prendre"]
Verdict = Literal["Très bien", "Correct", "À équilibrer"]
ProviderName = Literal["groq", "ollama", "local"]

MAX_RECIPES = 3


# ============================================================================
# 1) Nutrition table entry
# ============================================================================

class NutritionEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword: str
    kcal_per_100g: float
    protein: float
    carbs: float
    fat: float
    default_portion_grams: float = 100


# ============================================================================
# 2) EstimateResult
# ============================================================================

class EstimateResult(BaseModel):
    kcal: int
    verdict: Verdict
    matched_keyword_count: int
    matched_keywords: list[str] = Field(default_factory=list)


# ============================================================================
# 3) CoachContext / CoachResult
# ============================================================================

class CoachContext(BaseModel):
    meal: str
    goal: Goal
    kcal: int
    verdict: Verdict


class CoachPayload(BaseModel):
    """JSON object a remote provider must return inside its message content"""
    coachMessage: StrictStr = Field(min_length=1)
    recipes: list[StrictStr]


class CoachResult(BaseModel):
    coach_message: str
    recipes: list[str] = Field(default_factory=list, max_length=MAX_RECIPES)
    llm_used: bool
    llm_provider: ProviderName
