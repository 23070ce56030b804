from .coach import (
    Goal, Verdict, ProviderName,
    NutritionEntry, EstimateResult, CoachContext, CoachPayload, CoachResult,
)
from .api import (
    AnalyzeRequest, AnalyzeResponse, ErrorResponse, HealthResponse, ProvidersInfo,
)

__all__ = [
    "Goal", "Verdict", "ProviderName",
    "NutritionEntry", "EstimateResult", "CoachContext", "CoachPayload", "CoachResult",
    "AnalyzeRequest", "AnalyzeResponse", "ErrorResponse", "HealthResponse", "ProvidersInfo",
]
