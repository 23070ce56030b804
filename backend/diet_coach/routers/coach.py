"""
Coach API Routes - meal analysis
"""
from fastapi import APIRouter, Depends, Request

from ..config import settings
from ..schemas.api import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from ..schemas.coach import CoachContext
from ..services.estimator import estimate_meal_kcal
from ..services.coach_chain import CoachChain, build_coach_chain

router = APIRouter(prefix="/api/coach", tags=["coach"])


async def get_coach_chain(request: Request) -> CoachChain:
    """Process-wide chain, built on first use and closed at shutdown.

    Runs on the event loop: nothing is awaited between the check and the set,
    so concurrent first requests share one chain.
    """
    chain = getattr(request.app.state, "coach_chain", None)
    if chain is None:
        chain = build_coach_chain(settings)
        request.app.state.coach_chain = chain
    return chain


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}},
)
async def analyze_meal(
    request: AnalyzeRequest,
    chain: CoachChain = Depends(get_coach_chain),
):
    """
    Estimate the meal, then ask the coach chain for a message and recipes.
    """
    estimate = estimate_meal_kcal(request.meal)

    coach = await chain.coach(CoachContext(
        meal=request.meal,
        goal=request.goal,
        kcal=estimate.kcal,
        verdict=estimate.verdict,
    ))

    return AnalyzeResponse(
        kcal_estimate=estimate.kcal,
        verdict=estimate.verdict,
        coach_message=coach.coach_message,
        recipes=coach.recipes,
        llm_used=coach.llm_used,
        llm_provider=coach.llm_provider,
        disclaimer=settings.DISCLAIMER,
    )
