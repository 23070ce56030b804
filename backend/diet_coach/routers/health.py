"""
Health API Routes
"""
from fastapi import APIRouter

from ..config import settings
from ..schemas.api import HealthResponse, ProvidersInfo

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health():
    """Provider configuration, no outbound calls"""
    return HealthResponse(
        ok=True,
        providers=ProvidersInfo(
            groq_configured=settings.groq_configured,
            groq_model=settings.GROQ_MODEL,
            ollama_model=settings.OLLAMA_MODEL,
        ),
    )
