from .coach import router as coach_router
from .health import router as health_router

__all__ = ["coach_router", "health_router"]
