"""
Diet Coach - FastAPI Backend
Main application entry point
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from .config import settings
from .routers import coach_router, health_router

logger = logging.getLogger(__name__)

INDEX_HTML = Path(__file__).parent / "static" / "index.html"
INVALID_REQUEST_MESSAGE = "Requête invalide."


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    chain = getattr(app.state, "coach_chain", None)
    if chain is not None:
        await chain.aclose()
        app.state.coach_chain = None


# Create app
app = FastAPI(
    title="Diet Coach API",
    description="Meal calorie estimate and motivational coaching",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(coach_router)
app.include_router(health_router)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Client errors carry only the first validation message"""
    errors = exc.errors()
    message = errors[0].get("msg") if errors else None
    return JSONResponse(
        status_code=400,
        content={"error": message or INVALID_REQUEST_MESSAGE},
    )


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index():
    """Single-page meal form"""
    return HTMLResponse(content=INDEX_HTML.read_text(encoding="utf-8"))


def run():
    import uvicorn

    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    logger.info("Diet API running on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(
        "diet_coach.main:app",
        host=settings.HOST,
        port=settings.PORT,
    )


# Run with: uvicorn diet_coach.main:app --port 8787
if __name__ == "__main__":
    run()
