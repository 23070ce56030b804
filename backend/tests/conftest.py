"""Shared fixtures: app client and a clean provider config."""

from __future__ import annotations

from typing import AsyncIterator, Generator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from diet_coach.config import settings
from diet_coach.main import app


@pytest.fixture(autouse=True)
def _clean_provider_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """No Groq key and a fresh chain for every test, whatever the local .env says."""
    monkeypatch.setattr(settings, "GROQ_API_KEY", "")
    app.state.coach_chain = None
    yield
    app.dependency_overrides.clear()
    app.state.coach_chain = None


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
