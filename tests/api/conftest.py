"""API test fixtures — FastAPI app with field validation registered + httpx client.

Invariants:
    - Every test gets a fresh app and validator
    - Settings are passed explicitly, never read from the environment

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises middleware and dependencies
      exactly as a server would
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from fieldguard.config import Settings

from tests.api.demo_app import build_app


@pytest.fixture
def settings() -> Settings:
    return Settings(explicit=False, autofields=True, exclude=[])


@pytest.fixture
def app(settings) -> FastAPI:
    return build_app(settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac
