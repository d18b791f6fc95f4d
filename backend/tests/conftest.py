"""Pytest configuration and fixtures for FormWizard tests.

Provides an app with zero artificial latency, an httpx client bound to it,
and the client-side store / API client / controller wired to that app.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from formwizard.client.api import FormDataClient
from formwizard.client.controller import Notification, WizardController
from formwizard.config import Settings
from formwizard.main import create_app
from formwizard.store import FormStore


# ── App / HTTP ───────────────────────────────────────────────────

@pytest.fixture
def settings() -> Settings:
    """Settings with the artificial latency disabled."""
    return Settings(api_latency_ms=0, sync_interval_seconds=0.05)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create test client bound to the ASGI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ── Client side ──────────────────────────────────────────────────

@pytest.fixture
def api(client: AsyncClient) -> FormDataClient:
    return FormDataClient(http_client=client)


@pytest.fixture
def store() -> FormStore:
    return FormStore()


@pytest.fixture
def notifications() -> list[Notification]:
    return []


@pytest.fixture
def controller(store: FormStore, api: FormDataClient, notifications) -> WizardController:
    return WizardController(store, api, notifier=notifications.append)


# ── Test Data ────────────────────────────────────────────────────

@pytest.fixture
def personal_info() -> dict:
    return {"firstName": "Ann", "lastName": "Lee", "email": "a@b.com"}


@pytest.fixture
def address() -> dict:
    return {"street": "1 Main Street", "city": "Austin", "state": "TX", "zipCode": "73301"}


# ── Test Markers ─────────────────────────────────────────────────

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "api: API endpoint tests")
    config.addinivalue_line("markers", "integration: Integration tests")
