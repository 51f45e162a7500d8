"""Shared pytest fixtures for SK-27 tests."""

from __future__ import annotations

import asyncio
from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types

from sk27.core.config import LandingConfig
from sk27.ui.sections import build_reveal_targets
from sk27.ui.state import PageSession

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-bytes"


class FakeFetcher:
    """Stand-in for :class:`~sk27.core.image_fetch.ImageFetchAdapter`.

    Resolves every prompt to ``payload`` (``None`` simulates an outage) and
    records the prompts it was asked for.  When ``gate`` is set, each fetch
    waits on it first, which lets a test unmount a slot mid-flight.
    """

    def __init__(self, payload: str | None = "data:image/png;base64,AAAA", gate: asyncio.Event | None = None):
        self.payload = payload
        self.gate = gate
        self.prompts: list[str] = []

    async def fetch(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if self.gate is not None:
            await self.gate.wait()
        return self.payload


def make_image_response(data: bytes = PNG_BYTES, mime_type: str = "image/png") -> types.GenerateContentResponse:
    """Build a ``generate_content`` response carrying one inline image."""
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(
                    role="model",
                    parts=[
                        types.Part(text="Here is your image."),
                        types.Part(inline_data=types.Blob(data=data, mime_type=mime_type)),
                    ],
                )
            )
        ]
    )


def make_genai_client(response=None, side_effect=None) -> MagicMock:
    """Mock ``genai.Client`` whose ``aio.models.generate_content`` is awaitable."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=response, side_effect=side_effect)
    return client


@pytest.fixture
def test_config() -> LandingConfig:
    """Configuration with zero delays and no credential.

    Returns:
        LandingConfig that never touches the network or sleeps
    """
    return LandingConfig(
        _env_file=None,
        api_key=None,
        splash_duration_ms=0,
        reveal_settle_ms=0,
    )


@pytest.fixture
def keyed_config() -> LandingConfig:
    """Configuration with a dummy credential."""
    return LandingConfig(_env_file=None, api_key="test-key", splash_duration_ms=0, reveal_settle_ms=0)


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def failing_fetcher() -> FakeFetcher:
    return FakeFetcher(payload=None)


@pytest.fixture
def session(test_config: LandingConfig, fake_fetcher: FakeFetcher) -> PageSession:
    """A fresh page session with every reveal target registered."""
    return PageSession(test_config, fake_fetcher, targets=build_reveal_targets())


@pytest.fixture
def test_client(fake_fetcher: FakeFetcher) -> Generator:
    """FastAPI TestClient with the image adapter replaced by a fake.

    Yields:
        TestClient bound to ``sk27.api.main.app``
    """
    from fastapi.testclient import TestClient

    from sk27.api.main import app

    with TestClient(app) as client:
        app.state.image_fetcher = fake_fetcher
        yield client


@pytest.fixture
def fetcher_factory() -> type[FakeFetcher]:
    """The :class:`FakeFetcher` class, for tests that need custom payloads."""
    return FakeFetcher


@pytest.fixture
def image_response():
    return make_image_response


@pytest.fixture
def genai_client_factory():
    return make_genai_client
