"""Shared pytest fixtures for Postercraft tests."""

from types import SimpleNamespace
from typing import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from postercraft.api.main import app, get_provider
from postercraft.core.config import PostercraftConfig

# Base64 of b"fake-png-bytes".
FAKE_IMAGE_B64 = "ZmFrZS1wbmctYnl0ZXM="


@pytest.fixture
def test_config(monkeypatch) -> PostercraftConfig:
    """Create a configuration isolated from the environment and .env file.

    Returns:
        PostercraftConfig instance for testing
    """
    for name in ("PROVIDER_API_KEY", "IMAGE_MODEL", "PROVIDER_BASE_URL", "SERVER_PORT"):
        monkeypatch.delenv(f"POSTERCRAFT_{name}", raising=False)
    return PostercraftConfig(_env_file=None, provider_api_key="test-key")


@pytest.fixture
def fake_provider() -> MagicMock:
    """Create an image provider double that returns one base64 image.

    Returns:
        MagicMock exposing ``model`` and ``generate`` like ImageProvider
    """
    provider = MagicMock()
    provider.model = "test/flux"
    provider.generate.return_value = SimpleNamespace(
        data=[SimpleNamespace(b64_json=FAKE_IMAGE_B64, url=None)]
    )
    return provider


@pytest.fixture
def poster_payload() -> dict:
    """A complete, valid poster request body as the browser form sends it.

    Returns:
        Dictionary with every accepted field set
    """
    return {
        "title": "Jazz Night",
        "description": "Live jazz every Friday",
        "theme": "elegant",
        "purpose": "event",
        "colorScheme": "dark",
        "typographyStyle": "classic",
        "imageStyle": "photo",
        "designComplexity": 80,
        "aiEnhancement": True,
        "orientation": "landscape",
        "size": "standard",
        "tags": "music,live",
    }


@pytest.fixture
def test_client(fake_provider: MagicMock) -> Generator[TestClient, None, None]:
    """FastAPI TestClient with the image provider replaced by ``fake_provider``.

    Yields:
        TestClient bound to the application

    Cleanup:
        Dependency overrides are cleared after the test
    """
    app.dependency_overrides[get_provider] = lambda: fake_provider
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
