"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def mock_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("GEMINI_API_KEY", "gemini_test_key")
    monkeypatch.setenv("GODADDY_API_KEY", "gd_key_12345")
    monkeypatch.setenv("GODADDY_API_SECRET", "gd_secret_67890")
    monkeypatch.delenv("GATEWAY_URL", raising=False)
    monkeypatch.delenv("WEB_HOST", raising=False)


# ============================================================================
# Mock Fixtures
# ============================================================================

@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx AsyncClient."""
    with patch("httpx.AsyncClient") as mock:
        client_instance = AsyncMock()
        mock.return_value.__aenter__.return_value = client_instance
        yield client_instance


@pytest.fixture
def make_response():
    """Factory for mock httpx responses."""
    def _make(status_code: int = 200, json_data=None) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = json_data
        return response
    return _make


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def gemini_client():
    """Create a GeminiClient with a test key."""
    from startup_namer.services.ai.client import GeminiClient
    return GeminiClient("gemini_test_key", "test-model")


@pytest.fixture
def credentials():
    """Registrar credentials for tests."""
    from startup_namer.services.registrar.schemas import RegistrarCredentials
    return RegistrarCredentials("gd_key_12345", "gd_secret_67890", "https://registrar.test")


@pytest.fixture
def godaddy_client(credentials):
    """Create a GoDaddyClient with test credentials."""
    from startup_namer.services.registrar.client import GoDaddyClient
    return GoDaddyClient(credentials)


@pytest.fixture
def checker():
    """Availability checker mock; every domain is taken by default."""
    mock = MagicMock()
    mock.is_available = AsyncMock(return_value=False)
    return mock


@pytest.fixture
def name_generator(gemini_client, checker):
    """Create a NameGenerator around the test client and checker."""
    from startup_namer.services.generator import NameGenerator
    return NameGenerator(gemini_client, checker)
