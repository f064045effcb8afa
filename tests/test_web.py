"""
Tests for the aiohttp routes.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from aiohttp.test_utils import TestClient, TestServer


@pytest.fixture
def generator():
    """NameGenerator mock."""
    mock = MagicMock()
    mock.generate = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def registrar():
    """GoDaddyClient mock."""
    mock = MagicMock()
    mock.is_available = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def gateway(credentials, registrar):
    """DomainGateway backed by the registrar mock."""
    from startup_namer.services.gateway import DomainGateway
    return DomainGateway(credentials, client=registrar)


def _app(generator, gateway=None, **settings_overrides):
    from startup_namer.core.config import Settings
    from startup_namer.web.server import create_app

    return create_app(Settings(**settings_overrides), generator=generator, gateway=gateway)


class TestIndex:
    """Tests for the form page."""

    @pytest.mark.asyncio
    async def test_index_serves_form(self, generator, gateway):
        """Test the page contains the form fields and industries."""
        async with TestClient(TestServer(_app(generator, gateway))) as client:
            response = await client.get("/")
            body = await response.text()

        assert response.status == 200
        assert response.content_type == "text/html"
        for field in ("keywords", "targetAudience", "companyValues", "companyDescription"):
            assert f'name="{field}"' in body
        assert '<option value="food &amp; beverage">Food &amp; Beverage</option>' in body
        assert "Generate More Names" in body


class TestCheckDomainRoute:
    """Tests for GET /api/check-domain."""

    @pytest.mark.asyncio
    async def test_available(self, generator, gateway, registrar):
        """Test a successful availability check."""
        async with TestClient(TestServer(_app(generator, gateway))) as client:
            response = await client.get("/api/check-domain", params={"domain": "nimbus.com"})
            body = await response.json()

        assert response.status == 200
        assert body == {"available": True}
        registrar.is_available.assert_awaited_once_with("nimbus.com")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", "?domain=", "?domain=%20%20"])
    async def test_missing_domain_returns_400(self, generator, gateway, registrar, query):
        """Test a missing domain is rejected without an upstream call."""
        async with TestClient(TestServer(_app(generator, gateway))) as client:
            response = await client.get(f"/api/check-domain{query}")
            body = await response.json()

        assert response.status == 400
        assert body == {"error": "Domain parameter is required"}
        registrar.is_available.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_credentials_returns_500(self, generator):
        """Test that unconfigured credentials answer 500 without an upstream call."""
        with patch("startup_namer.services.registrar.client.GoDaddyClient.is_available") as mock_check, \
                patch("httpx.AsyncClient") as mock_httpx:
            app = _app(generator, godaddy_api_key=None, godaddy_api_secret=None)

            async with TestClient(TestServer(app)) as client:
                response = await client.get("/api/check-domain", params={"domain": "acme.com"})
                body = await response.json()

        assert response.status == 500
        assert "error" in body
        assert "gd_secret" not in str(body)
        mock_check.assert_not_called()
        mock_httpx.assert_not_called()

    @pytest.mark.asyncio
    async def test_upstream_failure_degrades_to_200(self, generator, gateway, registrar):
        """Test upstream errors become available=false with status 200."""
        from startup_namer.core.exceptions import UpstreamError

        registrar.is_available.side_effect = UpstreamError("GoDaddy API error: 503")

        async with TestClient(TestServer(_app(generator, gateway))) as client:
            response = await client.get("/api/check-domain", params={"domain": "acme.com"})
            body = await response.json()

        assert response.status == 200
        assert body["available"] is False
        assert body["error"] == "Failed to check domain availability"


class TestGenerateRoute:
    """Tests for POST /api/generate."""

    @pytest.mark.asyncio
    async def test_returns_suggestions(self, generator, gateway):
        """Test suggestions are serialized in order."""
        from startup_namer.models import NameSuggestion

        generator.generate.return_value = [
            NameSuggestion(name="Acme", domain="acme.com", available=False),
            NameSuggestion(name="Nimbus", domain="nimbus.com", available=True),
        ]

        async with TestClient(TestServer(_app(generator, gateway))) as client:
            response = await client.post(
                "/api/generate",
                json={"keywords": "cloud", "targetAudience": "developers"},
            )
            body = await response.json()

        assert response.status == 200
        assert body == {
            "suggestions": [
                {"name": "Acme", "domain": "acme.com", "available": False},
                {"name": "Nimbus", "domain": "nimbus.com", "available": True},
            ]
        }
        profile = generator.generate.call_args[0][0]
        assert profile.keywords == "cloud"
        assert profile.target_audience == "developers"

    @pytest.mark.asyncio
    async def test_validation_error_returns_400(self, generator, gateway):
        """Test blank keywords produce a readable 400."""
        from startup_namer.core.exceptions import ValidationError

        generator.generate.side_effect = ValidationError("at least one keyword required")

        async with TestClient(TestServer(_app(generator, gateway))) as client:
            response = await client.post("/api/generate", json={"keywords": " "})
            body = await response.json()

        assert response.status == 400
        assert body == {"error": "Please enter at least one keyword"}

    @pytest.mark.asyncio
    async def test_no_valid_names_returns_422(self, generator, gateway):
        """Test the soft failure is distinguishable from hard failures."""
        from startup_namer.core.exceptions import NoValidNamesError

        generator.generate.side_effect = NoValidNamesError("no valid names generated")

        async with TestClient(TestServer(_app(generator, gateway))) as client:
            response = await client.post("/api/generate", json={"keywords": "tea"})
            body = await response.json()

        assert response.status == 422
        assert body == {"error": "No valid names were generated. Please try again."}

    @pytest.mark.asyncio
    async def test_generation_error_returns_502(self, generator, gateway):
        """Test hard generation failures."""
        from startup_namer.core.exceptions import GenerationError

        generator.generate.side_effect = GenerationError("generated content malformed")

        async with TestClient(TestServer(_app(generator, gateway))) as client:
            response = await client.post("/api/generate", json={"keywords": "tea"})
            body = await response.json()

        assert response.status == 502
        assert body == {"error": "Failed to generate names or check domains. Please try again."}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("data", ["not json", "[1, 2]"])
    async def test_bad_body_returns_400(self, generator, gateway, data):
        """Test non-object bodies are rejected before generation."""
        async with TestClient(TestServer(_app(generator, gateway))) as client:
            response = await client.post(
                "/api/generate", data=data, headers={"Content-Type": "application/json"}
            )

        assert response.status == 400
        generator.generate.assert_not_called()


class TestCreateApp:
    """Tests for application wiring."""

    def test_gateway_disabled_without_credentials(self):
        """Test the gateway is not built when credentials are missing."""
        from startup_namer.core.config import Settings
        from startup_namer.web.server import build_gateway

        assert build_gateway(Settings(godaddy_api_key=None, godaddy_api_secret=None)) is None

    def test_gateway_built_with_credentials(self):
        """Test the gateway is built from configured credentials."""
        from startup_namer.core.config import Settings
        from startup_namer.services.gateway import DomainGateway
        from startup_namer.web.server import build_gateway

        assert isinstance(build_gateway(Settings()), DomainGateway)

    def test_gateway_key_holds_gateway_or_none(self, generator, gateway):
        """Test the app stores the injected gateway, or None without credentials."""
        from startup_namer.web.routes import GATEWAY_KEY

        assert _app(generator, gateway)[GATEWAY_KEY] is gateway
        assert _app(generator, godaddy_api_key=None, godaddy_api_secret=None)[GATEWAY_KEY] is None

    def test_generator_uses_gateway_url(self):
        """Test the generator talks to the configured gateway."""
        from startup_namer.core.config import Settings
        from startup_namer.web.server import build_generator

        generator = build_generator(Settings(gateway_url="http://gateway.test", name_count=3))

        assert generator._checker._base_url == "http://gateway.test"
        assert generator._name_count == 3
