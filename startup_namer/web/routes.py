"""
HTTP handlers for the form page, name generation and domain checks.
"""

from aiohttp import web

from startup_namer.core.exceptions import (
    GenerationError,
    NoValidNamesError,
    ValidationError,
)
from startup_namer.core.logging import get_logger
from startup_namer.models import BusinessProfile
from startup_namer.services.gateway import DomainGateway
from startup_namer.services.generator import NameGenerator
from startup_namer.web.page import render_index

logger = get_logger(__name__)

GENERATOR_KEY = web.AppKey("generator", NameGenerator)
# None when registrar credentials are missing
GATEWAY_KEY: web.AppKey[DomainGateway | None] = web.AppKey("gateway")

KEYWORDS_REQUIRED = "Please enter at least one keyword"
NO_VALID_NAMES = "No valid names were generated. Please try again."
GENERATION_FAILED = "Failed to generate names or check domains. Please try again."


async def handle_index(request: web.Request) -> web.Response:
    """Serve the form page."""
    return web.Response(text=render_index(), content_type="text/html")


async def handle_generate(request: web.Request) -> web.Response:
    """Generate name suggestions for the posted business profile."""
    try:
        payload = await request.json()
    except ValueError:
        return web.json_response({"error": "Request body must be JSON"}, status=400)

    if not isinstance(payload, dict):
        return web.json_response({"error": "Request body must be a JSON object"}, status=400)

    profile = BusinessProfile.from_dict(payload)
    generator = request.app[GENERATOR_KEY]

    try:
        suggestions = await generator.generate(profile)
    except ValidationError:
        return web.json_response({"error": KEYWORDS_REQUIRED}, status=400)
    except NoValidNamesError:
        return web.json_response({"error": NO_VALID_NAMES}, status=422)
    except GenerationError as e:
        logger.error(f"Error generating names or checking domains: {e}")
        return web.json_response({"error": GENERATION_FAILED}, status=502)
    except Exception:
        logger.exception("Unexpected error while generating names")
        return web.json_response({"error": GENERATION_FAILED}, status=500)

    return web.json_response({"suggestions": [s.to_dict() for s in suggestions]})


async def handle_check_domain(request: web.Request) -> web.Response:
    """Proxy a domain availability check to the registrar."""
    domain = request.query.get("domain", "").strip()
    if not domain:
        logger.error("Domain parameter is missing")
        return web.json_response({"error": "Domain parameter is required"}, status=400)

    gateway = request.app[GATEWAY_KEY]
    if gateway is None:
        logger.error("GoDaddy API credentials are missing")
        return web.json_response(
            {"error": "Registrar API credentials are not configured"}, status=500
        )

    try:
        result = await gateway.check_availability(domain)
    except ValidationError as e:
        return web.json_response({"error": str(e)}, status=400)

    return web.json_response(result.to_dict())


def setup_routes(app: web.Application) -> None:
    """Register all HTTP routes with the application."""
    app.router.add_get("/", handle_index)
    app.router.add_post("/api/generate", handle_generate)
    app.router.add_get("/api/check-domain", handle_check_domain)
