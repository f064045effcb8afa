"""
Web application factory and server setup.
"""

from aiohttp import web

from startup_namer.core.config import Settings, settings as default_settings
from startup_namer.core.exceptions import ConfigurationError
from startup_namer.core.logging import get_logger
from startup_namer.services.ai import GeminiClient
from startup_namer.services.availability import GatewayClient
from startup_namer.services.gateway import DomainGateway
from startup_namer.services.generator import NameGenerator
from startup_namer.services.registrar import RegistrarCredentials
from startup_namer.web.routes import GATEWAY_KEY, GENERATOR_KEY, setup_routes

logger = get_logger(__name__)


def build_gateway(app_settings: Settings) -> DomainGateway | None:
    """Validate registrar credentials once; None means the gateway answers 500."""
    try:
        credentials = RegistrarCredentials.from_settings(app_settings)
        return DomainGateway(credentials)
    except ConfigurationError as e:
        logger.error(f"Domain gateway disabled: {e}")
        return None


def build_generator(app_settings: Settings) -> NameGenerator:
    """Wire the name generator to Gemini and the gateway endpoint."""
    client = GeminiClient(app_settings.gemini_api_key, app_settings.gemini_model)
    checker = GatewayClient(app_settings.resolved_gateway_url)
    return NameGenerator(client, checker, name_count=app_settings.name_count)


def create_app(
    app_settings: Settings | None = None,
    *,
    generator: NameGenerator | None = None,
    gateway: DomainGateway | None = None,
) -> web.Application:
    """
    Create the aiohttp application.

    Args:
        app_settings: Settings to build collaborators from
        generator: Prebuilt name generator, built from settings when omitted
        gateway: Prebuilt gateway, built from settings when omitted
    """
    app_settings = app_settings or default_settings

    app = web.Application()
    app[GENERATOR_KEY] = generator or build_generator(app_settings)
    app[GATEWAY_KEY] = gateway if gateway is not None else build_gateway(app_settings)
    setup_routes(app)

    return app


async def start_web_server(app: web.Application, host: str = "0.0.0.0", port: int = 8080) -> web.AppRunner:
    """
    Start the web server.

    Args:
        app: Application to serve
        host: Host to bind to
        port: Port to bind to

    Returns:
        The runner, to be cleaned up on shutdown
    """
    runner = web.AppRunner(app)
    await runner.setup()

    site = web.TCPSite(runner, host, port)
    await site.start()

    logger.info(f"Web server started on {host}:{port}")
    return runner
