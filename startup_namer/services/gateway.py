"""
Domain availability gateway.

Keeps registrar credentials on the server and turns every upstream failure
into ``available=False``.
"""

from startup_namer.core.exceptions import ConfigurationError, UpstreamError, ValidationError
from startup_namer.core.logging import get_logger
from startup_namer.services.registrar import AvailabilityResult, GoDaddyClient, RegistrarCredentials

logger = get_logger(__name__)

CHECK_FAILED_MESSAGE = "Failed to check domain availability"


class DomainGateway:
    """Server-side proxy in front of the registrar lookup API."""

    def __init__(self, credentials: RegistrarCredentials, client: GoDaddyClient | None = None):
        if not credentials.api_key or not credentials.api_secret:
            raise ConfigurationError("GoDaddy API credentials are not configured")
        self._credentials = credentials
        self._client = client or GoDaddyClient(credentials)

    async def check_availability(self, domain: str | None) -> AvailabilityResult:
        """
        Check one domain with exactly one upstream request.

        Raises:
            ValidationError: If the domain is missing or blank
        """
        domain = (domain or "").strip()
        if not domain:
            logger.error("Domain parameter is missing")
            raise ValidationError("Domain parameter is required")

        try:
            available = await self._client.is_available(domain)
        except UpstreamError as e:
            logger.error(f"Availability check for {domain} degraded: {e}")
            return AvailabilityResult(available=False, error=CHECK_FAILED_MESSAGE)

        return AvailabilityResult(available=available)
