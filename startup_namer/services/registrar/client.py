"""
GoDaddy domains API client.
"""

import httpx
from startup_namer.core.logging import get_logger
from startup_namer.core.exceptions import UpstreamError
from .schemas import RegistrarCredentials

logger = get_logger(__name__)


class GoDaddyClient:
    """Client for the GoDaddy domain availability endpoint."""

    def __init__(self, credentials: RegistrarCredentials, timeout: float = 10.0):
        self._credentials = credentials
        self._timeout = timeout
        self._headers = {
            "Authorization": credentials.authorization,
            "Accept": "application/json",
        }

    async def is_available(self, domain: str) -> bool:
        """
        Look up a single domain.

        Args:
            domain: Fully qualified domain name

        Returns:
            The ``available`` flag reported by GoDaddy

        Raises:
            UpstreamError: On transport errors, non-2xx statuses or a body
                without a boolean ``available`` field
        """
        url = f"{self._credentials.base_url.rstrip('/')}/v1/domains/available"
        logger.info(f"Checking availability for domain: {domain}")
        logger.info(f"Using API Key: {self._credentials.key_prefix}")

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                response = await client.get(
                    url,
                    headers=self._headers,
                    params={"domain": domain},
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error(
                    "GoDaddy API error %s: %s", e.response.status_code, e.response.text
                )
                raise UpstreamError(f"GoDaddy API error: {e.response.status_code}") from e
            except httpx.HTTPError as e:
                logger.error("GoDaddy API request failed: %s", e)
                raise UpstreamError("GoDaddy API request failed") from e

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("GoDaddy API returned invalid JSON") from e

        logger.debug(f"GoDaddy API Response: {data}")

        available = data.get("available") if isinstance(data, dict) else None
        if not isinstance(available, bool):
            raise UpstreamError("GoDaddy API returned unexpected payload")

        return available
