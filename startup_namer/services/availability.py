"""
HTTP client for the domain availability gateway.
"""

from typing import Protocol

import httpx
from startup_namer.core.exceptions import UpstreamError
from startup_namer.core.logging import get_logger

logger = get_logger(__name__)


class AvailabilityChecker(Protocol):
    async def is_available(self, domain: str) -> bool: ...


class GatewayClient:
    """Calls ``GET /api/check-domain`` on a gateway server."""

    def __init__(self, base_url: str, timeout: float = 15.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def is_available(self, domain: str) -> bool:
        """
        Ask the gateway whether a domain is available.

        Raises:
            UpstreamError: If the gateway cannot be reached, answers with an
                error status or returns an unexpected body
        """
        url = f"{self._base_url}/api/check-domain"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params={"domain": domain})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("Gateway error %s: %s", exc.response.status_code, exc.response.text)
            raise UpstreamError(f"Gateway error: {exc.response.status_code}") from exc
        except httpx.RequestError as exc:
            logger.error("Gateway request failed: %s", exc)
            raise UpstreamError("Gateway request failed") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError("Gateway returned invalid JSON") from exc

        if not isinstance(data, dict) or not isinstance(data.get("available"), bool):
            raise UpstreamError("Gateway returned unexpected payload")

        return data["available"]
