"""
Gemini API client.
"""

import httpx
from startup_namer.core.logging import get_logger
from startup_namer.core.exceptions import GeminiAPIError

logger = get_logger(__name__)


class GeminiClient:
    """Client for the Google Gemini generateContent endpoint."""

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"

    def __init__(self, api_key: str, model: str, timeout: float = 30.0):
        self._api_key = api_key
        self._model = model
        self._timeout = timeout

    async def generate(self, prompt: str, max_tokens: int = 512, temperature: float = 0.9) -> str:
        """
        Call Gemini API once, without retries.

        Args:
            prompt: The prompt to send to the model
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature

        Returns:
            Generated text response

        Raises:
            GeminiAPIError: If the key is missing, the request fails or the
                response carries no candidate text
        """
        if not self._api_key:
            raise GeminiAPIError("GEMINI_API_KEY not configured")

        url = f"{self.BASE_URL}/{self._model}:generateContent"

        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "maxOutputTokens": max_tokens,
                "temperature": temperature,
            },
        }

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                response = await client.post(
                    url,
                    params={"key": self._api_key},
                    headers={"Content-Type": "application/json"},
                    json=payload,
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error(
                    f"Gemini API key {self._api_key[:5]}... failed with {e.response.status_code}"
                )
                raise GeminiAPIError(f"API returned {e.response.status_code}") from e
            except httpx.HTTPError as e:
                logger.error(f"HTTP Error with key {self._api_key[:5]}...: {e}")
                raise GeminiAPIError(f"Gemini request failed: {e}") from e

        try:
            result = response.json()
        except ValueError as e:
            raise GeminiAPIError("Gemini returned invalid JSON") from e

        try:
            return result["candidates"][0]["content"]["parts"][0]["text"].strip()
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise GeminiAPIError("No candidates returned from Gemini") from e
