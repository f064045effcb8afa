"""
Data schemas for registrar credentials and availability results.
"""

from dataclasses import dataclass, field

from startup_namer.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class RegistrarCredentials:
    """GoDaddy API key/secret pair and endpoint."""

    api_key: str
    api_secret: str = field(repr=False)
    base_url: str = "https://api.ote-godaddy.com"

    @classmethod
    def from_settings(cls, settings) -> "RegistrarCredentials":
        """
        Build credentials from application settings.

        Raises:
            ConfigurationError: If the key or the secret is missing
        """
        if not settings.godaddy_api_key or not settings.godaddy_api_secret:
            raise ConfigurationError("GoDaddy API credentials are not configured")
        return cls(
            api_key=settings.godaddy_api_key,
            api_secret=settings.godaddy_api_secret,
            base_url=settings.godaddy_base_url,
        )

    @property
    def key_prefix(self) -> str:
        """First characters of the key, safe to log."""
        return f"{self.api_key[:5]}..."

    @property
    def authorization(self) -> str:
        return f"sso-key {self.api_key}:{self.api_secret}"


@dataclass(frozen=True)
class AvailabilityResult:
    """Normalized availability answer for a single domain."""

    available: bool
    error: str | None = None

    def to_dict(self) -> dict:
        """Convert to the gateway's JSON body."""
        data: dict = {"available": self.available}
        if self.error:
            data["error"] = self.error
        return data
