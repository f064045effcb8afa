# Registrar services - GoDaddy domain availability lookup
from .client import GoDaddyClient
from .schemas import AvailabilityResult, RegistrarCredentials

__all__ = ["GoDaddyClient", "AvailabilityResult", "RegistrarCredentials"]
