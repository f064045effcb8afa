# Services module - external API integrations
from .availability import GatewayClient
from .gateway import DomainGateway
from .generator import NameGenerator

__all__ = ["GatewayClient", "DomainGateway", "NameGenerator"]
