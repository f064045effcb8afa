# Web layer - aiohttp application, routes and form page
from .server import create_app, start_web_server

__all__ = ["create_app", "start_web_server"]
