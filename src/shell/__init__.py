"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- Open-Meteo API client (HTTP)
- Email client (HTTP)
- Static map rendering (tile fetching)
- Configuration loading (environment/files/Secret Manager)

Keep this layer thin and simple. All business logic should be in core.
"""

from src.shell.open_meteo_client import OpenMeteoClient
from src.shell.email_client import EmailClient
from src.shell.static_map_client import StaticMapClient
from src.shell.config_loader import load_config, load_config_from_env

__all__ = [
    "OpenMeteoClient",
    "EmailClient",
    "StaticMapClient",
    "load_config",
    "load_config_from_env",
]
