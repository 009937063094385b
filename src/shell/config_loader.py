"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, EmailSettings, Subscriber) are defined in src/core/config.py
to keep the layers separate.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from src.core.centers import parse_center
from src.core.config import Config, EmailSettings, Subscriber
from src.core.formatter import EMERGENCY_CONTACTS
from src.core.geo import DEFAULT_LOCATION, Location
from src.core.weather import DEFAULT_LOOK_AHEAD_HOURS
from src.shell.secret_manager_client import (
    SecretManagerClient,
    SecretManagerConfig,
    parse_placeholder,
)


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"


def _get_secret_manager_client() -> Optional[SecretManagerClient]:
    """Create a Secret Manager client.

    Returns None if GCP_PROJECT is not set (e.g., local development).
    """
    project_id = os.environ.get("GCP_PROJECT")
    if project_id:
        return SecretManagerClient(SecretManagerConfig(project_id=project_id))
    return None


def _resolve_value(value: Any, secret_client: Optional[SecretManagerClient] = None) -> Any:
    """Resolve a value that may contain secret or env var placeholders.

    Args:
        value: Value to resolve (may contain ${...} placeholders)
        secret_client: Client for resolving secrets

    Returns:
        Resolved value
    """
    if not isinstance(value, str):
        return value

    if secret_client:
        return secret_client.resolve(value)

    # No secret client - only handle env vars
    key = parse_placeholder(value)
    if key is not None and not key.startswith("secret:"):
        env_value = os.environ.get(key)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", key)

    return value


def _parse_location(data: dict[str, Any] | None) -> Location:
    """Parse the default location from config data."""
    if not data:
        return DEFAULT_LOCATION
    return Location(
        latitude=float(data["latitude"]),
        longitude=float(data["longitude"]),
    )


def _parse_subscriber(data: dict[str, Any]) -> Subscriber:
    """Parse an alert subscriber from config data."""
    return Subscriber(
        email=data["email"],
        latitude=float(data["latitude"]),
        longitude=float(data["longitude"]),
        name=data.get("name"),
    )


def _parse_contacts(data: list[dict[str, Any]] | None) -> tuple[tuple[str, str], ...]:
    """Parse emergency contacts from config data."""
    if not data:
        return EMERGENCY_CONTACTS
    return tuple((str(c["label"]), str(c["phone"])) for c in data)


def _parse_email(
    data: dict[str, Any] | None,
    secret_client: Optional[SecretManagerClient] = None,
) -> EmailSettings:
    """Parse outgoing email settings from config data."""
    if not data:
        return EmailSettings()

    defaults = EmailSettings()
    return EmailSettings(
        api_key=_resolve_value(data.get("api_key", ""), secret_client),
        from_address=data.get("from_address", defaults.from_address),
    )


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only placeholder expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    secret_client = _get_secret_manager_client()

    return Config(
        default_location=_parse_location(data.get("default_location")),
        forecast_hours=int(data.get("forecast_hours", DEFAULT_LOOK_AHEAD_HOURS)),
        centers=[parse_center(c) for c in data.get("centers", [])],
        subscribers=[_parse_subscriber(s) for s in data.get("subscribers", [])],
        emergency_contacts=_parse_contacts(data.get("emergency_contacts")),
        email=_parse_email(data.get("email"), secret_client),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: %d centers, %d subscribers",
        len(config.centers),
        len(config.subscribers),
    )

    return config


def _parse_subscriber_list(value: str, default: Location) -> list[Subscriber]:
    """Parse ALERT_SUBSCRIBERS: comma-separated addresses, all watching `default`."""
    return [
        Subscriber(email=address.strip(), latitude=default.latitude, longitude=default.longitude)
        for address in value.split(",")
        if address.strip()
    ]


def load_config_from_env(base: Config | None = None) -> Config:
    """Overlay environment variables on a base configuration.

    Useful for simple deployments that keep centers in YAML but pass
    credentials and subscribers through the environment.

    Environment variables:
        RESEND_API_KEY: Email API key (or ${secret:name})
        ALERT_FROM_ADDRESS: Sender address
        DEFAULT_LATITUDE / DEFAULT_LONGITUDE: Default location
        FORECAST_HOURS: Forecast hours checked for severe weather
        ALERT_SUBSCRIBERS: Comma-separated subscriber addresses

    Returns:
        Config object with environment overrides applied
    """
    config = base or Config()
    secret_client = _get_secret_manager_client()

    location = config.default_location
    lat = os.environ.get("DEFAULT_LATITUDE")
    lon = os.environ.get("DEFAULT_LONGITUDE")
    if lat and lon:
        location = Location(latitude=float(lat), longitude=float(lon))

    email = config.email
    api_key = os.environ.get("RESEND_API_KEY")
    from_address = os.environ.get("ALERT_FROM_ADDRESS")
    if api_key or from_address:
        email = EmailSettings(
            api_key=_resolve_value(api_key, secret_client) if api_key else email.api_key,
            from_address=from_address or email.from_address,
        )

    subscribers = config.subscribers
    subscriber_list = os.environ.get("ALERT_SUBSCRIBERS")
    if subscriber_list:
        subscribers = _parse_subscriber_list(subscriber_list, location)

    return Config(
        default_location=location,
        forecast_hours=int(os.environ.get("FORECAST_HOURS", config.forecast_hours)),
        centers=config.centers,
        subscribers=subscribers,
        emergency_contacts=config.emergency_contacts,
        email=email,
    )
