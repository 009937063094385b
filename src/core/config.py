"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

import re
from dataclasses import dataclass, field

from src.core.centers import Center
from src.core.formatter import EMERGENCY_CONTACTS
from src.core.geo import DEFAULT_LOCATION, Location
from src.core.weather import DEFAULT_LOOK_AHEAD_HOURS


_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class EmailSettings:
    """Outgoing email configuration.

    Attributes:
        api_key: Email API key (may be a ${...} placeholder until resolved)
        from_address: Sender address
    """
    api_key: str = ""
    from_address: str = "Weather Alerts <alerts@example.org>"


@dataclass(frozen=True)
class Subscriber:
    """A weather alert subscriber.

    Attributes:
        email: Address alerts are sent to
        name: Optional place name used in the email heading
        latitude: Latitude of the watched location
        longitude: Longitude of the watched location
    """
    email: str
    latitude: float
    longitude: float
    name: str | None = None

    @property
    def location(self) -> Location:
        return Location(self.latitude, self.longitude)


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        default_location: Location used when the user shares none
        forecast_hours: Forecast hours checked for incoming severe weather
        centers: Relief and health centers
        subscribers: Weather alert email subscribers
        emergency_contacts: (label, phone) pairs for the minimal view
        email: Outgoing email configuration
    """
    default_location: Location = DEFAULT_LOCATION
    forecast_hours: int = DEFAULT_LOOK_AHEAD_HOURS
    centers: list[Center] = field(default_factory=list)
    subscribers: list[Subscriber] = field(default_factory=list)
    emergency_contacts: tuple[tuple[str, str], ...] = EMERGENCY_CONTACTS
    email: EmailSettings = field(default_factory=EmailSettings)


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def is_valid_email(address: str) -> bool:
    """Loose shape check for an email address.

    Pure function. Non-string input is never valid.
    """
    if not isinstance(address, str):
        return False
    return bool(_EMAIL_PATTERN.match(address.strip()))


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_center(center: Center, field_name: str) -> list[ValidationError]:
    """Validate a single center.

    Pure function.
    """
    errors = validate_coordinates(center.latitude, center.longitude, field_name)

    if center.capacity < 0:
        errors.append(ValidationError(
            field=f"{field_name}.capacity",
            message=f"Capacity must not be negative, got {center.capacity}",
        ))

    if not 0 <= center.occupancy <= max(center.capacity, 0):
        errors.append(ValidationError(
            field=f"{field_name}.occupancy",
            message=(
                f"Occupancy {center.occupancy} outside [0, {center.capacity}]"
            ),
            severity="warning",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    errors.extend(validate_coordinates(
        config.default_location.latitude,
        config.default_location.longitude,
        "default_location",
    ))

    if config.forecast_hours < 1:
        errors.append(ValidationError(
            field="forecast_hours",
            message=f"forecast_hours must be at least 1, got {config.forecast_hours}",
        ))

    seen_ids: set[str] = set()
    for i, center in enumerate(config.centers):
        errors.extend(validate_center(center, f"centers[{i}]"))
        if center.id in seen_ids:
            errors.append(ValidationError(
                field=f"centers[{i}].id",
                message=f"Duplicate center id '{center.id}'",
            ))
        seen_ids.add(center.id)

    for i, subscriber in enumerate(config.subscribers):
        errors.extend(validate_coordinates(
            subscriber.latitude, subscriber.longitude,
            f"subscribers[{i}]",
        ))
        if not is_valid_email(subscriber.email):
            errors.append(ValidationError(
                field=f"subscribers[{i}].email",
                message=f"Invalid email address '{subscriber.email}'",
            ))

    if config.subscribers:
        if not config.email.api_key or config.email.api_key.startswith("${"):
            errors.append(ValidationError(
                field="email.api_key",
                message="Email API key not resolved (still contains placeholder)",
                severity="warning",
            ))
    else:
        errors.append(ValidationError(
            field="subscribers",
            message="No alert subscribers configured",
            severity="warning",
        ))

    if not config.centers:
        errors.append(ValidationError(
            field="centers",
            message="No centers configured",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
