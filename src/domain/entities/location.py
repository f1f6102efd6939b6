"""Device location domain entities."""

from dataclasses import dataclass
from enum import StrEnum


class PermissionStatus(StrEnum):
    """Outcome of a foreground permission request."""

    GRANTED = "granted"
    DENIED = "denied"


@dataclass(frozen=True)
class Position:
    """A geographic coordinate pair."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class GeocodedAddress:
    """A structured address returned by reverse geocoding."""

    street: str | None = None
    city: str | None = None
    region: str | None = None
    country: str | None = None

    def format(self) -> str:
        """Format as ``"{street}, {city}, {region}, {country}"``.

        Missing parts render as empty strings.
        """
        parts = (self.street, self.city, self.region, self.country)
        return ", ".join(part or "" for part in parts)
