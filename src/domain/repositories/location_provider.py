"""Device location provider protocol."""

from typing import Protocol

from domain.entities.location import GeocodedAddress, PermissionStatus, Position


class ILocationProvider(Protocol):
    """Foreground geolocation and reverse geocoding on the user's device."""

    async def request_foreground_permission(self) -> PermissionStatus:
        """Prompt for foreground location permission."""
        ...

    async def get_current_position(self) -> Position:
        """Get the device's current coordinates."""
        ...

    async def reverse_geocode(self, position: Position) -> list[GeocodedAddress]:
        """Resolve coordinates to zero or more structured addresses."""
        ...
