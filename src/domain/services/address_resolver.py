"""Location-assisted address suggestions."""

from enum import StrEnum

import structlog

from core.exceptions import PermissionDeniedError
from domain.entities.location import PermissionStatus
from domain.repositories.location_provider import ILocationProvider

logger = structlog.get_logger()


class ResolverState(StrEnum):
    """Progress of one address resolution."""

    IDLE = "idle"
    PERMISSION_REQUESTED = "permission_requested"
    LOCATION_FETCHED = "location_fetched"
    RECONCILED = "reconciled"


class AddressResolver:
    """Turn the device's current location into an address suggestion list.

    The resolver never writes the address field itself. It publishes at most
    one suggestion; the caller applies it through ``select``.
    """

    def __init__(self, location: ILocationProvider) -> None:
        self._location = location
        self.state = ResolverState.IDLE
        self.suggestions: list[str] = []

    async def resolve(self) -> list[str]:
        """Request permission, locate and reverse-geocode.

        A failing position or geocode lookup returns the resolver to ``IDLE``
        before the error propagates.

        Raises:
            PermissionDeniedError: The user declined location access. The
                resolver is back in ``IDLE`` with no suggestions.
        """
        self.suggestions = []
        self.state = ResolverState.PERMISSION_REQUESTED

        status = await self._location.request_foreground_permission()
        if status != PermissionStatus.GRANTED:
            self.state = ResolverState.IDLE
            logger.info("location_permission_denied")
            raise PermissionDeniedError()

        try:
            position = await self._location.get_current_position()
            self.state = ResolverState.LOCATION_FETCHED
            addresses = await self._location.reverse_geocode(position)
        except Exception as exc:
            logger.warning("location_lookup_failed", state=str(self.state), error=str(exc))
            self.reset()
            raise

        if addresses:
            self.suggestions = [addresses[0].format()]
        else:
            logger.info("reverse_geocode_empty")

        self.state = ResolverState.RECONCILED
        return list(self.suggestions)

    def select(self, suggestion: str) -> str:
        """Accept a suggestion and reset to ``IDLE``."""
        self.suggestions = []
        self.state = ResolverState.IDLE
        return suggestion

    def reset(self) -> None:
        self.suggestions = []
        self.state = ResolverState.IDLE
