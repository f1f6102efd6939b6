"""Shared fixtures for unit tests."""

from unittest.mock import AsyncMock

import pytest

from domain.entities.location import GeocodedAddress, PermissionStatus, Position
from domain.entities.profile import ProfileRecord


def make_patient(user_id: str = "u1", **overrides: str) -> ProfileRecord:
    """A patient record that passes every validator."""
    values = {
        "external_id": "P-0001",
        "name": "Sam Patient",
        "email": "sam@example.com",
        "phone_number": "555-123-4567",
        "address": "42 Elm Street, Shelbyville",
        "weight": "70",
        "height": "175",
    }
    values.update(overrides)
    return ProfileRecord(user_id=user_id, **values)


def make_practitioner(user_id: str = "d1", **overrides: str) -> ProfileRecord:
    """A practitioner record that passes every validator."""
    values = {
        "external_id": "LIC-778",
        "name": "Dr. Old Name",
        "email": "old@example.com",
        "phone_number": "5551112222",
        "address": "1 Clinic Way",
    }
    values.update(overrides)
    return ProfileRecord(user_id=user_id, **values)


@pytest.fixture
def store() -> AsyncMock:
    """Profile store mock with no conflicting emails by default."""
    store = AsyncMock()
    store.query_by_field.return_value = []
    return store


@pytest.fixture
def location() -> AsyncMock:
    """Location provider mock that grants permission and resolves one address."""
    location = AsyncMock()
    location.request_foreground_permission.return_value = PermissionStatus.GRANTED
    location.get_current_position.return_value = Position(latitude=39.78, longitude=-89.65)
    location.reverse_geocode.return_value = [
        GeocodedAddress(
            street="742 Evergreen Terrace",
            city="Springfield",
            region="IL",
            country="United States",
        )
    ]
    return location
