"""Dependency injection factories for API v1.

Stores are built by the application lifespan (or passed to ``create_app``)
and kept on ``app.state``; services are cheap and built per request.
"""

from fastapi import Depends, Request

from domain.repositories.profile_repository import IProfileRecordStore
from domain.repositories.sensor_repository import ISensorRepository
from domain.services.profile_synchronizer import ProfileSynchronizer
from domain.services.sensor_service import SensorService


def get_profile_store(request: Request) -> IProfileRecordStore:
    """Get the profile record store owned by the application."""
    store = getattr(request.app.state, "profile_store", None)
    if store is None:
        raise RuntimeError("Profile store not initialized. Start the app via its lifespan.")
    return store  # type: ignore[no-any-return]


def get_sensor_repository(request: Request) -> ISensorRepository:
    """Get the sensor repository owned by the application."""
    repo = getattr(request.app.state, "sensor_repository", None)
    if repo is None:
        raise RuntimeError("Sensor repository not initialized. Start the app via its lifespan.")
    return repo  # type: ignore[no-any-return]


def get_profile_synchronizer(
    store: IProfileRecordStore = Depends(get_profile_store),
) -> ProfileSynchronizer:
    """Get a Profile synchronizer bound to the application store."""
    return ProfileSynchronizer(store)


def get_sensor_service(
    repo: ISensorRepository = Depends(get_sensor_repository),
) -> SensorService:
    """Get Sensor service instance."""
    return SensorService(repo)
