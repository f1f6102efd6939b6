"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import settings
from core.logging import setup_logging
from domain.repositories.profile_repository import IProfileRecordStore
from domain.repositories.sensor_repository import ISensorRepository

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the configured stores unless they were injected, and dispose them on shutdown."""
    engine = None

    if app.state.profile_store is None or app.state.sensor_repository is None:
        if settings.profile_store_backend == "firestore":
            from infrastructure.firestore.client import init_firestore
            from infrastructure.firestore.profile_store import FirestoreProfileStore
            from infrastructure.firestore.sensor_store import FirestoreSensorStore

            db = init_firestore(settings)
            app.state.profile_store = FirestoreProfileStore(db, settings.users_collection)
            app.state.sensor_repository = FirestoreSensorStore(db, settings.sensors_collection)
        else:
            from infrastructure.database.repositories.sqlalchemy_profile_repo import (
                SQLAlchemyProfileRepository,
            )
            from infrastructure.database.repositories.sqlalchemy_sensor_repo import (
                SQLAlchemySensorRepository,
            )
            from infrastructure.database.session import create_engine, create_session_factory

            engine = create_engine()
            session_factory = create_session_factory(engine)
            app.state.profile_store = SQLAlchemyProfileRepository(session_factory)
            app.state.sensor_repository = SQLAlchemySensorRepository(session_factory)

    logger.info("stores_ready", backend=settings.profile_store_backend)
    yield

    if engine is not None:
        await engine.dispose()


def create_app(
    profile_store: IProfileRecordStore | None = None,
    sensor_repository: ISensorRepository | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Stores passed in here are used as-is and never disposed by the app.
    """
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Patient & Practitioner Profiles\n\n"
            "Backend for the CapRed mobile app's profile and sensor screens.\n\n"
            "### Features\n"
            "- **Profiles**: read and save identity, contact, address and body metrics\n"
            "- **Validation**: per-field checks, first failing field reported\n"
            "- **Unique email**: saves are rejected when another account holds the email\n"
            "- **Units**: weight/height stored metric, convertible for display\n"
            "- **Sensors**: list and forget paired devices"
        ),
        version="1.0.0",
        debug=settings.debug,
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "profiles",
                "description": "Profile read and save operations",
            },
            {
                "name": "sensors",
                "description": "Paired sensor operations",
            },
        ],
    )
    app.state.profile_store = profile_store
    app.state.sensor_repository = sensor_repository

    # Tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
