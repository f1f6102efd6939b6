"""Firebase Admin initialization for the Firestore-backed stores."""

import os

import firebase_admin
import structlog
from firebase_admin import credentials, firestore_async
from google.cloud.firestore import AsyncClient

from core.config import Settings

logger = structlog.get_logger()


def init_firestore(settings: Settings) -> AsyncClient:
    """Initialize the Firebase Admin app once and return an async Firestore client.

    Credentials come from ``FIREBASE_CREDENTIALS`` when set, otherwise from
    Google application default credentials.
    """
    if not firebase_admin._apps:
        cred_path = settings.firebase_credentials
        if cred_path:
            if not os.path.exists(cred_path):
                raise RuntimeError(
                    f"Firebase credentials not found at: {cred_path}\n"
                    "Set FIREBASE_CREDENTIALS to a service account JSON file."
                )
            cred = credentials.Certificate(cred_path)
        else:
            cred = credentials.ApplicationDefault()

        options = {"projectId": settings.firebase_project_id} if settings.firebase_project_id else None
        firebase_admin.initialize_app(cred, options)
        logger.info("firebase_initialized", project_id=settings.firebase_project_id or None)

    return firestore_async.client()
