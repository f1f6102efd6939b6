"""Profile synchronizer: the edit-mode state machine behind the profile screens.

A session moves ``VIEWING -> EDITING -> VALIDATING -> PERSISTING -> VIEWING``
on a successful save and falls back to ``EDITING`` with one recorded error
on any failure. Every store or device call is an await point; a session
discarded while one is pending is left untouched when it completes.
"""

from dataclasses import replace
from typing import Any

import structlog

from core.exceptions import (
    AppException,
    InvalidSessionStateError,
    PermissionDeniedError,
    ProfileNotFoundError,
    RemoteFailureError,
    UniquenessConflictError,
    ValidationError,
)
from domain.entities.edit_session import EditSession, SessionState
from domain.entities.profile import ProfileKind, ProfileRecord, field_set_for
from domain.repositories.location_provider import ILocationProvider
from domain.repositories.profile_repository import IProfileRecordStore
from domain.services import unit_converter
from domain.services.address_resolver import AddressResolver
from domain.services.uniqueness_checker import UniquenessChecker
from domain.services.validators import validate_field

logger = structlog.get_logger()

LOCATION_UNAVAILABLE = "Unable to get the current address."


class ProfileSynchronizer:
    """Validate, uniqueness-check, persist and reconcile profile edits."""

    def __init__(
        self,
        store: IProfileRecordStore,
        location: ILocationProvider | None = None,
        uniqueness: UniquenessChecker | None = None,
    ) -> None:
        self._store = store
        self._location = location
        self._uniqueness = uniqueness or UniquenessChecker(store)

    async def fetch(self, user_id: str) -> ProfileRecord:
        """Read a profile record from the store."""
        try:
            record = await self._store.get(user_id)
        except Exception as exc:
            logger.error("profile_fetch_failed", user_id=user_id, error=str(exc))
            raise RemoteFailureError("fetch") from exc
        if record is None:
            raise ProfileNotFoundError(user_id)
        return record

    async def open_session(
        self, user_id: str, kind: ProfileKind = ProfileKind.PATIENT
    ) -> EditSession:
        """Fetch a record and seed a read-only session from it."""
        record = await self.fetch(user_id)
        return EditSession(record=record.copy(), field_set=field_set_for(kind))

    def discard(self, session: EditSession) -> None:
        """Mark a session as gone; pending operations will not touch it."""
        session.discarded = True
        logger.debug("session_discarded", session_id=session.id)

    def toggle_edit(self, session: EditSession) -> SessionState:
        """Switch between viewing and editing.

        Leaving edit mode keeps unsaved field values.
        """
        if session.state == SessionState.VIEWING:
            session.state = SessionState.EDITING
        elif session.state == SessionState.EDITING:
            session.state = SessionState.VIEWING
            session.suggestions = []
        else:
            raise InvalidSessionStateError("toggle edit mode", str(session.state))
        return session.state

    def set_field(self, session: EditSession, field_name: str, value: str) -> None:
        """Apply one keystroke-level change to the working copy."""
        self._require(session, SessionState.EDITING, "edit fields")
        if field_name not in session.field_set.mutable:
            raise ValidationError(field_name, "This field cannot be edited.")

        setattr(session.record, field_name, value)
        session.errors.pop(field_name, None)
        if field_name == "address":
            session.suggestions = []

    def apply_edits(
        self,
        session: EditSession,
        values: dict[str, Any],
    ) -> None:
        """Apply several field changes at once; ``None`` values are skipped.

        Weight and height are read in the session's current display unit.
        """
        for field_name, value in values.items():
            if value is not None:
                self.set_field(session, field_name, value)

    def toggle_units(self, session: EditSession) -> bool:
        """Flip the displayed weight/height between metric and imperial."""
        if session.state not in (SessionState.VIEWING, SessionState.EDITING):
            raise InvalidSessionStateError("convert units", str(session.state))
        if not session.field_set.has_metrics:
            return session.imperial

        weight, height, imperial = unit_converter.toggle_units(
            session.record.weight, session.record.height, session.imperial
        )
        session.record.weight = weight
        session.record.height = height
        session.imperial = imperial
        return imperial

    async def focus_address(self, session: EditSession) -> list[str]:
        """Offer the device's current address as a suggestion.

        Does nothing outside edit mode or without a location provider. A
        denied permission or a failed location lookup leaves a warning on the
        session and no suggestions.
        """
        if session.state != SessionState.EDITING or self._location is None:
            return []

        session.warning = None
        resolver = AddressResolver(self._location)
        try:
            suggestions = await resolver.resolve()
        except PermissionDeniedError as exc:
            if not session.discarded:
                session.suggestions = []
                session.warning = exc.message
            return []
        except Exception as exc:
            logger.warning("address_lookup_failed", user_id=session.user_id, error=str(exc))
            if not session.discarded:
                session.suggestions = []
                session.warning = LOCATION_UNAVAILABLE
            return []

        if session.discarded or session.state != SessionState.EDITING:
            return []
        session.suggestions = suggestions
        return list(suggestions)

    def select_suggestion(self, session: EditSession, suggestion: str) -> None:
        """Write a suggested address into the working copy."""
        self.set_field(session, "address", suggestion)

    async def save(self, session: EditSession) -> bool:
        """Validate, check uniqueness, persist and reconcile.

        Returns True when the session ends up ``VIEWING`` the re-fetched
        record. On failure the session is back in ``EDITING`` with unsaved
        edits intact, ``errors`` holding at most one field message and
        ``last_error`` holding the cause.
        """
        self._require(session, SessionState.EDITING, "save")
        session.state = SessionState.VALIDATING
        session.errors.clear()
        session.last_error = None

        record = session.record
        for field_name in session.field_set.validated:
            message = validate_field(field_name, getattr(record, field_name))
            if message:
                logger.info("profile_validation_failed", user_id=session.user_id, field=field_name)
                session.fail(field_name, ValidationError(field_name, message))
                return False

        try:
            taken = await self._uniqueness.is_email_taken(record.email, session.user_id)
        except Exception as exc:
            logger.error("email_check_failed", user_id=session.user_id, error=str(exc))
            return self._fail(session, None, RemoteFailureError("query", "Failed to verify email"))
        if session.discarded:
            return False
        if taken:
            return self._fail(session, "email", UniquenessConflictError("email"))

        session.state = SessionState.PERSISTING
        weight, height = unit_converter.to_metric(record.weight, record.height, session.imperial)
        canonical = replace(record, weight=weight, height=height)
        payload = canonical.partial_document(session.field_set.mutable)

        try:
            await self._store.update_partial(session.user_id, payload)
        except Exception as exc:
            logger.error("profile_update_failed", user_id=session.user_id, error=str(exc))
            return self._fail(session, None, RemoteFailureError("update", "Failed to save user data"))
        if session.discarded:
            return False

        logger.info("profile_saved", user_id=session.user_id, fields=sorted(payload))

        try:
            fresh = await self._store.get(session.user_id)
        except Exception as exc:
            # The write went through; fall back to what was sent
            logger.warning("profile_refetch_failed", user_id=session.user_id, error=str(exc))
            fresh = None
        if session.discarded:
            return False

        session.record = fresh if fresh is not None else canonical
        session.imperial = False
        session.errors.clear()
        session.suggestions = []
        session.state = SessionState.VIEWING
        return True

    def _fail(self, session: EditSession, field_name: str | None, exc: AppException) -> bool:
        if not session.discarded:
            session.fail(field_name, exc)
        return False

    @staticmethod
    def _require(session: EditSession, state: SessionState, operation: str) -> None:
        if session.state != state:
            raise InvalidSessionStateError(operation, str(session.state))
