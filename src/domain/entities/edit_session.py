"""Edit session domain entity."""

from dataclasses import dataclass, field
from enum import StrEnum
from uuid import uuid4

from core.exceptions import AppException
from domain.entities.profile import ProfileFieldSet, ProfileRecord


class SessionState(StrEnum):
    """Edit-mode state of a profile session."""

    VIEWING = "viewing"
    EDITING = "editing"
    VALIDATING = "validating"
    PERSISTING = "persisting"


@dataclass
class EditSession:
    """Transient, screen-scoped state for viewing and editing one profile.

    ``record`` is the working copy. Weight and height in it are expressed in
    the display unit (``imperial``), which is never persisted.
    """

    record: ProfileRecord
    field_set: ProfileFieldSet
    state: SessionState = SessionState.VIEWING
    errors: dict[str, str] = field(default_factory=dict)
    suggestions: list[str] = field(default_factory=list)
    imperial: bool = False
    discarded: bool = False
    last_error: AppException | None = None
    warning: str | None = None
    id: str = field(default_factory=lambda: uuid4().hex)

    @property
    def user_id(self) -> str:
        return self.record.user_id

    @property
    def editing(self) -> bool:
        return self.state == SessionState.EDITING

    def error_for(self, field_name: str) -> str | None:
        """Get the current error message for a field, if any."""
        return self.errors.get(field_name)

    def fail(self, field_name: str | None, exc: AppException) -> None:
        """Return to editing with a failure recorded.

        At most one error is kept per save attempt.
        """
        self.errors.clear()
        if field_name:
            self.errors[field_name] = exc.message
        self.last_error = exc
        self.state = SessionState.EDITING
