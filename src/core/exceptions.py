"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Permission errors (403)
    PERMISSION_DENIED = "PERMISSION_DENIED"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    SENSOR_NOT_FOUND = "SENSOR_NOT_FOUND"

    # Validation errors (422)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (409)
    EMAIL_IN_USE = "EMAIL_IN_USE"
    INVALID_SESSION_STATE = "INVALID_SESSION_STATE"

    # Upstream errors (502)
    REMOTE_FAILURE = "REMOTE_FAILURE"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """A profile field failed its validation rule."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=reason,
            status_code=422,
            details={"field": field},
        )


class UniquenessConflictError(AppException):
    """Another record already holds the value of a unique field."""

    def __init__(self, field: str = "email") -> None:
        self.field = field
        super().__init__(
            error_code=ErrorCode.EMAIL_IN_USE,
            message="This email is already in use.",
            status_code=409,
            details={"field": field},
        )


class PermissionDeniedError(AppException):
    """The user declined a device permission prompt."""

    def __init__(
        self,
        permission: str = "location",
        message: str = "Location permission is required to get the address.",
    ) -> None:
        self.permission = permission
        super().__init__(
            error_code=ErrorCode.PERMISSION_DENIED,
            message=message,
            status_code=403,
            details={"permission": permission},
        )


class RemoteFailureError(AppException):
    """A call to the backing store failed."""

    def __init__(self, operation: str, message: str | None = None) -> None:
        self.operation = operation
        super().__init__(
            error_code=ErrorCode.REMOTE_FAILURE,
            message=message or f"Failed to {operation} user data",
            status_code=502,
            details={"operation": operation},
        )


class ProfileNotFoundError(AppException):
    """Profile record not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class SensorNotFoundError(AppException):
    """Sensor not found."""

    def __init__(self, sensor_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.SENSOR_NOT_FOUND,
            message=f"Sensor not found: {sensor_id}",
            status_code=404,
            details={"sensor_id": sensor_id},
        )


class InvalidSessionStateError(AppException):
    """An edit session operation is not allowed in its current state."""

    def __init__(self, operation: str, state: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_SESSION_STATE,
            message=f"Cannot {operation} while session is {state}",
            status_code=409,
            details={"operation": operation, "state": state},
        )
