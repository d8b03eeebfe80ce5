"""
Custom exceptions for the Workout Scheduler.

This module defines a hierarchy of exceptions that provide clear error
handling throughout the application. Each exception includes:
- A descriptive message
- An error code for API responses
- HTTP status code mapping
- Optional details for debugging

The scheduling engine itself raises none of these: an empty suggestion
list is a valid result. They are raised by the collaborators around it
(stores, calendar provider, assistant flow).
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error codes for consistent API error responses."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Preference errors
    SETUP_REQUIRED = "SETUP_REQUIRED"
    PREFERENCE_VALIDATION_ERROR = "PREFERENCE_VALIDATION_ERROR"

    # Activity / suggestion errors
    ACTIVITY_NOT_FOUND = "ACTIVITY_NOT_FOUND"
    SUGGESTION_NOT_FOUND = "SUGGESTION_NOT_FOUND"
    SUGGESTION_ALREADY_ACCEPTED = "SUGGESTION_ALREADY_ACCEPTED"

    # Calendar errors
    CALENDAR_PROVIDER_ERROR = "CALENDAR_PROVIDER_ERROR"
    CALENDAR_AUTH_ERROR = "CALENDAR_AUTH_ERROR"


class SchedulerError(Exception):
    """
    Base exception for all Workout Scheduler errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        status_code: HTTP status code for API responses
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


# ============================================================================
# Validation Errors (400)
# ============================================================================

class ValidationError(SchedulerError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_ERROR,
            status_code=400,
            details=error_details,
        )


class PreferenceValidationError(ValidationError):
    """Raised when schedule preference data is inconsistent."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, field=field, details=details)
        self.code = ErrorCode.PREFERENCE_VALIDATION_ERROR


# ============================================================================
# Not Found Errors (404)
# ============================================================================

class NotFoundError(SchedulerError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        code: ErrorCode = ErrorCode.NOT_FOUND,
    ) -> None:
        super().__init__(
            message=f"{resource_type} not found: {resource_id}",
            code=code,
            status_code=404,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class ActivityNotFoundError(NotFoundError):
    """Raised when an activity is not found."""

    def __init__(self, activity_id: str) -> None:
        super().__init__("Activity", activity_id, ErrorCode.ACTIVITY_NOT_FOUND)


class SuggestionNotFoundError(NotFoundError):
    """Raised when a workout suggestion is not found."""

    def __init__(self, suggestion_id: str) -> None:
        super().__init__("Workout suggestion", suggestion_id, ErrorCode.SUGGESTION_NOT_FOUND)


# ============================================================================
# Conflict Errors (409)
# ============================================================================

class SetupRequiredError(SchedulerError):
    """Raised when suggestions are requested before preferences exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            message="Please configure your schedule preferences first.",
            code=ErrorCode.SETUP_REQUIRED,
            status_code=409,
            details={"user_id": user_id},
        )


class SuggestionAlreadyAcceptedError(SchedulerError):
    """Raised when a suggestion that was already accepted is accepted again."""

    def __init__(self, suggestion_id: str) -> None:
        super().__init__(
            message=f"Workout suggestion already accepted: {suggestion_id}",
            code=ErrorCode.SUGGESTION_ALREADY_ACCEPTED,
            status_code=409,
            details={"suggestion_id": suggestion_id},
        )


# ============================================================================
# Calendar Errors (502)
# ============================================================================

class CalendarProviderError(SchedulerError):
    """Raised when the calendar provider cannot be reached or answers badly."""

    def __init__(
        self,
        message: str,
        provider: str = "",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if provider:
            error_details["provider"] = provider
        super().__init__(
            message=message,
            code=ErrorCode.CALENDAR_PROVIDER_ERROR,
            status_code=502,
            details=error_details,
        )
        self.provider = provider


class CalendarAuthError(CalendarProviderError):
    """Raised when the calendar access token is rejected."""

    def __init__(self, provider: str, status: int) -> None:
        super().__init__(
            message=f"Calendar authorization failed ({status})",
            provider=provider,
            details={"status": status},
        )
        self.code = ErrorCode.CALENDAR_AUTH_ERROR
