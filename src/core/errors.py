"""
Custom exceptions and error handling for Space Drivers.

Defines application-specific exceptions with error codes for consistent
error handling across the travel service and the Lambda handlers.

Business-rule rejections derive from TravelRejectedError, infrastructure
failures from StorageError. Transport status codes are assigned by the
handlers, never here.

Usage:
    from core.errors import InvalidStatusError, ErrorCode

    raise InvalidStatusError("pending -> ready", code=ErrorCode.INVALID_STATUS)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Authentication errors
    AUTH_FAILED = "AUTH_FAILED"
    INVALID_TOKEN = "INVALID_TOKEN"
    EXPIRED_TOKEN = "EXPIRED_TOKEN"

    # Authorization errors
    NO_IDENTITY = "NO_IDENTITY"
    ACCESS_DENIED = "ACCESS_DENIED"

    # Travel rule errors
    TRAVEL_NOT_FOUND = "TRAVEL_NOT_FOUND"
    INVALID_STATUS = "INVALID_STATUS"
    INVALID_LOCATION_EDIT = "INVALID_LOCATION_EDIT"
    INVALID_USER = "INVALID_USER"
    INVALID_TRAVEL_USER = "INVALID_TRAVEL_USER"

    # Storage errors
    STORAGE_SAVE_FAILED = "STORAGE_SAVE_FAILED"
    STORAGE_UPDATE_FAILED = "STORAGE_UPDATE_FAILED"
    STORAGE_GET_FAILED = "STORAGE_GET_FAILED"
    STORAGE_USER_GET_FAILED = "STORAGE_USER_GET_FAILED"

    # Validation errors
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


DETAILS: dict[ErrorCode, str] = {
    ErrorCode.AUTH_FAILED: "Authentication failed. Please sign in again.",
    ErrorCode.INVALID_TOKEN: "The received token is invalid.",
    ErrorCode.EXPIRED_TOKEN: "The received token is expired. Please sign in again.",
    ErrorCode.NO_IDENTITY: "Cannot identify the user logged in.",
    ErrorCode.ACCESS_DENIED: "The user logged in is not the owner of the travel nor an admin.",
    ErrorCode.TRAVEL_NOT_FOUND: "The requested travel was not found.",
    ErrorCode.INVALID_STATUS: "Invalid travel status received.",
    ErrorCode.INVALID_LOCATION_EDIT: "The travel status does not allow location changes.",
    ErrorCode.INVALID_USER: "Invalid user while performing the update.",
    ErrorCode.INVALID_TRAVEL_USER: "The user assigned to the travel was not found.",
    ErrorCode.STORAGE_SAVE_FAILED: "An error occurred trying to save the travel.",
    ErrorCode.STORAGE_UPDATE_FAILED: "An error occurred trying to update the travel.",
    ErrorCode.STORAGE_GET_FAILED: "An error occurred trying to get the travel.",
    ErrorCode.STORAGE_USER_GET_FAILED: "An error occurred trying to get the assigned user.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please check and try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class SpaceDriversError(Exception):
    """Base exception for all Space Drivers errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def detail(self) -> str:
        return DETAILS.get(self.code, DETAILS[ErrorCode.INTERNAL_ERROR])


class AuthenticationError(SpaceDriversError):
    """Bearer token could not be verified."""

    pass


class StorageError(SpaceDriversError):
    """Persistence layer failure unrelated to business rules."""

    pass


class TravelRejectedError(SpaceDriversError):
    """Base for deterministic, non-retryable travel rule rejections."""

    pass


class TravelNotFoundError(TravelRejectedError):
    def __init__(self, travel_id: int):
        super().__init__(f"Travel {travel_id} not found", code=ErrorCode.TRAVEL_NOT_FOUND)
        self.travel_id = travel_id


class UnauthorizedError(TravelRejectedError):
    """Caller is unknown, or is neither the owner nor an admin."""

    pass


class InvalidLocationEditError(TravelRejectedError):
    pass


class InvalidStatusError(TravelRejectedError):
    pass


class InvalidUserError(TravelRejectedError):
    """Assignment rule violated or assigned user unknown."""

    pass
