from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base class for errors raised by the ordering engine and its collaborators.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (ids, upstream status)
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Unexpected error"
    default_code = "APP_ERROR"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message, "code": self.code}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class NotFoundError(AppError):
    """Raised when a requested resource (dish, screen) was not found."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class ConflictError(AppError):
    """Raised when an operation conflicts with the current state."""

    http_status = 409
    default_message = "Conflict"
    default_code = "CONFLICT"


class CompositionNotReadyError(ConflictError):
    """Raised when an order operation is attempted before a dish finished loading."""

    default_message = "Dish is not loaded"
    default_code = "COMPOSITION_NOT_READY"


class LoadSupersededError(ConflictError):
    """Raised by a load whose result was discarded because a newer load was issued."""

    default_message = "Load superseded by a newer request"
    default_code = "LOAD_SUPERSEDED"


class NetworkError(AppError):
    """Raised on transport failures or unexpected upstream responses."""

    http_status = 503
    default_message = "Catalog service unavailable"
    default_code = "NETWORK_ERROR"


class LoadError(AppError):
    """Raised when the dish or its favorite status could not be fetched.

    Fatal to screen initialization: no partial composition is kept.
    """

    http_status = 502
    default_message = "Could not load dish"
    default_code = "LOAD_FAILED"


class RegistryError(AppError):
    """Raised when adding or removing a favorite failed."""

    http_status = 502
    default_message = "Favorite registry write failed"
    default_code = "REGISTRY_FAILED"


class OrderSubmissionError(AppError):
    """Raised when a finished order could not be submitted."""

    http_status = 502
    default_message = "Order submission failed"
    default_code = "ORDER_SUBMISSION_FAILED"
