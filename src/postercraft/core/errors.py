"""Error types for poster generation.

Every failure a generation request can hit is represented by a
:class:`PosterError` subclass carrying an :class:`ErrorKind`.  Client-input
problems raise :class:`ValidationError` before any prompt is composed;
provider problems raise :class:`ProviderError` after the single provider
call.  The request handler turns either into a failure response, so no
error escapes as an unhandled fault.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable category of a generation failure."""

    MISSING_BODY = "missing_body"
    MISSING_FIELD = "missing_field"
    INVALID_ENUM = "invalid_enum"
    OUT_OF_RANGE = "out_of_range"
    INVALID_TYPE = "invalid_type"
    PROVIDER_EMPTY_RESPONSE = "provider_empty_response"
    PROVIDER_CALL_FAILED = "provider_call_failed"


class PosterError(Exception):
    """Base class for all poster generation failures.

    Attributes:
        kind: Category of the failure.
        message: Human-readable detail, safe to show to the user.
        field: JSON name of the offending request field, if any.
    """

    summary = "Failed to generate poster"

    def __init__(self, kind: ErrorKind, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.field = field


class ValidationError(PosterError):
    """The request payload was rejected before any provider call."""

    summary = "Invalid poster request"


class ProviderError(PosterError):
    """The image provider failed or returned no usable image."""

    summary = "Failed to generate poster"
