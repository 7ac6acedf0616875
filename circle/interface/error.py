"""Mapping of domain errors to HTTP responses."""

from fastapi import HTTPException, status
from fastapi.responses import PlainTextResponse

from circle.domain.error import (
    ConflictError,
    DomainError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
    UserNotFoundError,
    ValidationError,
)

# Checked in order; first matching class wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (MissingTokenError, status.HTTP_400_BAD_REQUEST),
    (InvalidTokenError, status.HTTP_401_UNAUTHORIZED),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(error: DomainError) -> int:
    """Return the HTTP status code for a domain error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(error: DomainError) -> HTTPException:
    """Convert a domain error into an HTTPException.

    The error message becomes the response detail.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException carrying the mapped status code
    """
    return HTTPException(status_code=status_for(error), detail=str(error))


def to_plain_text_response(
    error: UserNotFoundError | PersistenceError,
) -> PlainTextResponse:
    """Render a profile update or delete failure as a plain-text body.

    An unknown target reads ``Invalid username.``; a store failure keeps
    its own message.
    """
    if isinstance(error, UserNotFoundError):
        return PlainTextResponse("Invalid username.", status_code=status_for(error))
    return PlainTextResponse(str(error), status_code=status_for(error))
