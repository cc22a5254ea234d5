"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from cms_api.domain.exceptions import (
    ConflictError,
    ForbiddenOperationError,
    NotFoundError,
)

_STATUS_BY_ERROR: tuple[tuple[type[ValueError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ForbiddenOperationError, status.HTTP_403_FORBIDDEN),
)


def to_http_exception(exc: ValueError) -> HTTPException:
    """Translate a use case error into the matching ``HTTPException``."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
