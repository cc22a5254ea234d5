"""Errors raised by use cases and translated to HTTP responses by the API layer."""


class NotFoundError(ValueError):
    """The referenced record does not exist."""


class ConflictError(ValueError):
    """The operation would duplicate an existing record."""


class ForbiddenOperationError(ValueError):
    """The operation is structurally disallowed regardless of the caller."""


__all__ = ["ConflictError", "ForbiddenOperationError", "NotFoundError"]
