"""Exception types raised by the application."""

from __future__ import annotations


class AppError(Exception):
    """Base class for application errors; carries a code and a message."""

    code = "AppError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class AuthenticationError(AppError):
    """The caller could not be authenticated."""

    code = "AuthenticationError"


class AuthorizationError(AppError):
    """The caller is authenticated but not allowed to do this."""

    code = "AuthorizationError"

    def __init__(self, message: str = "access denied") -> None:
        super().__init__(message)


class AccessTokenNotFoundError(AppError):
    """The supplied access token is unknown."""

    code = "AccessTokenNotFoundError"

    def __init__(self, message: str = "access token not found") -> None:
        super().__init__(message)


class DatabaseError(AppError):
    """The database reported a failure."""

    code = "DatabaseError"


class NotFoundError(AppError):
    """An entity looked up by key does not exist."""

    code = "NotFoundError"

    def __init__(self, entity: str, key: str) -> None:
        super().__init__(f"{entity} with key {key} not found.")
        self.entity = entity
        self.key = key


class RecordNotFoundError(AppError):
    """The database returned no record for a query."""

    code = "RecordNotFoundError"


class StorageError(AppError):
    """The file storage backend reported a failure."""

    code = "StorageError"


class ValidationError(AppError):
    """A request failed validation."""

    code = "ValidationError"