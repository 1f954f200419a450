from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested record or attachment is not found."""

    def __init__(self, message: str = "Document not found") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""


class MissingRequiredDataError(UserError):
    """Raised when a document is requested without its mandatory data."""

    def __init__(self, message: str = "Missing required data") -> None:
        super().__init__(message)


class StorageError(UserError):
    """Raised when the filesystem refuses an attachment operation (permissions, disk, path)."""


class AuthenticationError(UserError):
    """Raised when a request does not carry the shell token."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)
