from __future__ import annotations


class LocaleSyncError(Exception):
    """Base error for the locale sync server."""


class ValidationError(LocaleSyncError):
    """Raised when a file pattern, config entry or user input is invalid."""


class MissingAttributeError(ValidationError):
    """Raised when a pattern needs a locale attribute that is empty."""

    def __init__(self, placeholder: str, pattern: str) -> None:
        super().__init__(f"{placeholder} is required by pattern '{pattern}' but the locale has no value for it")
        self.placeholder = placeholder
        self.pattern = pattern


class AccessDeniedError(LocaleSyncError):
    """Raised when a generated path would land outside the project root."""


class ExternalServiceError(LocaleSyncError):
    """Raised when the Phrase API fails."""


class NotFoundError(LocaleSyncError):
    """Raised when no locale files or remote locales could be found."""


class OperationTimeoutError(LocaleSyncError):
    """Raised when a pull exceeds its overall time budget."""
