from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MalformedOccurrenceIdError(ValidationError):
    """Raised when a composite occurrence id cannot be split into session and date."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class StoreError(DomainError):
    """Raised when the underlying store fails a read or write.

    The original driver error is kept as ``cause`` (and as ``__cause__`` when
    raised with ``from``).
    """

    def __init__(self, message: str, *, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
