class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDateError(ValidationError):
    """Raised when a date is missing or cannot be parsed."""


class AuthenticationError(DomainError):
    """Raised when the API rejects our bearer token (HTTP 401)."""


class FetchError(DomainError):
    """Raised when an API call fails; the message is shown to the user as-is."""
