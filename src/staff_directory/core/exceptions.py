class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or the session is missing."""


class AuthorizationError(DomainError):
    """Raised when an admin lacks permission for an action.

    Used for both the local capability check and a denial reported by the
    remote script, so the two read the same to the user.
    """


class RemoteServiceError(DomainError):
    """Raised when the remote script fails or returns an unusable response."""
