class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when there is no logged-in teacher for an action."""


class StoreError(DomainError):
    """Raised when a backing-store call fails (network, constraint, driver)."""


class NotFoundError(StoreError):
    """Raised when a row is missing or not owned by the current session."""


class StaleSelectionError(DomainError):
    """Raised when a request targets a class/date selection that has been replaced."""
