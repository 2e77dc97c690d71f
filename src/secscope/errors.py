"""Error taxonomy shared by the store, services and API handlers."""


class SecScopeError(Exception):
    """Base class for errors surfaced to SecScope callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SecScopeError):
    """A request or record is missing a required field or holds a bad value."""

    status_code = 400


class NotFoundError(SecScopeError):
    """A referenced scan or record does not exist."""

    status_code = 404


class DependencyError(SecScopeError):
    """An underlying storage operation failed."""

    status_code = 500


class ClassificationFailure(SecScopeError):
    """Raised inside payload classification; never escapes the classifier."""
