"""Custom exception classes for the application."""


class AppError(Exception):
    """Base application error class."""

    def __init__(self, message):
        """Initialize the error."""
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Raised when user input fails validation."""

    def __init__(self, message="Validation failed."):
        """Initialize the error."""
        super().__init__(message)


class ForbiddenError(AppError):
    """Raised when an authenticated user may not perform an action."""

    def __init__(self, message="You are not allowed to do that."):
        """Initialize the error."""
        super().__init__(message)


class NotFoundError(AppError):
    """Raised when a resource is not found."""

    def __init__(self, message="Resource not found."):
        """Initialize the error."""
        super().__init__(message)


class ConflictError(AppError):
    """Raised when the current state already satisfies the request."""

    def __init__(self, message="Resource already exists."):
        """Initialize the error."""
        super().__init__(message)


class InternalError(AppError):
    """Raised when the store or a collaborator fails."""

    def __init__(self, message="Internal Server Error"):
        """Initialize the error."""
        super().__init__(message)


# Looked up along the exception's MRO, so subclasses inherit their parent's code.
ERROR_STATUS_CODES = {
    ValidationError: 400,
    ForbiddenError: 403,
    NotFoundError: 404,
    ConflictError: 400,
    InternalError: 500,
    AppError: 400,
}


def status_code_for(error):
    """Return the HTTP status code for an application error."""
    for error_class in type(error).__mro__:
        if error_class in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_class]
    return 500
