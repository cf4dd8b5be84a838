"""Application error taxonomy.

Services raise these; the handlers registered in ``app.main`` turn them into
the standard error envelope with the matching status code.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An error occurred"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ConflictError(AppError):
    """Duplicate unique value (email, phone)."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists"


class InvalidOrExpiredTokenError(ValidationError):
    default_message = "Invalid or expired token"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "You are not logged in. Please log in to get access."


class InvalidCredentialsError(AuthenticationError):
    default_message = "Invalid email or password"


class InvalidTokenError(AuthenticationError):
    default_message = "Invalid token. Please log in again."


class TokenExpiredError(InvalidTokenError):
    default_message = "Your token has expired. Please log in again."


class AuthorizationError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You do not have permission to perform this action"


class AccountDeletedError(AuthorizationError):
    default_message = "This account has been deleted"


class AccountSuspendedError(AuthorizationError):
    default_message = "This account has been suspended. Please contact support."


class AccountInactiveError(AuthorizationError):
    default_message = "This account is inactive. Please contact support."


class EmailNotVerifiedError(AuthorizationError):
    default_message = "Please verify your email address before logging in"


class ExternalServiceError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "External service failure"
