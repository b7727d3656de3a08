"""Error taxonomy shared by services and the API layer.

Every error carries a human-readable ``message`` and the HTTP status it maps to;
``app.main`` renders them as ``{"error": message}``.
"""


class AppError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """Input rejected (bad field value, duplicate stream URL, invalid role...)."""

    status_code = 400


class WeakPasswordError(ValidationError):
    def __init__(self, message: str = "Password must be at least 8 characters") -> None:
        super().__init__(message)


class AuthenticationError(AppError):
    """Caller could not be identified (no token, bad token, bad credentials)."""

    status_code = 401


class InvalidCredentialsError(AuthenticationError):
    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class AuthorizationError(AppError):
    """Caller is known but not allowed to do this."""

    status_code = 403


class AccountLockedError(AuthorizationError):
    def __init__(self, message: str = "Account locked, try again later") -> None:
        super().__init__(message)


class AccountDisabledError(AuthorizationError):
    def __init__(self, message: str = "User disabled") -> None:
        super().__init__(message)


class RateLimitExceededError(AuthorizationError):
    def __init__(
        self, message: str = "Too many login attempts, please try again later."
    ) -> None:
        super().__init__(message)


class NotFoundError(AppError):
    status_code = 404


class InternalError(AppError):
    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
