"""Security exceptions raised while a request is authenticated or authorized."""


class AuthenticationError(Exception):
    """Base exception for failed authentication attempts."""

    default_message = "Authentication failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class BadCredentialsError(AuthenticationError):
    """Raised when the supplied password does not match."""

    default_message = "Bad credentials"


class UsernameNotFoundError(AuthenticationError):
    """Raised when no account exists for the supplied username."""

    default_message = "User not found"


class AccountStatusError(AuthenticationError):
    """Base exception for accounts that exist but may not sign in."""

    pass


class LockedError(AccountStatusError):
    """Raised when the account has been locked."""

    default_message = "User account is locked"


class DisabledError(AccountStatusError):
    """Raised when the account has been disabled."""

    default_message = "User is disabled"


class HaveNotAuthorityError(AuthenticationError):
    """Raised when an account has no authority granted at all."""

    default_message = "User has no authority"


class InsufficientAuthenticationError(AuthenticationError):
    """Raised when the request does not carry trusted enough credentials."""

    default_message = "Full authentication is required to access this resource"


class InternalAuthenticationServiceError(AuthenticationError):
    """
    Raised when the authentication backend itself fails.

    The underlying failure is chained as ``__cause__``::

        raise InternalAuthenticationServiceError() from DisabledError()
    """

    default_message = "Authentication service failure"


class AccessDeniedError(Exception):
    """Raised when an authenticated principal lacks the required authority."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "Access is denied")
