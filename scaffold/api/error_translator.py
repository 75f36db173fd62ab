"""Translate caught exceptions into a uniform ApiRestResult envelope."""

import logging
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, NamedTuple

from fastapi import status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from scaffold.core.diagnostics import format_stack_trace
from scaffold.core.error_codes import DEFAULT_ERROR_CODES, ErrorCodeRegistry, ErrorKey
from scaffold.errors import (
    AccessDeniedError,
    BadCredentialsError,
    DisabledError,
    HaveNotAuthorityError,
    InsufficientAuthenticationError,
    InternalAuthenticationServiceError,
    LockedError,
    UsernameNotFoundError,
)
from scaffold.schemas.result import ApiRestResult, FieldError

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","

# Location prefix FastAPI adds in front of a request field path.
_REQUEST_SECTIONS = {"body", "query", "path", "header", "cookie"}


class ErrorKind(str, Enum):
    GENERIC = "generic"
    VALIDATION = "validation"
    BAD_CREDENTIALS = "bad_credentials"
    USERNAME_NOT_FOUND = "username_not_found"
    LOCKED = "locked"
    INSUFFICIENT_AUTHENTICATION = "insufficient_authentication"
    ACCESS_DENIED = "access_denied"
    AUTH_SERVICE_NO_AUTHORITY = "auth_service_no_authority"
    AUTH_SERVICE_DISABLED = "auth_service_disabled"
    AUTH_SERVICE_OTHER = "auth_service_other"


class TranslatedError(NamedTuple):
    envelope: ApiRestResult
    status_code: int


def classify(exc: BaseException) -> ErrorKind:
    """Return the most specific ErrorKind for ``exc``; unknown types are GENERIC."""
    if isinstance(exc, (RequestValidationError, ValidationError)):
        return ErrorKind.VALIDATION
    if isinstance(exc, BadCredentialsError):
        return ErrorKind.BAD_CREDENTIALS
    if isinstance(exc, UsernameNotFoundError):
        return ErrorKind.USERNAME_NOT_FOUND
    if isinstance(exc, LockedError):
        return ErrorKind.LOCKED
    if isinstance(exc, InsufficientAuthenticationError):
        return ErrorKind.INSUFFICIENT_AUTHENTICATION
    if isinstance(exc, AccessDeniedError):
        return ErrorKind.ACCESS_DENIED
    if isinstance(exc, InternalAuthenticationServiceError):
        if isinstance(exc.__cause__, HaveNotAuthorityError):
            return ErrorKind.AUTH_SERVICE_NO_AUTHORITY
        if isinstance(exc.__cause__, DisabledError):
            return ErrorKind.AUTH_SERVICE_DISABLED
        return ErrorKind.AUTH_SERVICE_OTHER
    return ErrorKind.GENERIC


def _field_name(location: Sequence[Any], from_request: bool) -> str:
    parts = [str(part) for part in location]
    if from_request and parts and parts[0] in _REQUEST_SECTIONS:
        parts = parts[1:]
    if parts:
        return parts[-1]
    return "request"


def field_errors(exc: RequestValidationError | ValidationError) -> list[FieldError]:
    """Collect field errors from a validation exception, preserving their order."""
    from_request = isinstance(exc, RequestValidationError)
    return [
        FieldError(field=_field_name(error.get("loc", ()), from_request), message=str(error.get("msg", "")))
        for error in exc.errors()
    ]


def _message(exc: BaseException) -> str:
    try:
        return str(exc)
    except Exception:
        logger.exception("Failed to render message for %s", type(exc).__name__)
        return type(exc).__name__


def join_field_messages(errors: Iterable[FieldError]) -> str:
    """Join field error messages with commas; an empty sequence gives an empty string."""
    buffer = "".join(error.message + FIELD_SEPARATOR for error in errors)
    return buffer[: -len(FIELD_SEPARATOR)] if buffer else ""


class ErrorTranslator:
    """
    Map an exception to exactly one ApiRestResult and an HTTP status code.

    Holds only read-only configuration, so one instance can be shared by
    concurrent requests.

    Args:
        registry: Error codes and messages looked up by ErrorKey.
        include_diagnostics: When True, the stack trace text of the
            exception is returned in ``result``.
    """

    def __init__(
        self,
        registry: ErrorCodeRegistry = DEFAULT_ERROR_CODES,
        include_diagnostics: bool = False,
    ):
        self.registry = registry
        self.include_diagnostics = include_diagnostics
        self._builders = {
            ErrorKind.GENERIC: self._generic,
            ErrorKind.VALIDATION: self._validation,
            ErrorKind.BAD_CREDENTIALS: self._registered(ErrorKey.BAD_CREDENTIALS),
            ErrorKind.USERNAME_NOT_FOUND: self._registered(ErrorKey.USER_NOT_FOUND),
            ErrorKind.LOCKED: self._registered(ErrorKey.LOCKED),
            ErrorKind.INSUFFICIENT_AUTHENTICATION: self._http(status.HTTP_401_UNAUTHORIZED),
            ErrorKind.ACCESS_DENIED: self._http(status.HTTP_403_FORBIDDEN),
            ErrorKind.AUTH_SERVICE_NO_AUTHORITY: self._registered(ErrorKey.NO_AUTHORITY),
            ErrorKind.AUTH_SERVICE_DISABLED: self._registered(ErrorKey.DISABLED),
            ErrorKind.AUTH_SERVICE_OTHER: self._registered(ErrorKey.AUTH_SERVICE),
        }

    def translate(self, exc: BaseException) -> TranslatedError:
        return self._builders[classify(exc)](exc)

    def diagnostics(self, exc: BaseException) -> str | None:
        if not self.include_diagnostics:
            return None
        return format_stack_trace(exc)

    def _generic(self, exc: BaseException) -> TranslatedError:
        entry = self.registry.lookup(ErrorKey.SYSTEM)
        envelope = ApiRestResult.err(entry.message, entry.code, self.diagnostics(exc))
        return TranslatedError(envelope, status.HTTP_500_INTERNAL_SERVER_ERROR)

    def _validation(self, exc: BaseException) -> TranslatedError:
        entry = self.registry.lookup(ErrorKey.VALIDATION)
        message = join_field_messages(field_errors(exc))
        return TranslatedError(ApiRestResult.err(message, entry.code), status.HTTP_200_OK)

    def _registered(self, key: ErrorKey):
        def build(exc: BaseException) -> TranslatedError:
            entry = self.registry.lookup(key)
            envelope = ApiRestResult.err(entry.message, entry.code, self.diagnostics(exc))
            return TranslatedError(envelope, status.HTTP_200_OK)

        return build

    def _http(self, status_code: int):
        def build(exc: BaseException) -> TranslatedError:
            envelope = ApiRestResult.err(_message(exc), str(status_code), self.diagnostics(exc))
            return TranslatedError(envelope, status_code)

        return build
