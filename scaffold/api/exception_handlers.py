"""Global exception handlers that translate security and validation exceptions into ApiRestResult responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from scaffold.api.error_translator import ErrorKind, ErrorTranslator, classify
from scaffold.core.config import settings
from scaffold.core.error_codes import DEFAULT_ERROR_CODES
from scaffold.errors import AccessDeniedError, AuthenticationError

logger = logging.getLogger(__name__)


def _log(request: Request, exc: Exception, kind: ErrorKind) -> None:
    if kind is ErrorKind.GENERIC:
        logger.error(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
    elif kind is ErrorKind.VALIDATION:
        logger.info("Validation failed for %s %s", request.method, request.url.path)
    else:
        logger.warning(
            "%s on %s %s: %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc,
        )


def build_exception_handler(translator: ErrorTranslator):
    """Return a handler that renders any exception through ``translator``."""

    def handle(request: Request, exc: Exception) -> JSONResponse:
        _log(request, exc, classify(exc))
        envelope, status_code = translator.translate(exc)
        return JSONResponse(status_code=status_code, content=envelope.model_dump())

    return handle


def register_exception_handlers(app: FastAPI, translator: ErrorTranslator | None = None) -> None:
    """Register error handlers on the FastAPI app; the fallback catches any other exception."""
    if translator is None:
        translator = ErrorTranslator(
            registry=DEFAULT_ERROR_CODES,
            include_diagnostics=settings.expose_stack_trace,
        )
    handler = build_exception_handler(translator)

    app.add_exception_handler(RequestValidationError, handler)
    app.add_exception_handler(ValidationError, handler)
    app.add_exception_handler(AuthenticationError, handler)
    app.add_exception_handler(AccessDeniedError, handler)
    app.add_exception_handler(Exception, handler)
