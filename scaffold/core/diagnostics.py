import logging
import traceback

logger = logging.getLogger(__name__)


def format_stack_trace(exc: BaseException) -> str:
    """
    Render the full traceback of an exception, chained causes included.

    Returns an empty string if rendering fails; the failure is logged so the
    original exception is never masked.
    """
    try:
        return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    except Exception:
        logger.exception("Failed to format stack trace for %s", type(exc).__name__)
        return ""
