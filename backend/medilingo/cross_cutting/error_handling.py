"""
Error Handling

Centralized error handling utilities.
"""

from typing import Optional, Dict, Any
import logging
import traceback

from ..domain.exceptions import DomainException


logger = logging.getLogger(__name__)


class ErrorHandler:
    """
    Context manager for error handling.

    Usage:
        with ErrorHandler(logger, context="confirm", suppress=True) as handler:
            # do something risky
        if handler.has_error:
            # report handler.user_message
    """

    def __init__(
        self,
        logger: logging.Logger,
        context: str = "",
        suppress: bool = False,
        fallback_message: str = "Something went wrong"
    ):
        """
        Initialize error handler.

        Args:
            logger: Logger for error messages
            context: Context string for error messages
            suppress: Whether to suppress exceptions
            fallback_message: User-facing message for non-domain errors
        """
        self.logger = logger
        self.context = context
        self.suppress = suppress
        self.fallback_message = fallback_message
        self.error: Optional[Exception] = None
        self.error_message: Optional[str] = None

    def __enter__(self) -> "ErrorHandler":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_val is None:
            return False

        # Cancellation is not an error of the step
        if not isinstance(exc_val, Exception):
            return False

        self.error = exc_val
        self.error_message = str(exc_val)

        if self.context:
            self.logger.error(f"[{self.context}] {exc_val}")
        else:
            self.logger.error(str(exc_val))

        if isinstance(exc_val, DomainException):
            self.logger.debug(f"Details: {exc_val.details}")
        else:
            self.logger.debug(traceback.format_exc())

        return self.suppress

    @property
    def has_error(self) -> bool:
        """Check if an error occurred."""
        return self.error is not None

    @property
    def is_recoverable(self) -> bool:
        """Check if the error is recoverable."""
        if self.error is None:
            return True
        if isinstance(self.error, DomainException):
            return self.error.is_recoverable
        return False

    @property
    def user_message(self) -> str:
        """Message safe to show in a notification."""
        if isinstance(self.error, DomainException):
            return self.error.message
        return self.fallback_message


def error_payload(error: Exception, summary: str) -> Dict[str, Any]:
    """
    Build the JSON error body returned by the API routes.

    Args:
        error: The caught exception
        summary: Short description of the failed operation

    Returns:
        ``{"error": summary, "details": message, "type": class name}``
    """
    if isinstance(error, DomainException):
        details = error.message
    else:
        details = str(error) or "Unknown error"
    return {
        "error": summary,
        "details": details,
        "type": error.__class__.__name__,
    }


def status_code_for(error: Exception) -> int:
    """HTTP status for an exception (500 for anything non-domain)."""
    if isinstance(error, DomainException):
        return error.status_code
    return 500
