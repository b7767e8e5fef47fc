"""
Cross-Cutting Concerns

Logging, error handling and input validation shared by all layers.
"""

from .logging import setup_logging, get_logger, FlowLogger
from .error_handling import ErrorHandler, error_payload, status_code_for
from .validation import CapturedFile, validate_captured_files, normalize_query

__all__ = [
    "setup_logging",
    "get_logger",
    "FlowLogger",
    "ErrorHandler",
    "error_payload",
    "status_code_for",
    "CapturedFile",
    "validate_captured_files",
    "normalize_query",
]
