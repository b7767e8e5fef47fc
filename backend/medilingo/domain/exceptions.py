"""
Domain Exceptions

Custom exceptions for the medicine lookup domain.
Exceptions are grouped by the collaborator or step that raises them.
"""

from typing import Optional, Dict, Any


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Attributes:
        message: Human-readable error message
        details: Additional error details
        is_recoverable: Whether a new user action may succeed
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        is_recoverable: bool = True
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.is_recoverable = is_recoverable

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "is_recoverable": self.is_recoverable,
        }


# =============================================================================
# Validation Exceptions
# =============================================================================

class ValidationError(DomainException):
    """Base exception for input validation errors."""

    status_code = 400


class EmptyQueryError(ValidationError):
    """Search query is empty or whitespace only."""

    def __init__(self, message: str = "Please enter a medicine name", **kwargs):
        super().__init__(message, **kwargs)


class InvalidImageError(ValidationError):
    """Input image is missing, invalid or corrupted."""

    def __init__(
        self,
        message: str = "Invalid or corrupted image",
        **kwargs
    ):
        super().__init__(message, **kwargs)


class UnsupportedImageTypeError(InvalidImageError):
    """Uploaded file is not a PNG or JPEG image."""

    def __init__(self, content_type: Optional[str] = None, **kwargs):
        super().__init__("Please upload a valid image file (PNG, JPG, or JPEG)", **kwargs)
        if content_type:
            self.details["content_type"] = content_type


class TooManyFilesError(InvalidImageError):
    """More than one file was captured at once."""

    def __init__(self, count: int, **kwargs):
        super().__init__("Please upload a single image", **kwargs)
        self.details["file_count"] = count


# =============================================================================
# Upstream (collaborator) Exceptions
# =============================================================================

class UpstreamError(DomainException):
    """Base exception for failures of an external collaborator."""


class MalformedUpstreamResponseError(UpstreamError):
    """A collaborator answered with a response of unexpected shape."""

    def __init__(
        self,
        collaborator: str,
        reason: str,
        **kwargs
    ):
        message = f"Malformed response from {collaborator}: {reason}"
        super().__init__(message, **kwargs)
        self.details["collaborator"] = collaborator
        self.details["reason"] = reason


# Vision

class VisionAnalysisError(UpstreamError):
    """Vision collaborator failed to analyze the image."""

    def __init__(self, message: str = "Failed to analyze image", **kwargs):
        super().__init__(message, **kwargs)


class VisionConfigurationError(VisionAnalysisError):
    """Vision client could not be created (missing or bad credentials)."""

    def __init__(self, message: str = "Vision service is not configured", **kwargs):
        super().__init__(message, is_recoverable=False, **kwargs)


# Drug records

class DrugRecordLookupError(UpstreamError):
    """Drug-record collaborator failed."""

    def __init__(self, message: str = "Drug record lookup failed", **kwargs):
        super().__init__(message, **kwargs)


class MedicineNotFoundError(DrugRecordLookupError):
    """No drug label matches the requested name."""

    status_code = 404

    def __init__(self, name: str, message: Optional[str] = None, **kwargs):
        message = message or f"No medicine found matching '{name}'"
        super().__init__(message, **kwargs)
        self.details["name"] = name


# Text generation

class TextGenerationError(UpstreamError):
    """Text-generation collaborator failed."""

    def __init__(self, message: str = "Text generation failed", **kwargs):
        super().__init__(message, **kwargs)


class LLMConnectionError(TextGenerationError):
    """Failed to connect to or authenticate with the LLM service."""

    def __init__(
        self,
        message: str = "Failed to connect to LLM service",
        provider: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if provider:
            self.details["provider"] = provider
