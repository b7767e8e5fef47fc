"""
Input Validation

Validation utilities for user input: captured image files and search text.
"""

from dataclasses import dataclass
from io import BytesIO
from typing import List, Optional

from PIL import Image as PILImage, UnidentifiedImageError

from ..domain.exceptions import (
    EmptyQueryError,
    InvalidImageError,
    TooManyFilesError,
    UnsupportedImageTypeError,
)


# Accepted MIME types mapped to the Pillow format they must decode as
ACCEPTED_IMAGE_TYPES = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
    "image/jpg": "JPEG",
}

# Maximum file size (10 MB)
MAX_FILE_SIZE = 10 * 1024 * 1024


@dataclass(frozen=True)
class CapturedFile:
    """A file handed over by drag-drop or the file picker."""

    filename: str
    content_type: Optional[str]
    data: bytes


def validate_captured_files(files: List[CapturedFile]) -> CapturedFile:
    """
    Validate a capture: exactly one PNG or JPEG file.

    Args:
        files: Files received in one drop / picker selection

    Returns:
        The single accepted file

    Raises:
        InvalidImageError: No file, empty file or undecodable content
        TooManyFilesError: More than one file
        UnsupportedImageTypeError: MIME type is not PNG or JPEG
    """
    if not files:
        raise InvalidImageError("No image file provided")
    if len(files) > 1:
        raise TooManyFilesError(len(files))

    captured = files[0]
    content_type = (captured.content_type or "").lower()
    if content_type not in ACCEPTED_IMAGE_TYPES:
        raise UnsupportedImageTypeError(content_type or None)

    validate_image_bytes(captured.data, ACCEPTED_IMAGE_TYPES[content_type])
    return captured


def validate_image_bytes(data: bytes, expected_format: Optional[str] = None) -> None:
    """
    Check that bytes decode as an image of the expected format.

    Raises:
        InvalidImageError: Empty, oversized, corrupted or mismatched data
    """
    if not data:
        raise InvalidImageError("Image file is empty")
    if len(data) > MAX_FILE_SIZE:
        raise InvalidImageError(
            f"Image size exceeds maximum ({MAX_FILE_SIZE / 1024 / 1024:.1f} MB)"
        )

    try:
        pil_image = PILImage.open(BytesIO(data))
        pil_image.verify()
    except (UnidentifiedImageError, PILImage.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise InvalidImageError(f"Invalid image data: {e}")

    if expected_format and pil_image.format != expected_format:
        raise UnsupportedImageTypeError(
            details={"detected_format": pil_image.format}
        )


def normalize_query(query: Optional[str]) -> str:
    """
    Strip a search query.

    Raises:
        EmptyQueryError: If nothing but whitespace remains
    """
    cleaned = (query or "").strip()
    if not cleaned:
        raise EmptyQueryError()
    return cleaned
