"""
Image Data Value Object

Represents an image payload passed to the vision collaborator.
"""

from dataclasses import dataclass, field
from typing import Optional
import base64
import binascii
import re


# data:<mime>;base64,<payload>
DATA_URL_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(;[^,;]+)*?);base64,(?P<data>.*)$", re.DOTALL)


@dataclass(frozen=True)
class ImageData:
    """
    Immutable value object representing image data.

    Can be constructed from bytes or from a base64 data URL.

    Attributes:
        mime_type: MIME type of the image (e.g., "image/png")
        filename: Original file name, if known
        _bytes: Raw image bytes (internal)
    """

    mime_type: Optional[str] = None
    filename: Optional[str] = None
    _bytes: bytes = field(default=b"", repr=False)

    def __post_init__(self) -> None:
        if not self._bytes:
            raise ValueError("ImageData requires non-empty image bytes")

    @property
    def bytes(self) -> bytes:
        """Raw bytes of the image."""
        return self._bytes

    @property
    def base64_string(self) -> str:
        """Base64 encoded image without the data URL prefix."""
        return base64.b64encode(self._bytes).decode("utf-8")

    def to_data_url(self) -> str:
        """Encode as a ``data:<mime>;base64,...`` URL."""
        mime = self.mime_type or "application/octet-stream"
        return f"data:{mime};base64,{self.base64_string}"

    def __len__(self) -> int:
        return len(self._bytes)

    def __str__(self) -> str:
        return f"ImageData({self.mime_type or 'unknown type'}, {len(self)} bytes)"

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        mime_type: Optional[str] = None,
        filename: Optional[str] = None
    ) -> "ImageData":
        """Create ImageData from raw bytes."""
        return cls(mime_type=mime_type, filename=filename, _bytes=data)

    @classmethod
    def from_data_url(cls, data_url: str) -> "ImageData":
        """
        Create ImageData from a base64 data URL.

        A bare base64 string (no ``data:`` prefix) is accepted as well.

        Raises:
            ValueError: If the URL is empty or its payload is not base64
        """
        if not data_url or not data_url.strip():
            raise ValueError("Image data URL is empty")

        mime_type = None
        payload = data_url.strip()
        match = DATA_URL_PATTERN.match(payload)
        if match:
            mime_type = match.group("mime")
            payload = match.group("data")
        elif payload.startswith("data:"):
            raise ValueError("Image data URL is not base64 encoded")

        try:
            raw = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"Invalid base64 image payload: {e}")

        return cls(mime_type=mime_type, _bytes=raw)
