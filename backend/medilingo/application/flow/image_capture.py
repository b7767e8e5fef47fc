"""
Image Capture Adapter

Accepts a photo dropped on the dashboard (or picked from disk), checks it
and hands it to the lookup flow as a base64 data URL.
"""

from typing import List, Optional
import logging

from .lookup_flow import LookupFlow
from ...cross_cutting.error_handling import ErrorHandler
from ...cross_cutting.validation import CapturedFile, validate_captured_files
from ...domain.exceptions import ValidationError
from ...domain.value_objects.image_data import ImageData


UPLOAD_SUCCESS_MESSAGE = "Image successfully uploaded"
UPLOAD_FAILURE_MESSAGE = "Failed to process image"
INVALID_TYPE_MESSAGE = "Invalid file type"


class ImageCaptureAdapter:
    """
    Bridges file capture and the lookup flow.

    Invalid captures produce a notification only: no collaborator is
    called and nothing is raised to the caller.
    """

    def __init__(self, flow: LookupFlow):
        self.flow = flow
        self.session = flow.session
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    async def capture(self, files: List[CapturedFile]) -> bool:
        """
        Validate the captured files and start an image lookup.

        Returns:
            True if the flow displayed a label record for the image
        """
        image = self._accept(files)
        if image is None:
            return False
        return await self.submit(image.to_data_url())

    async def submit(self, image_url: str) -> bool:
        """
        Run the image lookup for an already encoded data URL.

        A capture superseded by a newer action leaves the session alone:
        the newer action owns `is_analyzing` and the notifications.
        """
        token = self.flow.tokens.issue("image")
        self.session.is_analyzing = True
        succeeded = False
        try:
            with ErrorHandler(self.logger, context="capture", suppress=True) as handler:
                succeeded = await self.flow.capture_image(
                    image_url, token=token, notify_vision_errors=False
                )
        finally:
            if self.flow.tokens.is_current(token):
                self.session.is_analyzing = False

        if not self.flow.tokens.is_current(token):
            self.logger.debug(f"Capture {token} superseded, result dropped")
            return False

        # No analysis result means the image itself could not be processed
        if handler.has_error or self.session.image_analysis is None:
            self.session.notifications.error(UPLOAD_FAILURE_MESSAGE)
            return False

        self.session.notifications.success(UPLOAD_SUCCESS_MESSAGE)
        return succeeded

    def _accept(self, files: List[CapturedFile]) -> Optional[ImageData]:
        try:
            captured = validate_captured_files(files)
        except ValidationError as e:
            self.logger.info(f"Rejected capture: {e.message} {e.details}")
            self.session.notifications.error(f"{INVALID_TYPE_MESSAGE}: {e.message}")
            return None

        return ImageData.from_bytes(
            captured.data,
            mime_type=self._normalized_mime(captured.content_type),
            filename=captured.filename,
        )

    @staticmethod
    def _normalized_mime(content_type: Optional[str]) -> str:
        content_type = (content_type or "").lower()
        return "image/jpeg" if content_type == "image/jpg" else content_type
