"""
Image capture: file validation and hand-off to the lookup flow.
"""

import asyncio

import pytest

from medilingo.cross_cutting.validation import CapturedFile
from medilingo.domain.value_objects.image_data import ImageData
from medilingo.application.flow.session import NotificationLevel

from fakes import FakeVision, make_image_bytes


def messages(session, level=None):
    return [
        n.message for n in session.notifications.peek()
        if level is None or n.level == level
    ]


class TestAcceptedCaptures:

    @pytest.mark.parametrize("content_type,fmt", [
        ("image/png", "PNG"),
        ("image/jpeg", "JPEG"),
        ("image/jpg", "JPEG"),
    ])
    def test_png_and_jpeg_reach_the_vision_service(self, capture, session, vision, content_type, fmt):
        files = [CapturedFile("pack.img", content_type, make_image_bytes(fmt))]

        found = asyncio.run(capture.capture(files))

        assert found is True
        assert vision.calls == 1
        assert session.image_analysis.medicine_name == "Tylenol"
        assert session.selected_medicine == "Tylenol"
        assert "Image successfully uploaded" in messages(session, NotificationLevel.SUCCESS)
        assert session.is_analyzing is False

    def test_analyzing_flag_set_during_flow_call(self, capture, session, flow, monkeypatch):
        seen = []

        async def fake_capture_image(image_url, token=None, notify_vision_errors=True):
            seen.append((session.is_analyzing, image_url))
            return False

        monkeypatch.setattr(flow, "capture_image", fake_capture_image)
        asyncio.run(capture.capture([CapturedFile("a.png", "image/png", make_image_bytes("PNG"))]))

        assert seen[0][0] is True
        assert seen[0][1].startswith("data:image/png;base64,")
        assert session.is_analyzing is False

    def test_data_url_round_trips_image_bytes(self):
        data = make_image_bytes("PNG")
        url = ImageData.from_bytes(data, mime_type="image/png").to_data_url()

        parsed = ImageData.from_data_url(url)

        assert parsed.bytes == data
        assert parsed.mime_type == "image/png"


class TestRejectedCaptures:

    def _assert_rejected(self, capture, session, vision, files):
        found = asyncio.run(capture.capture(files))

        assert found is False
        assert vision.calls == 0
        assert session.is_analyzing is False
        errors = messages(session, NotificationLevel.ERROR)
        assert len(errors) == 1
        assert errors[0].startswith("Invalid file type")

    def test_gif_rejected(self, capture, session, vision):
        files = [CapturedFile("anim.gif", "image/gif", make_image_bytes("GIF"))]
        self._assert_rejected(capture, session, vision, files)
        assert "Please upload a valid image file (PNG, JPG, or JPEG)" in messages(session)[0]

    def test_two_files_rejected(self, capture, session, vision):
        png = make_image_bytes("PNG")
        files = [CapturedFile("a.png", "image/png", png), CapturedFile("b.png", "image/png", png)]
        self._assert_rejected(capture, session, vision, files)

    def test_no_files_rejected(self, capture, session, vision):
        self._assert_rejected(capture, session, vision, [])

    def test_content_not_matching_type_rejected(self, capture, session, vision):
        files = [CapturedFile("fake.png", "image/png", make_image_bytes("JPEG"))]
        self._assert_rejected(capture, session, vision, files)

    def test_corrupted_bytes_rejected(self, capture, session, vision):
        files = [CapturedFile("broken.png", "image/png", b"not an image at all")]
        self._assert_rejected(capture, session, vision, files)

    def test_oversized_pixel_count_rejected(self, capture, session, vision, monkeypatch):
        from PIL import Image

        # 8x8 exceeds twice this limit, so Pillow refuses to open it
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
        files = [CapturedFile("huge.png", "image/png", make_image_bytes("PNG"))]
        self._assert_rejected(capture, session, vision, files)


def test_vision_failure_reports_failed_upload(session, flow):
    from medilingo.application.flow import ImageCaptureAdapter

    flow.image_analysis.analyzer = FakeVision(fail=True)
    capture = ImageCaptureAdapter(flow)

    found = asyncio.run(capture.capture([CapturedFile("a.png", "image/png", make_image_bytes("PNG"))]))

    assert found is False
    errors = messages(session, NotificationLevel.ERROR)
    assert "Failed to process image" in errors
    assert "Image successfully uploaded" not in messages(session)
    assert len(errors) == 1


def test_missing_image_data_reports_one_failure(capture, session, vision):
    found = asyncio.run(capture.submit(""))

    assert found is False
    assert vision.calls == 0
    assert messages(session, NotificationLevel.ERROR) == ["Failed to process image"]
    assert session.is_analyzing is False
