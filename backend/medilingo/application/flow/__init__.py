"""
Lookup flow: session state, request tokens and the orchestrator.
"""

from .image_capture import ImageCaptureAdapter
from .lookup_flow import LookupFlow
from .request_token import RequestToken, RequestTokenSource
from .session import (
    Notification,
    NotificationCenter,
    NotificationLevel,
    SessionState,
)

__all__ = [
    "ImageCaptureAdapter",
    "LookupFlow",
    "RequestToken",
    "RequestTokenSource",
    "Notification",
    "NotificationCenter",
    "NotificationLevel",
    "SessionState",
]
