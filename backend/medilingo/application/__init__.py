"""
Application Layer

Lookup flow orchestration, application services and presentation.
"""

from .flow import ImageCaptureAdapter, LookupFlow, SessionState
from .services import ImageAnalysisService, PreferenceStore, PromptBuilder
from .presentation import TabPanel, render_tabs

__all__ = [
    "LookupFlow",
    "SessionState",
    "ImageAnalysisService",
    "ImageCaptureAdapter",
    "PreferenceStore",
    "PromptBuilder",
    "TabPanel",
    "render_tabs",
]
