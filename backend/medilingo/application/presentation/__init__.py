"""
Presentation

Rendering of session state for the dashboard.
"""

from .tabs import TabPanel, render_tabs

__all__ = ["TabPanel", "render_tabs"]
