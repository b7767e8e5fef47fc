"""
HTTP API

FastAPI routers and application wiring.
"""

from .container import Container, build_container, get_container
from .routes import router as collaborator_router
from .session_router import router as session_router

__all__ = [
    "Container",
    "build_container",
    "get_container",
    "collaborator_router",
    "session_router",
]
