"""
Dashboard Session Routes

Drive the lookup flow for the single dashboard session and serve what the
browser renders: session state, information tabs, notifications and the
user's settings.
"""

from typing import List, Optional, Literal
import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel, ConfigDict, Field

from .container import Container, get_container
from ..application.presentation import render_tabs
from ..cross_cutting.validation import CapturedFile
from ..domain.entities.user_settings import (
    AGE_RANGES,
    CLARITY_LEVELS,
    LANGUAGES,
    MEDICAL_CONDITIONS,
    UserSettings,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Session"])


class SearchRequest(BaseModel):
    query: Optional[str] = None
    wait_for_explanation: bool = False


class QueryUpdateRequest(BaseModel):
    text: str = ""


class ImageUrlRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    wait_for_explanation: bool = False


class SexRequest(BaseModel):
    sex: Literal["male", "female"]


def _session_response(container: Container, **extra) -> dict:
    return {**extra, "session": container.session.to_dict()}


# =============================================================================
# Session
# =============================================================================

@router.get("/session")
async def get_session(container: Container = Depends(get_container)):
    return container.session.to_dict()


@router.post("/session/search")
async def search(request: SearchRequest, container: Container = Depends(get_container)):
    """Look up a medicine by name."""
    found = await container.flow.search(request.query)
    if found and request.wait_for_explanation:
        await container.flow.wait_for_pending()
    return _session_response(container, found=found)


@router.post("/session/query")
async def update_query(request: QueryUpdateRequest, container: Container = Depends(get_container)):
    """Mirror the search box; an empty box clears the selection."""
    container.flow.update_search_query(request.text)
    return _session_response(container)


@router.post("/session/clear")
async def clear(container: Container = Depends(get_container)):
    container.flow.clear_search()
    return _session_response(container)


@router.post("/session/image")
async def capture_image(
    files: List[UploadFile] = File(default=[]),
    container: Container = Depends(get_container)
):
    """Upload a package photo (exactly one PNG or JPEG)."""
    captured = [
        CapturedFile(
            filename=upload.filename or "",
            content_type=upload.content_type,
            data=await upload.read(),
        )
        for upload in files
    ]
    found = await container.capture.capture(captured)
    return _session_response(container, found=found)


@router.post("/session/image-url")
async def capture_image_url(request: ImageUrlRequest, container: Container = Depends(get_container)):
    """Submit an already encoded data-URL image."""
    found = await container.capture.submit(request.image_url or "")
    if found and request.wait_for_explanation:
        await container.flow.wait_for_pending()
    return _session_response(container, found=found)


@router.get("/session/tabs")
async def tabs(container: Container = Depends(get_container)):
    session = container.session
    panels = render_tabs(
        session.selected_medicine,
        session.image_analysis,
        session.fda_record,
        session.is_loading,
    )
    return [panel.to_dict() for panel in panels]


@router.get("/session/notifications")
async def notifications(container: Container = Depends(get_container)):
    """Pending notifications; each is returned once."""
    return [n.to_dict() for n in container.session.notifications.drain()]


# =============================================================================
# Settings
# =============================================================================

@router.get("/settings")
async def get_settings(container: Container = Depends(get_container)):
    settings = container.preferences.read()
    return {
        **settings.model_dump(),
        "available_conditions": [c.model_dump() for c in settings.available_conditions()],
    }


@router.put("/settings")
async def put_settings(settings: UserSettings, container: Container = Depends(get_container)):
    container.preferences.write(settings)
    return settings.model_dump()


@router.post("/settings/sex")
async def set_sex(request: SexRequest, container: Container = Depends(get_container)):
    """Change sex; conditions outside the shared list are dropped."""
    settings = container.preferences.read().with_sex(request.sex)
    container.preferences.write(settings)
    return settings.model_dump()


@router.post("/settings/conditions/{condition_id}/toggle")
async def toggle_condition(condition_id: str, container: Container = Depends(get_container)):
    settings = container.preferences.read()
    if condition_id not in [c.id for c in settings.available_conditions()]:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown condition for sex '{settings.sex}': {condition_id}",
        )

    settings = settings.toggle_condition(condition_id)
    container.preferences.write(settings)
    return settings.model_dump()


@router.get("/settings/options")
async def settings_options():
    return {
        "medical_conditions": {
            group: [c.model_dump() for c in conditions]
            for group, conditions in MEDICAL_CONDITIONS.items()
        },
        "age_ranges": [a.model_dump() for a in AGE_RANGES],
        "languages": [lang.model_dump() for lang in LANGUAGES],
        "clarity_levels": [c.model_dump() for c in CLARITY_LEVELS],
    }
