"""
Collaborator Routes

Thin JSON endpoints in front of the three external collaborators:

- POST /api/img-analyze       vision lookup of a data-URL image
- POST /api/confirmMed        confirm a medicine name
- POST /api/fda               label record for a brand name
- POST /api/watsonx (/watson) free-form text generation
"""

from typing import Optional, Union, Dict, Any
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from .container import Container, get_container
from .errors import domain_error_response, missing_field_response
from ..application.services.prompt_builder import PromptBuilder
from ..cross_cutting.error_handling import ErrorHandler


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Collaborators"])


class ImageAnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_url: Optional[str] = Field(default=None, alias="imageUrl")


class ConfirmMedicineRequest(BaseModel):
    medicine: Optional[str] = None


class LabelRequest(BaseModel):
    brand_name: Optional[str] = None


class GenerateRequest(BaseModel):
    prompt: Optional[Union[str, Dict[str, Any]]] = None


@router.post("/img-analyze")
def analyze_image(
    payload: Optional[ImageAnalyzeRequest] = None,
    container: Container = Depends(get_container)
):
    """Identify the medicine shown in an image."""
    if payload is None or not payload.image_url:
        return missing_field_response("Image URL is required")

    with ErrorHandler(logger, context="img-analyze", suppress=True) as handler:
        result = container.image_analysis.analyze(payload.image_url)
    if handler.has_error:
        return domain_error_response(handler.error, "Failed to analyze image")

    return result.to_dict()


@router.post("/confirmMed")
def confirm_medicine(
    payload: Optional[ConfirmMedicineRequest] = None,
    container: Container = Depends(get_container)
):
    """Resolve a medicine name to its canonical brand name."""
    if payload is None or not (payload.medicine or "").strip():
        return missing_field_response("Medicine name is required")

    with ErrorHandler(logger, context="confirmMed", suppress=True) as handler:
        confirmed = container.drug_records.confirm(payload.medicine.strip())
    if handler.has_error:
        return domain_error_response(handler.error, "Failed to confirm medicine")

    return confirmed.to_dict()


@router.post("/fda")
def fetch_label(
    payload: Optional[LabelRequest] = None,
    container: Container = Depends(get_container)
):
    """Full label record for a confirmed brand name."""
    if payload is None or not (payload.brand_name or "").strip():
        return missing_field_response("Brand name is required")

    with ErrorHandler(logger, context="fda", suppress=True) as handler:
        record = container.drug_records.fetch_label(payload.brand_name.strip())
    if handler.has_error:
        return domain_error_response(handler.error, "Failed to fetch drug label")

    return record.to_dict()


@router.post("/watsonx")
@router.post("/watson")
def generate_text(
    payload: Optional[GenerateRequest] = None,
    container: Container = Depends(get_container)
):
    """Generate text from an object-or-string prompt."""
    if payload is None or payload.prompt in (None, "", {}):
        return JSONResponse(
            status_code=400,
            content={"message": "Error: Prompt is required in request body"},
        )

    with ErrorHandler(logger, context="generate", suppress=True) as handler:
        text = container.generator.generate(PromptBuilder.render(payload.prompt))
    if handler.has_error:
        return domain_error_response(handler.error, "Failed to generate text")

    return {"generatedText": text}


@router.get("/health")
async def health(container: Container = Depends(get_container)):
    return {
        "status": "healthy",
        "vision": container.vision.name,
        "drug_records": container.drug_records.name,
        "llm": container.generator.model_name,
        "config": container.config.to_dict(),
    }
