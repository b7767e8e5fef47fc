"""
Application Container

Builds the collaborators, the dashboard session and the lookup flow from
configuration, once per application instance.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from fastapi import Request

from ..application.flow import ImageCaptureAdapter, LookupFlow, SessionState
from ..application.services import ImageAnalysisService, PreferenceStore, PromptBuilder
from ..config.settings import AppConfig
from ..domain.ports import (
    DrugRecordLookupPort,
    KeyValueStoragePort,
    TextGeneratorPort,
    VisionAnalyzerPort,
)
from ..infrastructure.drug_records import DrugRecordLookupFactory
from ..infrastructure.llm import LLMFactory
from ..infrastructure.storage import create_storage
from ..infrastructure.translation import TranslatingTextGenerator
from ..infrastructure.vision import VisionAnalyzerFactory


logger = logging.getLogger(__name__)


@dataclass
class Container:
    """
    Everything the routes need.

    Attributes:
        generator: Text generator used by the raw generation route
        explainer: Generator used by the lookup flow (translates output
            when enabled)
    """

    config: AppConfig
    vision: VisionAnalyzerPort
    drug_records: DrugRecordLookupPort
    generator: TextGeneratorPort
    explainer: TextGeneratorPort
    preferences: PreferenceStore
    image_analysis: ImageAnalysisService
    session: SessionState
    flow: LookupFlow
    capture: ImageCaptureAdapter


def build_container(
    config: AppConfig,
    vision: Optional[VisionAnalyzerPort] = None,
    drug_records: Optional[DrugRecordLookupPort] = None,
    generator: Optional[TextGeneratorPort] = None,
    storage: Optional[KeyValueStoragePort] = None
) -> Container:
    """
    Wire the application.

    Adapters passed in replace the ones the configuration would create.
    """
    prompt_builder = PromptBuilder()

    if vision is None:
        vision = VisionAnalyzerFactory.create_from_config({
            "type": config.vision.type,
            "credentials_json": config.vision.credentials_json,
            "max_labels": config.vision.max_labels,
        })

    if drug_records is None:
        drug_records = DrugRecordLookupFactory.create_from_config({
            "type": config.drug_records.type,
            "base_url": config.drug_records.base_url,
            "api_key": config.drug_records.api_key,
            "timeout": config.drug_records.timeout,
        })

    if generator is None:
        generator = LLMFactory.create_from_config({
            "type": config.llm.type,
            "api_key": config.llm.api_key,
            "project_id": config.llm.project_id,
            "service_url": config.llm.service_url,
            "model": config.llm.model,
            "groq_api_key": config.llm.groq_api_key,
            "groq_model": config.llm.groq_model,
            "max_new_tokens": config.llm.max_new_tokens,
            "repetition_penalty": config.llm.repetition_penalty,
            "system_prompt": prompt_builder.system_prompt,
        })

    explainer = TranslatingTextGenerator(generator) if config.llm.translate_output else generator

    if storage is None:
        storage = create_storage(config.storage.type, config.storage.settings_path)
    preferences = PreferenceStore(storage, key=config.storage.settings_key)

    image_analysis = ImageAnalysisService(vision)
    session = SessionState()
    flow = LookupFlow(
        session=session,
        image_analysis=image_analysis,
        drug_records=drug_records,
        generator=explainer,
        preferences=preferences,
        prompt_builder=prompt_builder,
    )

    logger.info(
        f"Collaborators: vision={vision.name}, drug_records={drug_records.name}, "
        f"llm={generator.model_name}"
    )

    return Container(
        config=config,
        vision=vision,
        drug_records=drug_records,
        generator=generator,
        explainer=explainer,
        preferences=preferences,
        image_analysis=image_analysis,
        session=session,
        flow=flow,
        capture=ImageCaptureAdapter(flow),
    )


def get_container(request: Request) -> Container:
    """FastAPI dependency returning the application's container."""
    return request.app.state.container
