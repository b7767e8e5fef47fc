"""
Shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from medilingo.application.flow import ImageCaptureAdapter, LookupFlow, SessionState
from medilingo.application.services import ImageAnalysisService, PreferenceStore
from medilingo.config.settings import AppConfig
from medilingo.infrastructure.storage import InMemoryStorage
from medilingo.main import create_app

from fakes import FakeDrugRecords, FakeGenerator, FakeVision


@pytest.fixture
def vision():
    return FakeVision()


@pytest.fixture
def drug_records():
    return FakeDrugRecords()


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def preferences(storage):
    return PreferenceStore(storage)


@pytest.fixture
def session():
    return SessionState()


@pytest.fixture
def flow(session, vision, drug_records, generator, preferences):
    return LookupFlow(
        session=session,
        image_analysis=ImageAnalysisService(vision),
        drug_records=drug_records,
        generator=generator,
        preferences=preferences,
    )


@pytest.fixture
def capture(flow):
    return ImageCaptureAdapter(flow)


@pytest.fixture
def test_config():
    return AppConfig.from_dict({
        "vision": {"type": "dummy"},
        "drug_records": {"type": "dummy"},
        "llm": {"type": "dummy", "translate_output": False},
        "storage": {"type": "memory"},
        "logging": {"level": "WARNING"},
    })


@pytest.fixture
def client(test_config, vision, drug_records, generator, storage):
    app = create_app(
        test_config,
        vision=vision,
        drug_records=drug_records,
        generator=generator,
        storage=storage,
    )
    with TestClient(app) as test_client:
        yield test_client
