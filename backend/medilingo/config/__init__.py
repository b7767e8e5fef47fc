"""
Configuration

Application settings for the MediLingo+ backend.
"""

from .settings import (
    AppConfig,
    VisionConfig,
    DrugRecordConfig,
    LLMConfig,
    StorageConfig,
    LoggingConfig,
    get_default_config,
)

__all__ = [
    "AppConfig",
    "VisionConfig",
    "DrugRecordConfig",
    "LLMConfig",
    "StorageConfig",
    "LoggingConfig",
    "get_default_config",
]
