"""
Application Configuration

Settings and configuration management for the MediLingo+ backend.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import os


@dataclass
class VisionConfig:
    """Vision collaborator configuration."""

    type: str = "google"  # google, dummy
    credentials_json: Optional[str] = None  # Service account JSON (string)
    max_labels: int = 5


@dataclass
class DrugRecordConfig:
    """Drug-record (openFDA) collaborator configuration."""

    type: str = "openfda"  # openfda, dummy
    base_url: str = "https://api.fda.gov/drug/label.json"
    api_key: Optional[str] = None
    timeout: float = 30.0


@dataclass
class LLMConfig:
    """Text-generation collaborator configuration."""

    type: str = "watsonx"  # watsonx, groq, dummy
    model: str = "meta-llama/llama-3-405b-instruct"
    api_key: Optional[str] = None
    project_id: Optional[str] = None
    service_url: str = "https://us-south.ml.cloud.ibm.com"
    groq_api_key: Optional[str] = None
    groq_model: str = "llama-3.3-70b-versatile"
    max_new_tokens: int = 1500
    repetition_penalty: float = 1.03
    translate_output: bool = True


@dataclass
class StorageConfig:
    """Preference storage configuration."""

    type: str = "file"  # file, memory
    settings_path: str = "./data/user_settings.json"
    settings_key: str = "userSettings"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    log_file: Optional[str] = None
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


@dataclass
class AppConfig:
    """
    Main application configuration.

    Aggregates all component configurations.
    """

    vision: VisionConfig = field(default_factory=VisionConfig)
    drug_records: DrugRecordConfig = field(default_factory=DrugRecordConfig)
    llm: LLMConfig = field(default_factory=LLMConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Create configuration from environment variables.

        Environment variables:
            GOOGLE_CLOUD_STORAGE_KEY_FILE: Vision service account JSON
            OPENFDA_API_KEY: Optional openFDA API key
            WATSON_API_KEY / WATSON_PROJECT_ID / WATSON_URL: watsonx.ai access
            GROQ_API_KEY / GROQ_MODEL: Groq access (alternative LLM)
            MEDILINGO_VISION_PROVIDER: google/dummy
            MEDILINGO_DRUG_RECORD_PROVIDER: openfda/dummy
            MEDILINGO_LLM_PROVIDER: watsonx/groq/dummy
            MEDILINGO_SETTINGS_PATH: Preference file path
            MEDILINGO_HTTP_TIMEOUT: openFDA request timeout (seconds)
            MEDILINGO_LOG_LEVEL: Logging level
            MEDILINGO_LOG_FILE: Optional log file
        """
        config = cls()

        # Vision
        if provider := os.getenv("MEDILINGO_VISION_PROVIDER"):
            config.vision.type = provider
        if credentials := os.getenv("GOOGLE_CLOUD_STORAGE_KEY_FILE"):
            config.vision.credentials_json = credentials

        # Drug records
        if provider := os.getenv("MEDILINGO_DRUG_RECORD_PROVIDER"):
            config.drug_records.type = provider
        if api_key := os.getenv("OPENFDA_API_KEY"):
            config.drug_records.api_key = api_key
        if timeout := os.getenv("MEDILINGO_HTTP_TIMEOUT"):
            config.drug_records.timeout = float(timeout)

        # LLM
        if provider := os.getenv("MEDILINGO_LLM_PROVIDER"):
            config.llm.type = provider
        if api_key := os.getenv("WATSON_API_KEY"):
            config.llm.api_key = api_key
        if project_id := os.getenv("WATSON_PROJECT_ID"):
            config.llm.project_id = project_id
        if url := os.getenv("WATSON_URL"):
            config.llm.service_url = url
        if model := os.getenv("WATSON_MODEL_ID"):
            config.llm.model = model
        if groq_key := os.getenv("GROQ_API_KEY"):
            config.llm.groq_api_key = groq_key
        if groq_model := os.getenv("GROQ_MODEL"):
            config.llm.groq_model = groq_model

        # Storage
        if settings_path := os.getenv("MEDILINGO_SETTINGS_PATH"):
            config.storage.settings_path = settings_path

        # Logging
        if log_level := os.getenv("MEDILINGO_LOG_LEVEL"):
            config.logging.level = log_level
        if log_file := os.getenv("MEDILINGO_LOG_FILE"):
            config.logging.log_file = log_file

        return config

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from dictionary."""
        config = cls()

        for section in ("vision", "drug_records", "llm", "storage", "logging"):
            if section in data:
                target = getattr(config, section)
                for key, value in data[section].items():
                    if hasattr(target, key):
                        setattr(target, key, value)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary (secrets omitted)."""
        return {
            "vision": {
                "type": self.vision.type,
                "credentials_configured": bool(self.vision.credentials_json),
                "max_labels": self.vision.max_labels,
            },
            "drug_records": {
                "type": self.drug_records.type,
                "base_url": self.drug_records.base_url,
                "timeout": self.drug_records.timeout,
            },
            "llm": {
                "type": self.llm.type,
                "model": self.llm.model,
                "service_url": self.llm.service_url,
                "max_new_tokens": self.llm.max_new_tokens,
                "translate_output": self.llm.translate_output,
            },
            "storage": {
                "type": self.storage.type,
                "settings_path": self.storage.settings_path,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
            },
        }


def get_default_config() -> AppConfig:
    """Get default application configuration."""
    return AppConfig.from_env()
