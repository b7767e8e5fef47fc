"""
LLM Factory

Factory for creating text generator instances.
Supports IBM watsonx.ai (default) and Groq.
"""

from typing import Dict, Any
from enum import Enum

from ...domain.ports.text_generator import TextGeneratorPort
from .dummy_generator import DummyTextGenerator
from .groq_generator import GroqTextGenerator, DEFAULT_GROQ_MODEL
from .watsonx_generator import WatsonxTextGenerator, DEFAULT_MODEL_ID, DEFAULT_SERVICE_URL


class LLMType(Enum):
    """Available LLM implementations."""

    WATSONX = "watsonx"
    GROQ = "groq"
    DUMMY = "dummy"


class LLMFactory:
    """
    Factory for creating text generator instances.

    Usage:
        generator = LLMFactory.create(
            LLMType.WATSONX,
            api_key="...",
            project_id="...",
            system_prompt=SYSTEM_PROMPT
        )
    """

    @staticmethod
    def create(
        llm_type: LLMType,
        **kwargs
    ) -> TextGeneratorPort:
        """
        Create a text generator instance.

        Args:
            llm_type: Type of LLM to create
            **kwargs: Configuration options
                Common:
                - system_prompt: Instruction sent with every prompt
                - max_new_tokens: Maximum response length
                For watsonx:
                - api_key, project_id, service_url, model
                - repetition_penalty
                For Groq:
                - groq_api_key, groq_model

        Returns:
            TextGeneratorPort implementation
        """
        system_prompt = kwargs.get("system_prompt", "")

        if llm_type == LLMType.WATSONX:
            return WatsonxTextGenerator(
                api_key=kwargs.get("api_key"),
                project_id=kwargs.get("project_id"),
                system_prompt=system_prompt,
                model_id=kwargs.get("model", DEFAULT_MODEL_ID),
                service_url=kwargs.get("service_url", DEFAULT_SERVICE_URL),
                max_new_tokens=kwargs.get("max_new_tokens", 1500),
                repetition_penalty=kwargs.get("repetition_penalty", 1.03)
            )

        elif llm_type == LLMType.GROQ:
            return GroqTextGenerator(
                api_key=kwargs.get("groq_api_key"),
                system_prompt=system_prompt,
                model=kwargs.get("groq_model", DEFAULT_GROQ_MODEL),
                max_tokens=kwargs.get("max_new_tokens", 1500)
            )

        elif llm_type == LLMType.DUMMY:
            return DummyTextGenerator()

        else:
            raise ValueError(f"Unknown LLM type: {llm_type}")

    @staticmethod
    def create_from_config(config: Dict[str, Any]) -> TextGeneratorPort:
        """Create generator from configuration dictionary."""
        llm_type_str = config.get("type", "watsonx")

        try:
            llm_type = LLMType(llm_type_str)
        except ValueError:
            if llm_type_str in ("watson", "ibm"):
                llm_type = LLMType.WATSONX
            else:
                raise ValueError(f"Unknown LLM type: {llm_type_str}")

        return LLMFactory.create(llm_type, **config)
