"""
LLM (Text Generation) Adapters

Implementations of TextGeneratorPort for explaining medicine labels.
"""

from .watsonx_generator import WatsonxTextGenerator
from .groq_generator import GroqTextGenerator
from .dummy_generator import DummyTextGenerator
from .factory import LLMFactory, LLMType

__all__ = [
    "WatsonxTextGenerator",
    "GroqTextGenerator",
    "DummyTextGenerator",
    "LLMFactory",
    "LLMType",
]
