"""
Groq Text Generator

Alternative explanation generator using the Groq chat completions API.
"""

from typing import Optional, Dict, Any
import logging
import time

from ...domain.ports.text_generator import TextGeneratorPort
from ...domain.exceptions import (
    LLMConnectionError,
    MalformedUpstreamResponseError,
    TextGenerationError,
)


logger = logging.getLogger(__name__)


DEFAULT_GROQ_MODEL = "llama-3.3-70b-versatile"


class GroqTextGenerator(TextGeneratorPort):
    """
    Text generator using Groq-hosted models.

    The system prompt goes in the system message and the rendered prompt
    in the user message.
    """

    def __init__(
        self,
        api_key: Optional[str],
        system_prompt: str,
        model: str = DEFAULT_GROQ_MODEL,
        temperature: float = 0.3,
        max_tokens: int = 1500,
        client: Optional[Any] = None
    ):
        self._api_key = api_key
        self._system_prompt = system_prompt
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._client = client

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _init_client(self) -> None:
        from groq import Groq

        if not self._api_key:
            raise LLMConnectionError("GROQ_API_KEY is not set", provider="groq")
        self._client = Groq(api_key=self._api_key)

    def generate(
        self,
        prompt: str,
        options: Optional[Dict[str, Any]] = None
    ) -> str:
        start_time = time.time()

        if self._client is None:
            self._init_client()

        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": self._system_prompt},
                    {"role": "user", "content": prompt},
                ],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except Exception as e:
            raise TextGenerationError(f"Groq generation failed: {e}")

        try:
            text = response.choices[0].message.content
        except (AttributeError, IndexError) as e:
            raise MalformedUpstreamResponseError("Groq", f"unexpected completion shape: {e}")
        if not isinstance(text, str):
            raise MalformedUpstreamResponseError("Groq", "completion has no text content")

        processing_time = (time.time() - start_time) * 1000
        self.logger.info(f"Generated {len(text)} chars with {self._model} in {processing_time:.0f}ms")
        return text

    @property
    def model_name(self) -> str:
        return self._model
