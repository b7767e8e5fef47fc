"""
IBM watsonx.ai Text Generator

Explanation generation with a foundation model hosted on IBM watsonx.ai.
The model receives a completion-style input:

    <system prompt>

    Input: <rendered prompt>
    Output:
"""

from typing import Optional, Dict, Any, List
import logging
import time

from pydantic import BaseModel, ConfigDict, Field, ValidationError as SchemaValidationError

from ...domain.ports.text_generator import TextGeneratorPort
from ...domain.exceptions import (
    LLMConnectionError,
    MalformedUpstreamResponseError,
    TextGenerationError,
)


logger = logging.getLogger(__name__)


DEFAULT_MODEL_ID = "meta-llama/llama-3-405b-instruct"
DEFAULT_SERVICE_URL = "https://us-south.ml.cloud.ibm.com"
STOP_SEQUENCES = ["<|endoftext|>"]


class WatsonxResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    generated_text: str


class WatsonxGenerationResponse(BaseModel):
    """Shape of a watsonx.ai text generation response."""

    model_config = ConfigDict(extra="allow")

    results: List[WatsonxResult] = Field(..., min_length=1)


def completion_input(system_prompt: str, prompt: str) -> str:
    return f"{system_prompt}\n\nInput: {prompt}\nOutput:"


class WatsonxTextGenerator(TextGeneratorPort):
    """
    Text generator using ibm-watsonx-ai ``ModelInference``.

    Decoding is greedy; no retries are attempted on failure.

    Attributes:
        model_id: watsonx.ai foundation model id
        project_id: watsonx.ai project the calls are billed to
    """

    def __init__(
        self,
        api_key: Optional[str],
        project_id: Optional[str],
        system_prompt: str,
        model_id: str = DEFAULT_MODEL_ID,
        service_url: str = DEFAULT_SERVICE_URL,
        max_new_tokens: int = 1500,
        repetition_penalty: float = 1.03,
        model: Optional[Any] = None
    ):
        """
        Initialize watsonx.ai generator.

        Args:
            api_key: IBM Cloud API key
            project_id: watsonx.ai project id
            system_prompt: Instruction placed before every input
            model_id: Foundation model id
            service_url: Regional watsonx.ai endpoint
            max_new_tokens: Maximum generated tokens
            repetition_penalty: Repetition penalty
            model: Pre-built ModelInference (optional)
        """
        self._api_key = api_key
        self._project_id = project_id
        self._system_prompt = system_prompt
        self._model_id = model_id
        self._service_url = service_url
        self._max_new_tokens = max_new_tokens
        self._repetition_penalty = repetition_penalty
        self._model = model

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _init_model(self) -> None:
        """Create the ModelInference client on first use."""
        from ibm_watsonx_ai import Credentials
        from ibm_watsonx_ai.foundation_models import ModelInference
        from ibm_watsonx_ai.metanames import GenTextParamsMetaNames as GenParams

        if not self._api_key or not self._project_id:
            raise LLMConnectionError(
                "WATSON_API_KEY and WATSON_PROJECT_ID must be set",
                provider="watsonx"
            )

        params = {
            GenParams.DECODING_METHOD: "greedy",
            GenParams.MAX_NEW_TOKENS: self._max_new_tokens,
            GenParams.MIN_NEW_TOKENS: 0,
            GenParams.STOP_SEQUENCES: STOP_SEQUENCES,
            GenParams.REPETITION_PENALTY: self._repetition_penalty,
        }

        try:
            self._model = ModelInference(
                model_id=self._model_id,
                credentials=Credentials(api_key=self._api_key, url=self._service_url),
                project_id=self._project_id,
                params=params,
            )
        except Exception as e:
            raise LLMConnectionError(f"watsonx.ai authentication failed: {e}", provider="watsonx")

        self.logger.info(f"watsonx.ai model ready: {self._model_id}")

    def generate(
        self,
        prompt: str,
        options: Optional[Dict[str, Any]] = None
    ) -> str:
        start_time = time.time()

        if self._model is None:
            self._init_model()

        try:
            response = self._model.generate(prompt=completion_input(self._system_prompt, prompt))
        except Exception as e:
            raise TextGenerationError(f"watsonx.ai generation failed: {e}")

        try:
            parsed = WatsonxGenerationResponse.model_validate(response)
        except SchemaValidationError:
            raise MalformedUpstreamResponseError(
                "watsonx.ai",
                "response has no results[0].generated_text"
            )

        text = parsed.results[0].generated_text
        processing_time = (time.time() - start_time) * 1000
        self.logger.info(f"Generated {len(text)} chars in {processing_time:.0f}ms")
        return text

    @property
    def model_name(self) -> str:
        return self._model_id
