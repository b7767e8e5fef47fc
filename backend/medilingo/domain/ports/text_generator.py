"""
Text Generator Port

Abstract interface for the large-language-model collaborator.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any


class TextGeneratorPort(ABC):
    """
    Port (interface) for text generation implementations.

    Produces a free-form explanation of a medicine from a rendered prompt.
    The result has no schema and is shown to the user as-is.
    """

    @abstractmethod
    def generate(
        self,
        prompt: str,
        options: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Generate explanation text.

        Args:
            prompt: Rendered prompt text
            options: Optional generation configuration
                - language: Target language code for the output

        Returns:
            Generated text

        Raises:
            TextGenerationError: If generation fails
            MalformedUpstreamResponseError: If the response has an unexpected shape
        """
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Get the name of the LLM model."""
        pass
