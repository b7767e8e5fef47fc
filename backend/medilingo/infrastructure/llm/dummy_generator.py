"""
Dummy Text Generator

Canned explanations for tests and offline runs.
"""

from typing import Optional, Dict, Any, List, Tuple

from ...domain.ports.text_generator import TextGeneratorPort


class DummyTextGenerator(TextGeneratorPort):
    """
    Dummy text generator for testing.

    Returns ``text`` (or a fixed sentence) and records every call.
    """

    def __init__(self, text: Optional[str] = None):
        self._text = text
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def generate(
        self,
        prompt: str,
        options: Optional[Dict[str, Any]] = None
    ) -> str:
        self.calls.append((prompt, dict(options or {})))
        if self._text is not None:
            return self._text
        return (
            "This is a test explanation. In the real application a plain "
            "language summary of the medicine label is shown here. "
            "Always consult a doctor or pharmacist."
        )

    @property
    def model_name(self) -> str:
        return "DummyLLM"
