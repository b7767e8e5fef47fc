"""
Output Translation

Wraps a text generator and translates its English output into the user's
preferred language with Google Translate (deep-translator).
"""

from typing import Optional, Dict, Any, List, Callable
import logging

from deep_translator import GoogleTranslator

from ...domain.ports.text_generator import TextGeneratorPort


logger = logging.getLogger(__name__)


SOURCE_LANGUAGE = "en"

# Google Translate rejects longer payloads
MAX_CHUNK_LENGTH = 4500


def split_for_translation(text: str, max_length: int = MAX_CHUNK_LENGTH) -> List[str]:
    """Split text on paragraph boundaries into chunks under ``max_length``."""
    chunks: List[str] = []
    current = ""
    for paragraph in text.split("\n"):
        while len(paragraph) > max_length:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(paragraph[:max_length])
            paragraph = paragraph[max_length:]

        candidate = f"{current}\n{paragraph}" if current else paragraph
        if len(candidate) > max_length:
            chunks.append(current)
            current = paragraph
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks


class TranslatingTextGenerator(TextGeneratorPort):
    """
    Decorator adding translation to any TextGeneratorPort.

    ``options["language"]`` selects the target language code. English and
    missing languages pass through. A failed translation keeps the English
    text.
    """

    def __init__(
        self,
        inner: TextGeneratorPort,
        translator_factory: Optional[Callable[[str], Any]] = None
    ):
        self.inner = inner
        self._translator_factory = translator_factory or (
            lambda target: GoogleTranslator(source=SOURCE_LANGUAGE, target=target)
        )
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def generate(
        self,
        prompt: str,
        options: Optional[Dict[str, Any]] = None
    ) -> str:
        text = self.inner.generate(prompt, options)

        target = (options or {}).get("language") or SOURCE_LANGUAGE
        if target == SOURCE_LANGUAGE or not text.strip():
            return text

        return self.translate(text, target)

    def translate(self, text: str, target: str) -> str:
        try:
            translator = self._translator_factory(target)
            translated = "\n".join(
                translator.translate(chunk) or "" for chunk in split_for_translation(text)
            )
        except Exception as e:
            self.logger.warning(f"Translation to '{target}' failed, keeping English text: {e}")
            return text

        self.logger.info(f"[EN→{target.upper()}] {text[:50]}... → {translated[:50]}...")
        return translated

    @property
    def model_name(self) -> str:
        return self.inner.model_name
