"""
Translation Adapters
"""

from .google_translator import TranslatingTextGenerator, split_for_translation

__all__ = ["TranslatingTextGenerator", "split_for_translation"]
