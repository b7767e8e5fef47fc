"""
Value Objects

Immutable objects defined by their attributes.
"""

from .image_data import ImageData

__all__ = ["ImageData"]
