"""
MediLingo+ Backend

Medicine identification and explanation service.
Flow: IMAGE / SEARCH → VISION → CONFIRM → LABEL → GENERATION
"""

__version__ = "1.0.0"
__author__ = "MediLingo+ Team"
