"""
bracesetter configuration utilities.
"""

from .config import (
    ExtractionSettings,
    FinalizationSettings,
    MarkupSettings,
    ProcessorConfig,
)

__all__ = [
    "ExtractionSettings",
    "FinalizationSettings",
    "MarkupSettings",
    "ProcessorConfig",
]
