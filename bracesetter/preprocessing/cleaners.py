"""
Cleanup step run at the head of every processor.
"""

from ..core.string_scanner import remove_invisible_chars
from .base import ProcessingStepBase


class CleanupStep(ProcessingStepBase):
    """Removes BOM and zero-width characters and trims whitespace."""

    name = "clean_bom"

    def process(self, text: str) -> str:
        return self.clean(text)

    @staticmethod
    def clean(text: str) -> str:
        return remove_invisible_chars(text).strip()


def clean_bom(text):
    """Strip BOM/zero-width characters and surrounding whitespace."""
    if not text or not isinstance(text, str):
        return text
    return CleanupStep.clean(text)
