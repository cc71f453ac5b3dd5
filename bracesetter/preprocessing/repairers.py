"""
Structure repair processing steps.

Thin pipeline adapters over the repair automatons in ``core``.
"""

from collections.abc import Iterable
from typing import Optional

from ..core.constants import DEFAULT_VOID_TAGS
from ..core.json_repair import repair_json
from ..core.tag_repair import fix_markup
from .base import ProcessingStepBase


class JSONRepairer(ProcessingStepBase):
    """Closes brackets, braces and strings left open in JSON text."""

    name = "repair_json"

    def process(self, text: str) -> str:
        return repair_json(text)


class MarkupRepairer(ProcessingStepBase):
    """Closes elements left open in XML/HTML text."""

    name = "fix_markup"

    def __init__(
        self,
        case_insensitive: bool = True,
        void_tags: Optional[Iterable[str]] = None,
    ):
        self.case_insensitive = case_insensitive
        self.void_tags = frozenset(
            DEFAULT_VOID_TAGS if void_tags is None else void_tags
        )

    def process(self, text: str) -> str:
        return fix_markup(text, self.case_insensitive, self.void_tags)
