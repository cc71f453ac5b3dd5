"""
Content extraction processing steps.

This module contains steps that pull the structured payload out of the
surrounding text: fenced code blocks, and the JSON container inside prose.
"""

from typing import Optional

import regex

from ..core.constants import ANY_FENCE_PATTERN, tagged_fence_pattern
from ..core.regex_engine import get_engine
from ..core.string_scanner import iterate_structural_chars
from .base import ProcessingStepBase


class CodeFenceExtractor(ProcessingStepBase):
    """Extracts the payload of the first fenced code block."""

    def __init__(self, lang: Optional[str] = None):
        self.lang = lang
        self.name = f"extract_code_fence[{lang}]" if lang else "extract_code_fence"

    def process(self, text: str) -> str:
        return self.extract(text, self.lang)

    @staticmethod
    def extract(text: str, lang: Optional[str] = None) -> str:
        """
        Extract the content of a fenced block.

        Args:
            text: Text that may contain fenced blocks
            lang: Preferred language tag on the opening fence (any case)

        Returns:
            Trimmed block content, or the trimmed text when no fence exists
        """
        engine = get_engine()

        if lang:
            match = engine.search(tagged_fence_pattern(lang), text, regex.IGNORECASE)
            if match and match.group(1):
                return match.group(1).strip()

        match = engine.search(ANY_FENCE_PATTERN, text)
        if match and match.group(1):
            return match.group(1).strip()

        return text.strip()


class JSONExtractor(ProcessingStepBase):
    """Extracts the span between the outermost brackets or braces."""

    name = "extract_json"

    def process(self, text: str) -> str:
        return self.extract(text)

    @staticmethod
    def extract(text: str) -> str:
        """Slice from the first opener to the last matching-kind closer."""
        obj_start = text.find("{")
        obj_end = text.rfind("}")
        arr_start = text.find("[")
        arr_end = text.rfind("]")

        # Prefer the array when it opens before any object
        if (
            arr_start != -1
            and arr_end != -1
            and (obj_start == -1 or arr_start < obj_start)
        ):
            return text[arr_start : arr_end + 1]

        if obj_start != -1 and obj_end != -1:
            return text[obj_start : obj_end + 1]

        return text


class StrictArrayExtractor(ProcessingStepBase):
    """Extracts the first complete top-level JSON array."""

    name = "extract_json_array_strict"

    def process(self, text: str) -> str:
        return self.extract(text)

    @staticmethod
    def extract(text: str) -> str:
        """
        Find the first balanced ``[...]`` outside string literals.

        Falls back to JSONExtractor when no array closes before the end.
        """
        start = -1
        depth = 0

        for i, char in iterate_structural_chars(text):
            if char == "[":
                if start == -1:
                    start = i
                depth += 1
            elif char == "]" and depth > 0:
                depth -= 1
                if depth == 0:
                    return text[start : i + 1]

        return JSONExtractor.extract(text)


def extract_code_fence(text, lang: Optional[str] = None):
    """Extract a fenced block's content, preferring blocks tagged ``lang``."""
    if not text or not isinstance(text, str):
        return text
    return CodeFenceExtractor.extract(text, lang)


def extract_json(text):
    """Naive first-opener to last-closer JSON extraction."""
    if not text or not isinstance(text, str):
        return text
    return JSONExtractor.extract(text)


def extract_json_array_strict(text):
    """Depth- and string-aware extraction of the first complete array."""
    if not text or not isinstance(text, str):
        return text
    return StrictArrayExtractor.extract(text)
