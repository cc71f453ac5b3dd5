"""
Markup normalization processing steps.

These steps undo cosmetic damage that generators do to markup payloads:
HTML-escaped documents, prose around the document, and mangled tag case.
The trigger conditions are tuned to real generator output; keep them exact.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Optional

import regex

from ..core.constants import (
    CANONICAL_TAG_CASE,
    DEFAULT_ROOT_TAGS,
    ESCAPED_MARKUP_PATTERN,
    HTML_ENTITIES,
    RAW_MARKUP_PATTERN,
    root_tag_pattern,
    tag_case_pattern,
)
from ..core.regex_engine import get_engine
from .base import ProcessingStepBase


class EntityUnescaper(ProcessingStepBase):
    """Decodes HTML entities in markup that arrived fully escaped."""

    name = "unescape_html"

    def process(self, text: str) -> str:
        return self.unescape(text)

    @staticmethod
    def needs_unescape(text: str) -> bool:
        """Escaped markup present and no raw markup at all."""
        engine = get_engine()
        return not engine.search(
            RAW_MARKUP_PATTERN, text, regex.IGNORECASE
        ) and bool(engine.search(ESCAPED_MARKUP_PATTERN, text, regex.IGNORECASE))

    @staticmethod
    def unescape(text: str) -> str:
        if not EntityUnescaper.needs_unescape(text):
            return text
        for entity, char in HTML_ENTITIES:
            text = text.replace(entity, char)
        return text


class MarkupBlockExtractor(ProcessingStepBase):
    """Isolates the primary markup document from surrounding prose."""

    name = "extract_markup_block"

    def __init__(self, root_tags: Iterable[str] = DEFAULT_ROOT_TAGS):
        self.root_tags = tuple(root_tags)

    def process(self, text: str) -> str:
        return self.extract(text, self.root_tags)

    @staticmethod
    def extract(text: str, root_tags: Iterable[str] = DEFAULT_ROOT_TAGS) -> str:
        """Slice from the first root-element opening to the last ``>``."""
        match = get_engine().search(
            root_tag_pattern(tuple(root_tags)), text, regex.IGNORECASE
        )
        end = text.rfind(">")
        if match and end > match.start():
            return text[match.start() : end + 1]
        return text


class TagCaseNormalizer(ProcessingStepBase):
    """Rewrites known tag names to their canonical spelling."""

    name = "normalize_tag_case"

    def __init__(self, table: Optional[Mapping[str, str]] = None):
        self.table = self.lowercase_keys(table)

    def process(self, text: str) -> str:
        return self.normalize(text, self.table)

    @staticmethod
    def lowercase_keys(table: Optional[Mapping[str, str]]) -> dict[str, str]:
        """Key the table by lowercased tag name; lookups are case-insensitive."""
        table = CANONICAL_TAG_CASE if table is None else table
        return {name.lower(): canonical for name, canonical in table.items()}

    @staticmethod
    def normalize(text: str, table: Optional[Mapping[str, str]] = None) -> str:
        table = TagCaseNormalizer.lowercase_keys(table)
        if not table:
            return text

        def replace(match: Any) -> str:
            prefix, tag_name = match.group(1), match.group(2)
            return prefix + table.get(tag_name.lower(), tag_name)

        return get_engine().sub(
            tag_case_pattern(tuple(table)), replace, text, flags=regex.IGNORECASE
        )


def unescape_html(text):
    """Decode the five standard entities when the markup arrived escaped."""
    if not text or not isinstance(text, str):
        return text
    return EntityUnescaper.unescape(text)


def extract_markup_block(text, root_tags: Iterable[str] = DEFAULT_ROOT_TAGS):
    """Strip prose before the first root element and after the last ``>``."""
    if not text or not isinstance(text, str):
        return text
    return MarkupBlockExtractor.extract(text, root_tags)


def normalize_tag_case(text, table: Optional[Mapping[str, str]] = None):
    """Restore canonical casing of known tag names."""
    if not text or not isinstance(text, str):
        return text
    return TagCaseNormalizer.normalize(text, table)
