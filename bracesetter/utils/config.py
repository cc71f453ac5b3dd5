"""
Configuration for bracesetter processors.

Settings are grouped into small dataclasses and combined by ProcessorConfig,
which the processor factories read when building their steps. A processor
copies what it needs at construction time, so changing a config afterwards
does not affect processors already built from it.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from ..core.constants import (
    CANONICAL_TAG_CASE,
    DEFAULT_ARRAY_FIELDS,
    DEFAULT_ROOT_TAGS,
    DEFAULT_VOID_TAGS,
)
from ..exceptions import ConfigurationError


@dataclass
class ExtractionSettings:
    """Settings for payload extraction."""
    fence_language: Optional[str] = None
    strict_array: bool = True

    def __post_init__(self) -> None:
        if self.fence_language is not None and not self.fence_language.strip():
            raise ConfigurationError("fence_language must not be blank")


@dataclass
class MarkupSettings:
    """Settings for markup normalization and tag repair."""
    case_insensitive: bool = True
    void_tags: frozenset[str] = DEFAULT_VOID_TAGS
    root_tags: tuple[str, ...] = DEFAULT_ROOT_TAGS
    canonical_tags: Mapping[str, str] = field(
        default_factory=lambda: dict(CANONICAL_TAG_CASE)
    )

    def __post_init__(self) -> None:
        self.void_tags = frozenset(self.void_tags)
        self.root_tags = tuple(self.root_tags)
        if not self.root_tags:
            raise ConfigurationError("root_tags must name at least one element")
        self.canonical_tags = {
            name.lower(): canonical for name, canonical in self.canonical_tags.items()
        }


@dataclass
class FinalizationSettings:
    """Settings for array finalization."""
    array_fields: tuple[str, ...] = DEFAULT_ARRAY_FIELDS
    indent: int = 2

    def __post_init__(self) -> None:
        self.array_fields = tuple(self.array_fields)
        if not self.array_fields:
            raise ConfigurationError("array_fields must name at least one field")
        if self.indent < 0:
            raise ConfigurationError("indent must not be negative")


@dataclass
class ProcessorConfig:
    """Granular control over the steps a processor is built from."""

    extraction: Optional[ExtractionSettings] = None
    markup: Optional[MarkupSettings] = None
    finalization: Optional[FinalizationSettings] = None

    def __post_init__(self) -> None:
        if self.extraction is None:
            self.extraction = ExtractionSettings()
        if self.markup is None:
            self.markup = MarkupSettings()
        if self.finalization is None:
            self.finalization = FinalizationSettings()

    # Flat accessors
    @property
    def fence_language(self) -> Optional[str]:
        """Language tag preferred when extracting fenced blocks."""
        assert self.extraction is not None
        return self.extraction.fence_language

    @property
    def strict_array(self) -> bool:
        """Whether JSON extraction prefers the first complete array."""
        assert self.extraction is not None
        return self.extraction.strict_array

    @property
    def case_insensitive(self) -> bool:
        """Whether tag names match ignoring case."""
        assert self.markup is not None
        return self.markup.case_insensitive

    @property
    def void_tags(self) -> frozenset[str]:
        """Element names that never take a closing tag."""
        assert self.markup is not None
        return self.markup.void_tags

    @property
    def root_tags(self) -> tuple[str, ...]:
        """Root element names marking the primary markup block."""
        assert self.markup is not None
        return self.markup.root_tags

    @property
    def canonical_tags(self) -> Mapping[str, str]:
        """Lower-cased tag name to canonical spelling."""
        assert self.markup is not None
        return self.markup.canonical_tags

    @property
    def array_fields(self) -> tuple[str, ...]:
        """Object fields searched, in order, for a wrapped element array."""
        assert self.finalization is not None
        return self.finalization.array_fields

    @property
    def indent(self) -> int:
        """Indentation of the finalized JSON array."""
        assert self.finalization is not None
        return self.finalization.indent

    @classmethod
    def for_json(cls) -> "ProcessorConfig":
        """Create the configuration used by the JSON processors."""
        return cls(extraction=ExtractionSettings(fence_language="json"))

    @classmethod
    def for_markup(cls) -> "ProcessorConfig":
        """Create the configuration used by the markup processor."""
        return cls(extraction=ExtractionSettings(fence_language="xml"))
