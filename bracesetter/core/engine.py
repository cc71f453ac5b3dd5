"""
Top-level repair entry points.

``fix_unclosed`` picks the repair automaton for a piece of text, and the
``process_*`` helpers run the shared processor presets.
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any, Optional, Union

from ..exceptions import ConfigurationError
from ..preprocessing.pipeline import JSON_ARRAY_PROCESSOR, MARKUP_PROCESSOR
from .json_repair import is_likely_json, repair_json
from .tag_repair import fix_markup


class RepairMode(Enum):
    """Which repair automaton to apply."""

    AUTO = "auto"  # Guess from the text
    JSON = "json"
    XML = "xml"

    @classmethod
    def coerce(cls, mode: Union["RepairMode", str]) -> "RepairMode":
        if isinstance(mode, cls):
            return mode
        try:
            return cls(str(mode).lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ConfigurationError(
                f"Unknown repair mode {mode!r}; expected one of: {valid}"
            ) from None


def fix_unclosed(
    text: Optional[str],
    mode: Union[RepairMode, str] = RepairMode.AUTO,
    case_insensitive: bool = True,
    void_tags: Optional[Iterable[str]] = None,
) -> str:
    """
    Repair unclosed JSON or markup structures.

    Args:
        text: Raw text (None is treated as empty)
        mode: ``json``, ``xml``, or ``auto`` to guess from the text
        case_insensitive: Markup only - match tag names ignoring case
        void_tags: Markup only - element names that take no closing tag

    Returns:
        The repaired text

    Raises:
        ConfigurationError: If ``mode`` is not a known repair mode
    """
    repair_mode = RepairMode.coerce(mode)
    source = "" if text is None else str(text)

    if repair_mode is RepairMode.JSON or (
        repair_mode is RepairMode.AUTO and is_likely_json(source)
    ):
        return repair_json(source)

    return fix_markup(source, case_insensitive, void_tags)


def process_json_array(text: Any) -> Any:
    """Run the shared element-array JSON preset."""
    return JSON_ARRAY_PROCESSOR.process(text)


def process_markup(text: Any) -> Any:
    """Run the shared markup preset."""
    return MARKUP_PROCESSOR.process(text)
