"""
Finalization and post-processing steps.

ArrayFinalizer guarantees that a JSON processor hands its consumer a
pretty-printed array, accepting the shapes generators actually produce:
a bare array, an object wrapping the array, a single element, or the
comma-separated elements of an array whose brackets were never emitted
(typical when a generator resumes a previous answer).
"""

import json
import logging
from collections.abc import Iterable
from typing import Any, Callable, Optional

from ..core.constants import ARRAY_SPAN_PATTERN, DEFAULT_ARRAY_FIELDS
from ..core.json_repair import loads_strict
from ..core.regex_engine import get_engine
from .base import ProcessingStepBase

logger = logging.getLogger(__name__)

_NOT_PARSED = object()


def _try_loads(text: str) -> Any:
    try:
        return loads_strict(text)
    except (ValueError, RecursionError):
        return _NOT_PARSED


class ArrayFinalizer(ProcessingStepBase):
    """Normalizes JSON text into a pretty-printed top-level array."""

    name = "ensure_array"

    def __init__(
        self, array_fields: Iterable[str] = DEFAULT_ARRAY_FIELDS, indent: int = 2
    ):
        self.array_fields = tuple(array_fields)
        self.indent = indent

    def process(self, text: str) -> str:
        return self.finalize(text, self.array_fields, self.indent)

    @staticmethod
    def finalize(
        text: str,
        array_fields: Iterable[str] = DEFAULT_ARRAY_FIELDS,
        indent: int = 2,
    ) -> str:
        """
        Return text as a JSON array, or the trimmed text if that is impossible.

        Args:
            text: Structurally repaired JSON text
            array_fields: Object fields checked, in order, for the element list
            indent: Indentation of the serialized array

        Returns:
            Pretty-printed JSON array text, or the trimmed input when no
            attempt produced an array
        """
        trimmed = text.strip()
        if not trimmed:
            return trimmed

        def dump(data: list[Any]) -> str:
            return json.dumps(data, indent=indent, ensure_ascii=False)

        if trimmed.startswith("[") and trimmed.endswith("]"):
            data = _try_loads(trimmed)
            return dump(data) if isinstance(data, list) else trimmed

        data = _try_loads(trimmed)
        if data is not _NOT_PARSED:
            if isinstance(data, list):
                return dump(data)
            if isinstance(data, dict):
                for field_name in array_fields:
                    if isinstance(data.get(field_name), list):
                        return dump(data[field_name])
            return dump([data])

        # Elements emitted without their enclosing brackets
        data = _try_loads(f"[{trimmed}]")
        if isinstance(data, list):
            logger.debug("Wrapped bare element sequence in an array")
            return dump(data)

        match = get_engine().search(ARRAY_SPAN_PATTERN, trimmed)
        if match:
            data = _try_loads(match.group(0))
            if isinstance(data, list):
                return dump(data)

        logger.debug("Could not normalize text into a JSON array")
        return trimmed


class GeometryHookStep(ProcessingStepBase):
    """
    Runs an external post-processing hook over finished element arrays.

    The hook receives valid array-of-elements JSON text and returns text of
    the same shape. Without a hook the step passes text through.
    """

    name = "geometry_hook"

    def __init__(self, hook: Optional[Callable[[str], str]] = None):
        self.hook = hook

    def process(self, text: str) -> str:
        if self.hook is None:
            return text
        result = self.hook(text)
        if not isinstance(result, str):
            raise TypeError(
                f"Geometry hook returned {type(result).__name__}, expected str"
            )
        return result


def ensure_array(
    text,
    array_fields: Iterable[str] = DEFAULT_ARRAY_FIELDS,
    indent: int = 2,
):
    """Coerce JSON text into a pretty-printed array where possible."""
    if not text or not isinstance(text, str):
        return text
    return ArrayFinalizer.finalize(text, array_fields, indent)
