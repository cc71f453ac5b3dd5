"""
Structural repair for JSON-like text.

Generated JSON is often cut off or stitched together from resumed output.
The repair here is a single left-to-right scan with a delimiter stack:

- missing commas between adjacent composite values are inserted
- a closer that does not match the innermost opener first closes
  everything opened after the matching opener
- an unterminated string is closed
- a dangling trailing comma is dropped
- every still-open composite value is closed, innermost first

Nothing is validated beyond structure; content is preserved as-is.
"""

import json
import logging
from typing import Any

from .constants import (
    CLOSER_FOR_OPENER,
    LIKELY_JSON_MARKERS,
    MISSING_COMMA_PATTERN,
    OPENER_FOR_CLOSER,
    TRAILING_COMMA_PATTERN,
)
from .regex_engine import get_engine
from .string_scanner import StringScanState, remove_invisible_chars

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def loads_strict(text: str) -> Any:
    """Parse standard JSON, rejecting NaN and Infinity literals."""
    return json.loads(text, parse_constant=_reject_constant)


def is_valid_json(text: str) -> bool:
    """Check whether text parses as standard JSON."""
    try:
        loads_strict(text)
    except (ValueError, RecursionError):
        return False
    return True


def is_likely_json(text: str) -> bool:
    """Guess whether text is meant to be JSON rather than markup."""
    stripped = (text or "").lstrip()
    if not stripped:
        return False
    if stripped.startswith(("{", "[")):
        return True
    return any(marker in stripped for marker in LIKELY_JSON_MARKERS)


def add_missing_commas(text: str) -> str:
    """Insert commas between adjacent composites: ``}{`` becomes ``},{``."""
    return get_engine().sub(MISSING_COMMA_PATTERN, r"\1,\2", text)


def strip_trailing_commas(text: str) -> str:
    """Remove commas that directly precede a closing bracket or brace."""
    return get_engine().sub(TRAILING_COMMA_PATTERN, r"\1", text)


def fix_json_structure(text: str) -> str:
    """
    Close unbalanced brackets, braces and strings in JSON-like text.

    Args:
        text: Possibly truncated or mis-nested JSON text

    Returns:
        Text whose brackets and braces balance outside string literals
    """
    text = add_missing_commas(remove_invisible_chars(text or ""))

    stack: list[str] = []
    state = StringScanState()
    result: list[str] = []
    last_non_whitespace = ""

    for char in text:
        if state.consume(char):
            result.append(char)
            if not char.isspace():
                last_non_whitespace = char
            continue

        if char in CLOSER_FOR_OPENER:
            stack.append(char)
        elif char in OPENER_FOR_CLOSER:
            needed = OPENER_FOR_CLOSER[char]
            # Close everything opened after the opener this closer belongs to
            while stack and stack[-1] != needed:
                closer = CLOSER_FOR_OPENER[stack.pop()]
                result.append(closer)
                last_non_whitespace = closer
            if stack:
                stack.pop()

        result.append(char)
        if not char.isspace():
            last_non_whitespace = char

    if state.in_string:
        result.append('"')
        last_non_whitespace = '"'

    repaired = "".join(result)

    if last_non_whitespace == ",":
        repaired = repaired.rstrip()
        if repaired.endswith(","):
            repaired = repaired[:-1]

    while stack:
        repaired += CLOSER_FOR_OPENER[stack.pop()]

    return strip_trailing_commas(repaired)


def repair_json(text: str) -> str:
    """
    Return text as valid JSON where structural repair makes that possible.

    Valid input is returned unchanged (trimmed). Otherwise the structural
    repair is applied, followed by one more trailing-comma pass if the repair
    alone did not produce parseable JSON. Never raises; the result may still
    be invalid when the damage is not structural.
    """
    raw = (text or "").strip()
    if not raw:
        return raw

    if is_valid_json(raw):
        return raw

    fixed = fix_json_structure(raw)
    if is_valid_json(fixed):
        logger.debug(f"Structural repair produced valid JSON ({len(fixed)} chars)")
        return fixed

    logger.debug("Structural repair incomplete; stripping trailing commas")
    return strip_trailing_commas(fixed)
