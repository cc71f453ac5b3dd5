"""
Structural repair for XML/HTML-like text.

Truncated markup is repaired in two passes:

1. ``<`` spans that run into the next ``<`` (or the end of the text) without
   a ``>`` get one, so a cut-off ``</mxCell`` becomes ``</mxCell>``.
2. Tags are read in order while a stack records open elements; whatever is
   still open at the end is closed innermost-first.

A closing tag for an element opened further out first closes the elements
opened inside it. A closing tag that matches no open element is kept as-is
and does not unwind the stack.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from .constants import (
    DEFAULT_VOID_TAGS,
    DOCTYPE_PREFIX,
    MARKUP_PASSTHROUGH_PREFIXES,
    TAG_TOKEN_PATTERN,
)
from .regex_engine import get_engine
from .string_scanner import remove_invisible_chars

logger = logging.getLogger(__name__)


def auto_close_angle_brackets(text: str) -> str:
    """Add the ``>`` missing from tags that are cut off before the next ``<``."""
    text = text or ""
    length = len(text)
    out: list[str] = []
    i = 0

    while i < length:
        lt = text.find("<", i)
        if lt == -1:
            out.append(text[i:])
            break

        out.append(text[i:lt])

        found_gt = -1
        found_next_lt = -1
        for j in range(lt + 1, length):
            char = text[j]
            if char == ">":
                found_gt = j
                break
            if char == "<":
                found_next_lt = j
                break

        if found_gt != -1:
            out.append(text[lt : found_gt + 1])
            i = found_gt + 1
            continue

        end = found_next_lt if found_next_lt != -1 else length
        segment = text[lt:end]
        out.append(segment if segment.endswith(">") else segment + ">")
        i = end

    return "".join(out)


def _is_passthrough(raw_tag: str) -> bool:
    """Comments, DOCTYPE, CDATA and processing instructions."""
    return raw_tag.startswith(MARKUP_PASSTHROUGH_PREFIXES) or raw_tag[
        : len(DOCTYPE_PREFIX)
    ].lower() == DOCTYPE_PREFIX


class TagStack:
    """LIFO record of open elements, matched by normalized name."""

    def __init__(self, case_insensitive: bool = True):
        self.case_insensitive = case_insensitive
        self._entries: list[tuple[str, str]] = []

    def normalize(self, name: str) -> str:
        """Normalize a tag name per the format's case sensitivity."""
        return name.lower() if self.case_insensitive else name

    def push(self, name: str) -> None:
        self._entries.append((self.normalize(name), name))

    def close(self, name: str) -> str:
        """
        Pop the open element named ``name``.

        Elements opened inside it are popped too and their closing tags
        returned, so they can be emitted before the closing tag itself.
        A name that is not open leaves the stack untouched.
        """
        key = self.normalize(name)
        for depth in range(len(self._entries) - 1, -1, -1):
            if self._entries[depth][0] == key:
                inner = self._entries[depth + 1 :]
                del self._entries[depth:]
                return "".join(f"</{raw}>" for _, raw in reversed(inner))
        return ""

    def closing_tags(self) -> str:
        """Closing tags for every open element, innermost first."""
        return "".join(f"</{name}>" for _, name in reversed(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


def fix_markup(
    text: str,
    case_insensitive: bool = True,
    void_tags: Optional[Iterable[str]] = None,
) -> str:
    """
    Close unclosed elements in XML/HTML-like text.

    Args:
        text: Possibly truncated markup
        case_insensitive: Match tag names ignoring case (HTML semantics)
        void_tags: Element names that never take a closing tag

    Returns:
        Markup in which every non-void opening tag is closed
    """
    voids = DEFAULT_VOID_TAGS if void_tags is None else frozenset(void_tags)
    stack = TagStack(case_insensitive)
    if case_insensitive:
        voids = frozenset(name.lower() for name in voids)

    source = auto_close_angle_brackets(remove_invisible_chars(text or ""))

    out: list[str] = []
    last_index = 0

    for match in get_engine().finditer(TAG_TOKEN_PATTERN, source):
        out.append(source[last_index : match.start()])
        last_index = match.end()

        raw_tag = match.group(1).strip()

        if raw_tag.startswith("/"):
            parts = raw_tag[1:].split()
            if parts:
                out.append(stack.close(parts[0]))
            out.append(f"<{raw_tag}>")
            continue

        out.append(f"<{raw_tag}>")
        if _is_passthrough(raw_tag):
            continue

        parts = raw_tag.split()
        if not parts or raw_tag.endswith("/"):
            continue
        name = parts[0]
        if stack.normalize(name) not in voids:
            stack.push(name)

    out.append(source[last_index:])

    if stack:
        logger.debug(f"Closing {len(stack)} unclosed element(s)")
    out.append(stack.closing_tags())
    return "".join(out)
