"""
Common constants, lookup tables and pattern sources used across bracesetter.
"""

import regex

# Byte-order mark and the zero-width characters generators like to leak
BOM = "\ufeff"
ZERO_WIDTH_CHARS = "\u200b\u200c\u200d\u2060"

# Structural delimiters for the JSON automaton
CLOSER_FOR_OPENER = {"{": "}", "[": "]"}
OPENER_FOR_CLOSER = {"}": "{", "]": "["}

# Elements that never take a closing tag. The last two are draw.io
# geometry elements that are always emitted childless.
DEFAULT_VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
        "mxgeometry",
        "mxpoint",
    }
)

# Root elements that mark the start of an embedded diagram document
DEFAULT_ROOT_TAGS = ("mxfile", "mxGraphModel", "diagram")

# Lower-cased tag name -> canonical mxGraph spelling
CANONICAL_TAG_CASE = {
    "mxgraphmodel": "mxGraphModel",
    "mxcell": "mxCell",
    "mxgeometry": "mxGeometry",
    "mxpoint": "mxPoint",
}

# Object fields checked, in order, for the element list of a wrapped array
DEFAULT_ARRAY_FIELDS = ("elements", "items")

# Entities decoded by the unescape step, applied in this order
HTML_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)

# Token prefixes passed through the tag automaton untouched
MARKUP_PASSTHROUGH_PREFIXES = ("!--", "![CDATA[", "?")
DOCTYPE_PREFIX = "!doctype"

# Pattern sources, compiled and cached by the regex engine
RAW_MARKUP_PATTERN = r"<[a-z!?]"
ESCAPED_MARKUP_PATTERN = r"&lt;\s*[a-z!?]"
ANY_FENCE_PATTERN = r"```[ \t]*(?:[\w.+#-]+[ \t]*\r?\n)?([\s\S]*?)```"
TAG_TOKEN_PATTERN = r"<([^>]+)>"
MISSING_COMMA_PATTERN = r"([}\]])\s*([{\[])"
TRAILING_COMMA_PATTERN = r",(\s*[}\]])"
ARRAY_SPAN_PATTERN = r"\[[\s\S]*\]"
LIKELY_JSON_MARKERS = (":{", '":[', '"type"')


def tagged_fence_pattern(lang: str) -> str:
    """Pattern for a fenced block whose opening fence declares ``lang``."""
    return r"```\s*" + regex.escape(lang) + r"\s*([\s\S]*?)```"


def root_tag_pattern(root_tags: tuple[str, ...]) -> str:
    """Pattern for the opening of any of the given root elements."""
    names = "|".join(
        regex.escape(name) for name in sorted(root_tags, key=len, reverse=True)
    )
    return r"<(" + names + r")([\s>])"


def tag_case_pattern(names: tuple[str, ...]) -> str:
    """Pattern for opening or closing occurrences of the given tag names."""
    alternatives = "|".join(
        regex.escape(name) for name in sorted(names, key=len, reverse=True)
    )
    return r"(<\s*/?)(" + alternatives + r")\b"
