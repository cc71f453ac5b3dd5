"""
bracesetter - Sets broken braces and tags back into place.

bracesetter repairs structured text produced by generative models: JSON that
was cut off mid-object, markup that stops mid-tag, payloads wrapped in prose,
code fences or HTML entities. Repairs are structural only; the content you
get back is the content the generator wrote, closed up so it parses.

Key Features:
- Extract payloads from fenced blocks and surrounding prose
- Close unbalanced brackets, braces and strings in JSON
- Recover from mismatched closers (``[{"a": 1]`` -> ``[{"a": 1}]``)
- Close unclosed XML/HTML elements and truncated tags
- Composable pipelines where a failing step never breaks the chain
- Presets for element-array JSON and diagram XML
- Streaming helper that repairs the text received so far

Quick Start:
    import bracesetter

    bracesetter.repair_json('[{"a": 1}, {"b": 2')
    # '[{"a": 1}, {"b": 2}]'

    bracesetter.fix_markup("<div><p>Hello</div>")
    # '<div><p>Hello</p></div>'

    # Full preset: fence extraction, repair, array normalization
    bracesetter.process_json_array('Here you go:\\n```json\\n[{"id": 1},\\n```')

    # Custom pipelines
    processor = bracesetter.create_processor(
        bracesetter.clean_bom, bracesetter.extract_json, bracesetter.repair_json
    )
    result = processor.process_with_report(raw_text)
"""

from .core.engine import RepairMode, fix_unclosed, process_json_array, process_markup
from .core.error_handling import ProcessingResult, ProcessingStats, StepOutcome
from .core.json_repair import (
    add_missing_commas,
    fix_json_structure,
    is_likely_json,
    is_valid_json,
    repair_json,
    strip_trailing_commas,
)
from .core.tag_repair import auto_close_angle_brackets, fix_markup
from .exceptions import BracesetterError, ConfigurationError, ProcessorFrozenError
from .preprocessing import (
    JSON_ARRAY_PROCESSOR,
    MARKUP_PROCESSOR,
    ArrayFinalizer,
    CleanupStep,
    CodeFenceExtractor,
    CodeProcessor,
    EntityUnescaper,
    FunctionStep,
    GeometryHookStep,
    JSONExtractor,
    JSONRepairer,
    MarkupBlockExtractor,
    MarkupRepairer,
    ProcessingStepBase,
    StrictArrayExtractor,
    TagCaseNormalizer,
    clean_bom,
    create_array_json_processor,
    create_json_processor,
    create_markup_processor,
    create_processor,
    ensure_array,
    extract_code_fence,
    extract_json,
    extract_json_array_strict,
    extract_markup_block,
    normalize_tag_case,
    unescape_html,
)
from .streaming import StreamingProcessor
from .utils.config import (
    ExtractionSettings,
    FinalizationSettings,
    MarkupSettings,
    ProcessorConfig,
)

__version__ = "0.1.0"
__author__ = "bracesetter contributors"

__all__ = [
    # Repair entry points
    "repair_json", "fix_markup", "fix_unclosed", "RepairMode",
    "fix_json_structure", "add_missing_commas", "strip_trailing_commas",
    "is_likely_json", "is_valid_json", "auto_close_angle_brackets",
    "process_json_array", "process_markup",
    # Step functions
    "clean_bom", "extract_code_fence", "extract_json", "extract_json_array_strict",
    "unescape_html", "extract_markup_block", "normalize_tag_case", "ensure_array",
    # Pipeline
    "CodeProcessor", "create_processor", "create_array_json_processor",
    "create_markup_processor", "create_json_processor",
    "JSON_ARRAY_PROCESSOR", "MARKUP_PROCESSOR",
    "StepOutcome", "ProcessingResult", "ProcessingStats",
    # Step classes
    "ProcessingStepBase", "FunctionStep", "CleanupStep", "CodeFenceExtractor",
    "JSONExtractor", "StrictArrayExtractor", "EntityUnescaper",
    "MarkupBlockExtractor", "TagCaseNormalizer", "JSONRepairer",
    "MarkupRepairer", "ArrayFinalizer", "GeometryHookStep",
    # Streaming
    "StreamingProcessor",
    # Configuration classes
    "ProcessorConfig", "ExtractionSettings", "MarkupSettings",
    "FinalizationSettings",
    # Exception classes
    "BracesetterError", "ConfigurationError", "ProcessorFrozenError",
]
