"""
Text processing module.

This module provides a composable processing pipeline for extracting,
normalizing and repairing generated structured text. Each step is a small,
single-responsibility ``str -> str`` transform; steps are composed into a
CodeProcessor, which isolates failures of individual steps.
"""

from .base import FunctionStep, ProcessingStepBase
from .cleaners import CleanupStep, clean_bom
from .extractors import (
    CodeFenceExtractor,
    JSONExtractor,
    StrictArrayExtractor,
    extract_code_fence,
    extract_json,
    extract_json_array_strict,
)
from .finalizers import ArrayFinalizer, GeometryHookStep, ensure_array
from .normalizers import (
    EntityUnescaper,
    MarkupBlockExtractor,
    TagCaseNormalizer,
    extract_markup_block,
    normalize_tag_case,
    unescape_html,
)
from .pipeline import (
    JSON_ARRAY_PROCESSOR,
    MARKUP_PROCESSOR,
    CodeProcessor,
    create_array_json_processor,
    create_json_processor,
    create_markup_processor,
    create_processor,
)
from .repairers import JSONRepairer, MarkupRepairer

__all__ = [
    "CodeProcessor",
    "ProcessingStepBase",
    "FunctionStep",
    "CleanupStep",
    "CodeFenceExtractor",
    "JSONExtractor",
    "StrictArrayExtractor",
    "EntityUnescaper",
    "MarkupBlockExtractor",
    "TagCaseNormalizer",
    "JSONRepairer",
    "MarkupRepairer",
    "ArrayFinalizer",
    "GeometryHookStep",
    "clean_bom",
    "extract_code_fence",
    "extract_json",
    "extract_json_array_strict",
    "unescape_html",
    "extract_markup_block",
    "normalize_tag_case",
    "ensure_array",
    "create_processor",
    "create_array_json_processor",
    "create_markup_processor",
    "create_json_processor",
    "JSON_ARRAY_PROCESSOR",
    "MARKUP_PROCESSOR",
]
