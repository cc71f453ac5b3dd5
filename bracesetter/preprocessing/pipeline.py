"""
Processing pipeline for composable repair steps.

A CodeProcessor applies an ordered tuple of ``str -> str`` steps. Steps work
heuristically on adversarial input, so each one is isolated: a step that
raises is logged and its input is carried forward to the next step as if the
step had returned it unchanged. ``process`` therefore never raises.

Processors hold no per-call state and can be shared freely. The module-level
presets are frozen; derive variants from them with ``with_steps``.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Callable, Optional

from ..core.error_handling import ProcessingResult, StepOutcome
from ..exceptions import ConfigurationError, ProcessorFrozenError
from ..utils.config import ProcessorConfig
from .base import Step, step_name
from .cleaners import CleanupStep
from .extractors import CodeFenceExtractor, JSONExtractor, StrictArrayExtractor
from .finalizers import ArrayFinalizer, GeometryHookStep
from .normalizers import EntityUnescaper, MarkupBlockExtractor, TagCaseNormalizer
from .repairers import JSONRepairer, MarkupRepairer

logger = logging.getLogger(__name__)


class CodeProcessor:
    """Applies an ordered sequence of processing steps to text."""

    def __init__(
        self, steps: Optional[Iterable[Step]] = None, name: str = "processor"
    ):
        self.name = name
        self._steps: tuple[Step, ...] = ()
        self._frozen = False
        for step in steps or ():
            self._append(step)

    def _append(self, step: Step) -> None:
        if not callable(step):
            raise ConfigurationError(
                f"Processing steps must be callable, got {type(step).__name__}"
            )
        # Rebind rather than mutate so running process() calls keep their snapshot
        self._steps = self._steps + (step,)

    @property
    def steps(self) -> tuple[Step, ...]:
        """The configured steps, in execution order."""
        return self._steps

    @property
    def step_names(self) -> list[str]:
        return [step_name(step) for step in self._steps]

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add_step(self, step: Step) -> "CodeProcessor":
        """Append a step and return this processor for chaining."""
        if self._frozen:
            raise ProcessorFrozenError(self.name)
        self._append(step)
        return self

    def with_steps(self, *steps: Step) -> "CodeProcessor":
        """Return a new, unfrozen processor with extra steps appended."""
        return CodeProcessor((*self._steps, *steps), name=self.name)

    def freeze(self) -> "CodeProcessor":
        """Disallow further add_step calls; used for shared presets."""
        self._frozen = True
        return self

    def process(self, text: Any) -> Any:
        """Apply all steps to the text, isolating failing steps."""
        return self.process_with_report(text).text

    def process_with_report(self, text: Any) -> ProcessingResult:
        """Apply all steps and return the final text with per-step outcomes."""
        result = ProcessingResult(text=text)
        for step in self._steps:
            result.record(self._run_step(step, result.text))
        return result

    def _run_step(self, step: Step, text: Any) -> StepOutcome:
        name = step_name(step)
        try:
            return StepOutcome.success(name, text, step(text))
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning(
                f"Step '{name}' of {self.name} failed "
                f"({type(e).__name__}: {e}); keeping its input",
                exc_info=True,
            )
            return StepOutcome.failure(name, text, e)

    def __call__(self, text: Any) -> Any:
        return self.process(text)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"CodeProcessor(name={self.name!r}, steps={self.step_names!r})"

    @classmethod
    def create_array_json_processor(
        cls,
        geometry_hook: Optional[Callable[[str], str]] = None,
        config: Optional[ProcessorConfig] = None,
    ) -> "CodeProcessor":
        """Create the processor for element arrays (JSON in, JSON array out)."""
        config = config or ProcessorConfig.for_json()
        extractor = StrictArrayExtractor() if config.strict_array else JSONExtractor()
        return cls(
            [
                CleanupStep(),
                CodeFenceExtractor(config.fence_language),
                extractor,
                JSONRepairer(),
                GeometryHookStep(geometry_hook),
                ArrayFinalizer(config.array_fields, config.indent),
            ],
            name="json_array",
        )

    @classmethod
    def create_markup_processor(
        cls,
        custom_steps: Sequence[Step] = (),
        config: Optional[ProcessorConfig] = None,
    ) -> "CodeProcessor":
        """Create the processor for XML diagram documents."""
        config = config or ProcessorConfig.for_markup()
        return cls(
            [
                CleanupStep(),
                CodeFenceExtractor(config.fence_language),
                EntityUnescaper(),
                MarkupBlockExtractor(config.root_tags),
                TagCaseNormalizer(config.canonical_tags),
                *custom_steps,
                MarkupRepairer(config.case_insensitive, config.void_tags),
            ],
            name="markup",
        )

    @classmethod
    def create_json_processor(
        cls,
        custom_steps: Sequence[Step] = (),
        config: Optional[ProcessorConfig] = None,
    ) -> "CodeProcessor":
        """Create a general JSON processor without array finalization."""
        config = config or ProcessorConfig.for_json()
        return cls(
            [
                CleanupStep(),
                CodeFenceExtractor(config.fence_language),
                JSONExtractor(),
                *custom_steps,
                JSONRepairer(),
            ],
            name="json",
        )


def create_processor(*steps: Step) -> CodeProcessor:
    """Create a custom processor from the given steps."""
    return CodeProcessor(steps, name="custom")


def create_array_json_processor(
    geometry_hook: Optional[Callable[[str], str]] = None,
    config: Optional[ProcessorConfig] = None,
) -> CodeProcessor:
    return CodeProcessor.create_array_json_processor(geometry_hook, config)


def create_markup_processor(
    custom_steps: Sequence[Step] = (),
    config: Optional[ProcessorConfig] = None,
) -> CodeProcessor:
    return CodeProcessor.create_markup_processor(custom_steps, config)


def create_json_processor(
    custom_steps: Sequence[Step] = (),
    config: Optional[ProcessorConfig] = None,
) -> CodeProcessor:
    return CodeProcessor.create_json_processor(custom_steps, config)


# Shared presets, built once at import
JSON_ARRAY_PROCESSOR = CodeProcessor.create_array_json_processor().freeze()
MARKUP_PROCESSOR = CodeProcessor.create_markup_processor().freeze()
