"""
Base classes for processing steps.

A step is any callable taking text and returning text. Steps derived from
ProcessingStepBase get a stable name and skip non-string or empty input
automatically, so each ``process`` only ever sees real text.
"""

from typing import Any, Callable, Optional

Step = Callable[[Any], Any]


class ProcessingStepBase:
    """Base class for processing steps with common functionality."""

    name: str = "step"

    def should_apply(self, text: Any) -> bool:
        """Default implementation - apply to non-empty strings only."""
        return isinstance(text, str) and bool(text)

    def process(self, text: str) -> str:
        """Process the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")

    def __call__(self, text: Any) -> Any:
        if not self.should_apply(text):
            return text
        return self.process(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FunctionStep(ProcessingStepBase):
    """Adapts a plain ``str -> str`` function into a named step."""

    def __init__(self, func: Callable[[str], str], name: Optional[str] = None):
        self.func = func
        self.name = name or step_name(func)

    def process(self, text: str) -> str:
        return self.func(text)


def step_name(step: Step) -> str:
    """Best available human-readable name for a step; never raises."""
    try:
        name = getattr(step, "name", None)
        if isinstance(name, str) and name:
            return name
        name = getattr(step, "__name__", None)
        if isinstance(name, str) and name and name != "<lambda>":
            return name
        return repr(step)
    except Exception:  # pylint: disable=broad-exception-caught
        return type(step).__name__
