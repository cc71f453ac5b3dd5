"""
Per-step outcome records for the processing pipeline.

A failing step never aborts a pipeline. Instead its outcome records the
exception and carries the step's input forward as its output, so callers
and tests can inspect exactly which steps failed and what they received.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class StepOutcome:
    """Result of running one step on one input."""

    step_name: str
    input_text: Optional[str]
    output_text: Optional[str]
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        """Whether the step completed without raising."""
        return self.error is None

    @property
    def changed(self) -> bool:
        """Whether the step altered its input."""
        return self.output_text != self.input_text

    @classmethod
    def success(
        cls, step_name: str, input_text: Optional[str], output_text: Optional[str]
    ) -> "StepOutcome":
        return cls(step_name, input_text, output_text)

    @classmethod
    def failure(
        cls, step_name: str, input_text: Optional[str], error: Exception
    ) -> "StepOutcome":
        """Outcome of a step that raised; its input becomes its output."""
        return cls(step_name, input_text, input_text, error)


@dataclass
class ProcessingStats:
    """Statistics about step execution for one pipeline run."""

    attempted_steps: int = 0
    failed_steps: int = 0

    @property
    def success_rate(self) -> float:
        """Percentage of steps that completed without raising."""
        if self.attempted_steps == 0:
            return 100.0
        return (
            (self.attempted_steps - self.failed_steps) / self.attempted_steps
        ) * 100.0


@dataclass
class ProcessingResult:
    """Final text of a pipeline run together with every step outcome."""

    text: Optional[str]
    outcomes: list[StepOutcome] = field(default_factory=list)
    stats: ProcessingStats = field(default_factory=ProcessingStats)

    def record(self, outcome: StepOutcome) -> None:
        """Append an outcome and carry its output forward."""
        self.outcomes.append(outcome)
        self.stats.attempted_steps += 1
        if not outcome.ok:
            self.stats.failed_steps += 1
        self.text = outcome.output_text

    @property
    def failures(self) -> list[StepOutcome]:
        """Outcomes of the steps that raised."""
        return [outcome for outcome in self.outcomes if not outcome.ok]

    @property
    def ok(self) -> bool:
        """Whether every step completed without raising."""
        return self.stats.failed_steps == 0
