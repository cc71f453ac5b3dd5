"""
Exception hierarchy for bracesetter.

Repair and extraction never raise for bad input text; these exceptions are
reserved for invalid configuration supplied by the caller.
"""


class BracesetterError(Exception):
    """Base class for all bracesetter errors."""


class ConfigurationError(BracesetterError, ValueError):
    """Raised when settings, modes or step definitions are invalid."""


class ProcessorFrozenError(ConfigurationError):
    """Raised when adding a step to a frozen (shared preset) processor."""

    def __init__(self, processor_name: str):
        self.processor_name = processor_name
        super().__init__(
            f"Processor '{processor_name}' is frozen; "
            f"use with_steps() to derive a new processor"
        )
