"""
Test cases for per-step outcome records.
"""

import unittest

from bracesetter.core.error_handling import (
    ProcessingResult,
    ProcessingStats,
    StepOutcome,
)


class TestStepOutcome(unittest.TestCase):
    def test_success(self):
        outcome = StepOutcome.success("upper", "a", "A")
        self.assertTrue(outcome.ok)
        self.assertTrue(outcome.changed)
        self.assertIsNone(outcome.error)

    def test_failure_carries_input_forward(self):
        error = ValueError("boom")
        outcome = StepOutcome.failure("broken", "a", error)
        self.assertFalse(outcome.ok)
        self.assertFalse(outcome.changed)
        self.assertEqual(outcome.output_text, "a")
        self.assertIs(outcome.error, error)


class TestProcessingResult(unittest.TestCase):
    def test_record_updates_text_and_stats(self):
        result = ProcessingResult(text="a")
        result.record(StepOutcome.success("upper", "a", "A"))
        result.record(StepOutcome.failure("broken", "A", RuntimeError("x")))

        self.assertEqual(result.text, "A")
        self.assertEqual(result.stats.attempted_steps, 2)
        self.assertEqual(result.stats.failed_steps, 1)
        self.assertEqual(result.stats.success_rate, 50.0)
        self.assertEqual([o.step_name for o in result.failures], ["broken"])
        self.assertFalse(result.ok)

    def test_empty_run(self):
        result = ProcessingResult(text=None)
        self.assertTrue(result.ok)
        self.assertEqual(ProcessingStats().success_rate, 100.0)


if __name__ == "__main__":
    unittest.main()
