"""
Test cases for the cleanup step.
"""

import unittest

from bracesetter.preprocessing.base import FunctionStep, step_name
from bracesetter.preprocessing.cleaners import CleanupStep, clean_bom


class TestCleanup(unittest.TestCase):
    def test_bom_and_zero_width_removed(self):
        self.assertEqual(clean_bom("\ufeff  [1]\u200b \n"), "[1]")

    def test_inner_whitespace_kept(self):
        self.assertEqual(clean_bom(" a  b "), "a  b")

    def test_non_string_input_passes_through(self):
        self.assertIsNone(clean_bom(None))
        self.assertEqual(clean_bom(""), "")
        self.assertEqual(CleanupStep()(42), 42)


class TestStepNames(unittest.TestCase):
    def test_named_step(self):
        self.assertEqual(step_name(CleanupStep()), "clean_bom")

    def test_plain_function(self):
        self.assertEqual(step_name(clean_bom), "clean_bom")

    def test_lambda_falls_back_to_repr(self):
        name = step_name(lambda text: text)
        self.assertIn("lambda", name)

    def test_function_step(self):
        step = FunctionStep(str.upper, name="shout")
        self.assertEqual(step.name, "shout")
        self.assertEqual(step("abc"), "ABC")
        self.assertIsNone(step(None))
        self.assertEqual(FunctionStep(clean_bom).name, "clean_bom")


if __name__ == "__main__":
    unittest.main()
