"""
bracesetter Core Repair Engine.

This module provides the structural repair automatons. The dispatcher and
preset helpers live in ``core.engine``, which builds on the preprocessing
pipeline and is therefore not imported here.
"""

from .json_repair import fix_json_structure, is_likely_json, repair_json
from .tag_repair import auto_close_angle_brackets, fix_markup

__all__ = [
    'repair_json', 'fix_json_structure', 'is_likely_json',
    'fix_markup', 'auto_close_angle_brackets',
]
