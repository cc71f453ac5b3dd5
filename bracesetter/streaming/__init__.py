"""
bracesetter streaming support.
"""

from .processor import StreamingProcessor

__all__ = ["StreamingProcessor"]
