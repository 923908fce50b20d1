"""Text-level helpers for flat config and schema lines."""

from .classifier import classify_line, is_ignorable_line
from .patterns import LinePatterns

__all__ = ["LinePatterns", "classify_line", "is_ignorable_line"]
