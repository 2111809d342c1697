"""Ordered map on a binary search tree with a caller-supplied ordering, a demo command and scored checks."""

__version__ = "0.1.0"
__all__ = ["treemap", "cli", "grader"]