"""Diagnostics package.

- accuracy: always available, compares every entry point against math.cos/math.sin
- error_plot: optional (requires the diagnostics extras: numpy + matplotlib)
"""

__all__ = ["accuracy", "error_plot"]
