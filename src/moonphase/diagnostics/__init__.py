"""Diagnostics package.

- events: phase changes and zodiac ingresses over a window (requires numpy)
"""

__all__ = ["events"]
