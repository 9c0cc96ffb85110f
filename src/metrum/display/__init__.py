"""Presentation package.

- render: styled clock text, progress ratios and the clock panel (rich)
- live: the refreshing terminal clock
"""

__all__ = ["render", "live"]
