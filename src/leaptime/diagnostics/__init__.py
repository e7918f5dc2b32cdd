"""Diagnostics package.

Optional tools; need the diagnostics extra (numpy + matplotlib).
"""

__all__ = ["offsets_plot"]
