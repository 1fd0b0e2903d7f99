"""Analytics subpackage bundling the compounding projection engine."""

from . import projection
from .projection import daily_rate, project, projection_frame, select_window, summarize

__all__ = [
    "daily_rate",
    "project",
    "projection",
    "projection_frame",
    "select_window",
    "summarize",
]
