"""Core data structures for :mod:`token_yield_lab`.

This subpackage groups the fundamental models, configuration objects and
repositories used across the project so they can be shared without
importing the entire public interface exposed in
:mod:`token_yield_lab.__init__`.
"""

from __future__ import annotations

from .config import Compounding, MarketConfig, ProjectionConfig
from .models import (
    CurrentStats,
    MarketSnapshot,
    PricePoint,
    ProjectionPoint,
    ProjectionResult,
    ProjectionSummary,
)
from .repositories import PriceHistory

__all__ = [
    "Compounding",
    "CurrentStats",
    "MarketConfig",
    "MarketSnapshot",
    "PriceHistory",
    "PricePoint",
    "ProjectionConfig",
    "ProjectionPoint",
    "ProjectionResult",
    "ProjectionSummary",
]
