"""Visualization helpers for :mod:`token_yield_lab`."""

from .visualizer import Visualizer

__all__ = ["Visualizer"]
