"""Matplotlib-based chart helpers for TokenYieldLab."""

from __future__ import annotations

import pandas as pd


class Visualizer:
    """Collection of static helpers that turn projection outputs into charts."""

    @staticmethod
    def _plt():
        try:
            import matplotlib.pyplot as plt
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(
                "matplotlib is required for visualization. Install via pip."
            ) from exc
        return plt

    @staticmethod
    def projection_chart(
        frame: pd.DataFrame,
        title: str = "Projected Holding Value",
        *,
        principal: float | None = None,
        value_col: str = "usd_value",
        save_path: str | None = None,
        show: bool = True,
    ) -> None:
        """Area chart of the projected USD value, with the principal as a baseline."""
        if frame.empty:
            return
        plt = Visualizer._plt()
        plt.figure(figsize=(10, 6))
        plt.fill_between(frame.index, frame[value_col], alpha=0.3)
        plt.plot(frame.index, frame[value_col], label="Value (USD)")
        if principal is not None:
            plt.axhline(principal, linestyle="--", linewidth=1.0, label="Principal")
            plt.legend()
        plt.xlabel("Date")
        plt.ylabel("USD")
        plt.title(title)
        plt.tight_layout()
        if save_path:
            plt.savefig(save_path, bbox_inches="tight")
        if show:
            plt.show()

    @staticmethod
    def price_chart(
        frame: pd.DataFrame,
        title: str = "Token Price",
        *,
        price_col: str = "price",
        save_path: str | None = None,
        show: bool = True,
    ) -> None:
        """Plot the close price series."""
        if frame.empty:
            return
        plt = Visualizer._plt()
        plt.figure(figsize=(10, 6))
        plt.plot(frame.index, frame[price_col])
        plt.xlabel("Date")
        plt.ylabel("Price (USD)")
        plt.title(title)
        plt.tight_layout()
        if save_path:
            plt.savefig(save_path, bbox_inches="tight")
        if show:
            plt.show()


__all__ = ["Visualizer"]
