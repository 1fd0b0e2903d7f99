"""Daily-compounding value projection over a historical price series.

The engine is a pure function of its inputs: it performs no I/O, keeps no
state and resolves degenerate inputs (empty series, zero prices, zero
principal) to empty or zero-filled results instead of raising.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import date, datetime, time, tzinfo

import pandas as pd

from ..core import (
    Compounding,
    PriceHistory,
    PricePoint,
    ProjectionPoint,
    ProjectionResult,
    ProjectionSummary,
)
from ..core.constants import DAYS_PER_YEAR, DEFAULT_FALLBACK_WINDOW

logger = logging.getLogger(__name__)

DateLike = date | datetime | str


def _finite_or_zero(value: object) -> float:
    try:
        out = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    return out if math.isfinite(out) else 0.0


def daily_rate(annual_yield_percent: float) -> float:
    """Effective daily rate that compounds to ``annual_yield_percent`` over a year.

    ``(1 + A/100) ** (1/365) - 1``. A non-finite APR counts as zero and an APR
    at or below -100% maps to a total loss (``-1.0``).
    """

    growth = 1.0 + _finite_or_zero(annual_yield_percent) / 100.0
    if growth <= 0.0:
        return -1.0
    return growth ** (1.0 / DAYS_PER_YEAR) - 1.0


def _as_date(value: DateLike, tz: tzinfo | None) -> date:
    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            return value.astimezone(tz).date()
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Unsupported start date: {value!r}")


def _midnight_ms(day: date, tz: tzinfo | None) -> int:
    # naive datetimes resolve in the local timezone
    return int(datetime.combine(day, time.min, tzinfo=tz).timestamp() * 1000)


def _localise(timestamp_ms: int, tz: tzinfo | None) -> datetime:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=tz)


def select_window(
    series: Sequence[PricePoint],
    start_date: DateLike,
    *,
    fallback_window: int | None = DEFAULT_FALLBACK_WINDOW,
    tz: tzinfo | None = None,
) -> tuple[list[PricePoint], bool]:
    """Return points on or after ``start_date`` midnight and a fallback flag.

    When the start date lies after every observation the most recent
    ``fallback_window`` points are used instead, or the whole series when
    ``fallback_window`` is ``None`` or not positive.
    """

    history = PriceHistory(series)
    window = history.since(_midnight_ms(_as_date(start_date, tz), tz))
    if len(window) or not len(history):
        return window.to_list(), False
    if fallback_window is None or fallback_window <= 0:
        fallback = history
    else:
        fallback = history.tail(fallback_window)
    logger.debug("Start date %s has no data; using %d fallback points", start_date, len(fallback))
    return fallback.to_list(), True


def _roi(profit: float, principal: float) -> float:
    if principal == 0.0:
        return float("nan")
    return profit / principal * 100.0


def summarize(
    points: Sequence[ProjectionPoint],
    principal: float,
    rate: float,
    *,
    tz: tzinfo | None = None,
) -> ProjectionSummary | None:
    """Summarise a projection from its last point, or ``None`` when empty."""

    if not points:
        return None
    first, last = points[0], points[-1]
    principal = _finite_or_zero(principal)
    net = last.usd_value - principal
    days = (_localise(last.timestamp, tz).date() - _localise(first.timestamp, tz).date()).days
    return ProjectionSummary(
        total_usd_value=last.usd_value,
        total_tokens=last.token_balance,
        net_profit_usd=net,
        total_roi_percent=_roi(net, principal),
        multiplier=last.multiplier,
        daily_estimate_usd=last.usd_value * rate,
        days_elapsed=days,
    )


def project(
    series: Sequence[PricePoint],
    principal: float,
    annual_yield_percent: float,
    start_date: DateLike,
    fallback_price: float = 0.0,
    *,
    fallback_window: int | None = DEFAULT_FALLBACK_WINDOW,
    compounding: Compounding = "point",
    tz: tzinfo | None = None,
) -> ProjectionResult:
    """Project the USD value of ``principal`` invested at ``start_date``.

    Parameters
    ----------
    series:
        Daily price points, ascending by timestamp. May be empty.
    principal:
        Initial investment in USD. Negative or NaN values count as zero.
    annual_yield_percent:
        Nominal APR in percent, compounded daily.
    start_date:
        Investment date; its local midnight (in ``tz``) bounds the window.
    fallback_price:
        Base price used when the first point of the window has no price.
    fallback_window:
        Number of trailing points used when ``start_date`` is after all data.
    compounding:
        ``"point"`` advances one compounding step per data point, as the
        chart has always done. ``"calendar"`` advances by elapsed calendar
        days so gaps in the series still accrue yield.
    tz:
        Timezone for date boundaries and labels; local time when ``None``.
    """

    if compounding not in ("point", "calendar"):
        raise ValueError(f"Unknown compounding mode: {compounding!r}")

    rate = daily_rate(annual_yield_percent)
    window, used_fallback = select_window(
        series, start_date, fallback_window=fallback_window, tz=tz
    )
    if not window:
        return ProjectionResult(daily_rate=rate, used_fallback_window=used_fallback)

    base_price = _finite_or_zero(window[0].price)
    if base_price <= 0.0:
        base_price = _finite_or_zero(fallback_price)
    if base_price <= 0.0:
        logger.info("No usable base price; projection is empty")
        return ProjectionResult(daily_rate=rate, used_fallback_window=used_fallback)

    amount = max(_finite_or_zero(principal), 0.0)
    initial_tokens = amount / base_price
    first_day = _localise(window[0].timestamp, tz).date()

    points: list[ProjectionPoint] = []
    for i, point in enumerate(window):
        when = _localise(point.timestamp, tz)
        steps = i if compounding == "point" else (when.date() - first_day).days
        growth = (1.0 + rate) ** steps
        balance = initial_tokens * growth
        usd_value = balance * point.price
        profit = usd_value - amount
        points.append(
            ProjectionPoint(
                timestamp=point.timestamp,
                date_label=when.strftime("%m-%d"),
                full_date=when.strftime("%Y-%m-%d"),
                price=point.price,
                token_balance=balance,
                usd_value=usd_value,
                multiplier=growth,
                profit_usd=profit,
                roi_percent=_roi(profit, amount),
            )
        )

    return ProjectionResult(
        points=points,
        summary=summarize(points, amount, rate, tz=tz),
        daily_rate=rate,
        base_price=base_price,
        used_fallback_window=used_fallback,
    )


def projection_frame(result: ProjectionResult) -> pd.DataFrame:
    """Projection points as a DataFrame indexed by UTC timestamp."""

    if result.empty:
        return pd.DataFrame()
    df = pd.DataFrame([p.to_dict() for p in result.points])
    df.index = pd.to_datetime(df.pop("timestamp"), unit="ms", utc=True)
    df.index.name = "timestamp"
    return df


__all__ = ["daily_rate", "project", "projection_frame", "select_window", "summarize"]
