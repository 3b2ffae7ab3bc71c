"""Simple and exponential moving averages over closing prices."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from stocksim.domain.models import PriceBar

Series = Sequence[PriceBar] | pd.DataFrame


def closes_of(series: Series) -> list[float]:
    """Extract closing prices from bars or an OHLCV frame."""
    if isinstance(series, pd.DataFrame):
        if "close" not in series.columns:
            raise ValueError("bars must include close column")
        return [float(value) for value in series["close"]]
    return [float(bar.close) for bar in series]


def _check_period(period: int) -> None:
    if period <= 0:
        raise ValueError("period must be positive")


def sma(series: Series, period: int) -> list[float | None]:
    """Trailing simple moving average, ``None`` for the first ``period - 1`` bars."""
    _check_period(period)
    closes = closes_of(series)
    if len(closes) < period:
        return [None] * len(closes)

    values: list[float | None] = [None] * (period - 1)
    window_sum = sum(closes[:period])
    values.append(window_sum / period)
    for index in range(period, len(closes)):
        window_sum += closes[index] - closes[index - period]
        values.append(window_sum / period)
    return values


def ema(closes: Sequence[float], period: int) -> list[float]:
    """Exponential moving average seeded with the first value.

    Unlike ``sma`` there is no warm-up gap: the output has a value for
    every input, starting with ``closes[0]`` itself.
    """
    _check_period(period)
    k = 2 / (period + 1)
    values: list[float] = []
    for close in closes:
        if not values:
            values.append(float(close))
            continue
        values.append(close * k + values[-1] * (1 - k))
    return values
