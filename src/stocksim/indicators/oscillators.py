"""Momentum oscillators: RSI and MACD."""

from __future__ import annotations

from collections.abc import Sequence

from stocksim.domain.models import MacdResult
from stocksim.indicators.moving_average import Series, closes_of, ema


def rsi(series: Series, period: int = 14) -> float | None:
    """Latest Wilder-smoothed relative strength index, or None if too short."""
    if period <= 0:
        raise ValueError("period must be positive")
    closes = closes_of(series)
    if len(closes) <= period:
        return None

    changes = [current - previous for previous, current in zip(closes, closes[1:])]
    seed = changes[:period]
    avg_gain = sum(change for change in seed if change > 0) / period
    avg_loss = sum(-change for change in seed if change < 0) / period

    for change in changes[period:]:
        gain = change if change > 0 else 0.0
        loss = -change if change < 0 else 0.0
        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period

    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    return 100 - 100 / (1 + rs)


def macd_line(closes: Sequence[float], short: int = 12, long: int = 26) -> list[float]:
    """Short EMA minus long EMA, aligned by a fixed index offset.

    ``line[i] = ema_short[i + (long - short)] - ema_long[i]``, so the line
    is ``long - short`` values shorter than ``closes``.
    """
    if short <= 0 or long <= 0:
        raise ValueError("MACD periods must be positive")
    if short >= long:
        raise ValueError("short period must be less than long period")
    offset = long - short
    ema_short = ema(closes, short)
    ema_long = ema(closes, long)
    return [
        ema_short[index + offset] - ema_long[index]
        for index in range(len(ema_long))
        if index + offset < len(ema_short)
    ]


def macd(
    series: Series,
    short: int = 12,
    long: int = 26,
    signal: int = 9,
) -> MacdResult | None:
    """Latest MACD, signal and histogram, or None if history is too short."""
    if signal <= 0:
        raise ValueError("MACD periods must be positive")
    closes = closes_of(series)
    line = macd_line(closes, short, long)
    if len(closes) < long or len(line) < signal:
        return None

    signal_line = ema(line, signal)
    last_macd = line[-1]
    last_signal = signal_line[-1]
    return MacdResult(
        macd=last_macd,
        signal=last_signal,
        histogram=last_macd - last_signal,
    )
