"""Bundle indicators for display alongside a series."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from stocksim.domain.models import IndicatorSnapshot, bars_to_frame
from stocksim.indicators.moving_average import Series, sma
from stocksim.indicators.oscillators import macd, rsi

DEFAULT_SMA_PERIODS = (20, 50)


def compute_indicators(
    series: Series,
    sma_periods: Iterable[int] = DEFAULT_SMA_PERIODS,
    rsi_period: int = 14,
    macd_periods: tuple[int, int, int] = (12, 26, 9),
) -> IndicatorSnapshot:
    """Recompute every indicator from the current series."""
    short, long, signal = macd_periods
    return IndicatorSnapshot(
        sma={period: sma(series, period) for period in sma_periods},
        rsi=rsi(series, rsi_period),
        macd=macd(series, short=short, long=long, signal=signal),
    )


def indicator_frame(
    series: Series,
    sma_periods: Iterable[int] = DEFAULT_SMA_PERIODS,
) -> pd.DataFrame:
    """Return the bar frame with one ``sma_<period>`` column per requested overlay."""
    frame = series.copy() if isinstance(series, pd.DataFrame) else bars_to_frame(series)
    for period in sma_periods:
        values = sma(frame, period)
        frame[f"sma_{period}"] = pd.Series(values, index=frame.index, dtype="float64")
    return frame
