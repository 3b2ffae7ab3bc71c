"""Technical indicators computed from OHLCV series."""

from .moving_average import closes_of, ema, sma
from .oscillators import macd, macd_line, rsi
from .snapshot import DEFAULT_SMA_PERIODS, compute_indicators, indicator_frame

__all__ = [
    "DEFAULT_SMA_PERIODS",
    "closes_of",
    "compute_indicators",
    "ema",
    "indicator_frame",
    "macd",
    "macd_line",
    "rsi",
    "sma",
]
