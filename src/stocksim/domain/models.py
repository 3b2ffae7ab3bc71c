"""Core market-data domain models."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date

import pandas as pd

OHLCV_COLUMNS = ["open", "high", "low", "close", "volume"]


@dataclass(frozen=True)
class PriceBar:
    """One OHLCV observation for a single trading day."""

    timestamp: date
    open: float
    high: float
    low: float
    close: float
    volume: int


@dataclass(frozen=True)
class SymbolProfile:
    """Static generation parameters for one symbol."""

    symbol: str
    base_price: float
    volatility: float
    base_volume: int
    known: bool = False


@dataclass(frozen=True)
class MacdResult:
    """Latest MACD, signal and histogram values."""

    macd: float
    signal: float
    histogram: float


@dataclass(frozen=True)
class IndicatorSnapshot:
    """Indicators derived from a series at one point in time."""

    sma: dict[int, list[float | None]] = field(default_factory=dict)
    rsi: float | None = None
    macd: MacdResult | None = None


def bars_to_frame(bars: Sequence[PriceBar]) -> pd.DataFrame:
    """Convert bars to an OHLCV frame with a datetime index."""
    frame = pd.DataFrame(
        [[bar.open, bar.high, bar.low, bar.close, bar.volume] for bar in bars],
        columns=OHLCV_COLUMNS,
        index=pd.DatetimeIndex([pd.Timestamp(bar.timestamp) for bar in bars], name="date"),
    )
    frame["volume"] = frame["volume"].astype("int64")
    return frame
