"""Synthetic stock price series and technical indicators."""

from .data.synthetic import generate_series, next_tick
from .domain.models import IndicatorSnapshot, MacdResult, PriceBar, SymbolProfile
from .errors import ConfigError, InvalidInputError, StockSimError
from .indicators import compute_indicators, ema, indicator_frame, macd, rsi, sma

__all__ = [
    "ConfigError",
    "IndicatorSnapshot",
    "InvalidInputError",
    "MacdResult",
    "PriceBar",
    "StockSimError",
    "SymbolProfile",
    "compute_indicators",
    "ema",
    "generate_series",
    "indicator_frame",
    "macd",
    "next_tick",
    "rsi",
    "sma",
]
