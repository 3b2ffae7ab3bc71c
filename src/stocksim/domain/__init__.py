"""Domain models for simulated price series and indicators."""

from .models import IndicatorSnapshot, MacdResult, PriceBar, SymbolProfile, bars_to_frame

__all__ = [
    "IndicatorSnapshot",
    "MacdResult",
    "PriceBar",
    "SymbolProfile",
    "bars_to_frame",
]
