"""Synthetic market data generation."""

from .base import MarketDataProvider
from .profiles import KNOWN_PROFILES, resolve_profile, seeded_random, symbol_seed
from .synthetic import SERIES_LENGTH, SyntheticDataProvider, generate_series, next_tick

__all__ = [
    "KNOWN_PROFILES",
    "MarketDataProvider",
    "SERIES_LENGTH",
    "SyntheticDataProvider",
    "generate_series",
    "next_tick",
    "resolve_profile",
    "seeded_random",
    "symbol_seed",
]
