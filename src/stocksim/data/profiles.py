"""Symbol profiles and the deterministic seed used to synthesize series."""

from __future__ import annotations

import math

from stocksim.domain.models import SymbolProfile
from stocksim.errors import InvalidInputError

# symbol: (base_price, volatility, base_volume)
KNOWN_PROFILES: dict[str, tuple[float, float, int]] = {
    "RELIANCE": (2900.0, 0.025, 5_000_000),
    "TCS": (3800.0, 0.02, 2_000_000),
    "HDFCBANK": (1500.0, 0.022, 8_000_000),
    "INFY": (1600.0, 0.028, 6_000_000),
    "ICICIBANK": (1100.0, 0.03, 12_000_000),
    "HINDUNILVR": (2400.0, 0.018, 1_500_000),
    "SBIN": (830.0, 0.035, 15_000_000),
    "BHARTIARTL": (1300.0, 0.032, 7_000_000),
    "ITC": (430.0, 0.02, 10_000_000),
    "L&T": (3600.0, 0.025, 2_500_000),
    "BAJFINANCE": (7000.0, 0.04, 1_000_000),
    "KOTAKBANK": (1700.0, 0.027, 4_000_000),
    "ASIANPAINT": (2900.0, 0.021, 1_200_000),
    "MARUTI": (12500.0, 0.029, 500_000),
    "TITAN": (3400.0, 0.031, 1_800_000),
    "SUNPHARMA": (1500.0, 0.033, 3_000_000),
    "ULTRACEMCO": (10500.0, 0.024, 400_000),
    "WIPRO": (480.0, 0.03, 9_000_000),
    "NESTLEIND": (2500.0, 0.015, 300_000),
    "ADANIENT": (3200.0, 0.05, 4_500_000),
    "TATAMOTORS": (980.0, 0.045, 20_000_000),
    "TATASTEEL": (165.0, 0.048, 30_000_000),
    "YESBANK": (24.0, 0.06, 100_000_000),
    "ZOMATO": (190.0, 0.055, 50_000_000),
}


def normalize_symbol(identifier: object) -> str:
    """Validate and upper-case a symbol identifier."""
    if not isinstance(identifier, str):
        raise InvalidInputError(
            f"Invalid stock symbol provided: expected str, got {type(identifier).__name__}"
        )
    symbol = identifier.strip().upper()
    if not symbol:
        raise InvalidInputError("Invalid stock symbol provided: identifier is empty")
    return symbol


def symbol_seed(symbol: str) -> int:
    """Fold symbol characters into a signed 32-bit rolling hash."""
    value = 0
    for char in symbol:
        value = (value * 31 + ord(char)) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def seeded_random(seed: int) -> float:
    """Return a reproducible draw in [0, 1) for an integer seed."""
    x = math.sin(seed) * 10000
    return x - math.floor(x)


def resolve_profile(identifier: str) -> SymbolProfile:
    """Return the static profile for a symbol, or derive one from its seed."""
    symbol = normalize_symbol(identifier)
    known = KNOWN_PROFILES.get(symbol)
    if known is not None:
        base_price, volatility, base_volume = known
        return SymbolProfile(
            symbol=symbol,
            base_price=base_price,
            volatility=volatility,
            base_volume=base_volume,
            known=True,
        )
    magnitude = abs(symbol_seed(symbol))
    return SymbolProfile(
        symbol=symbol,
        base_price=float(magnitude % 8000 + 50),
        volatility=(magnitude % 20 + 20) / 1000,
        base_volume=magnitude % 10_000_000 + 500_000,
    )
