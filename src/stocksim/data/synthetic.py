"""Deterministic synthetic OHLCV series generator.

Every series is driven by two separate random sources:

* seeded draws derived from the symbol (drift, cycle shapes, volatility
  clustering). These are identical on every run for the same symbol.
* an unseeded ``noise`` source (shock events, open jitter, candle noise,
  high/low extensions, volume). This is what makes two plain calls differ;
  pass a fixed ``random.Random`` to reproduce a series bit for bit.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Protocol

import pandas as pd

from stocksim.data.profiles import resolve_profile, seeded_random, symbol_seed
from stocksim.domain.models import PriceBar, SymbolProfile, bars_to_frame

SERIES_LENGTH = 90
MIN_PRICE = 0.01
SHOCK_PROBABILITY = 0.015
SHOCK_MAGNITUDE = 0.15
TICK_VOLATILITY = 0.0005


class NoiseSource(Protocol):
    """Anything with a ``random()`` method returning floats in [0, 1)."""

    def random(self) -> float:
        """Return the next draw."""


@dataclass(frozen=True)
class TrendShape:
    """Seed-derived parameters shared by every bar of a series."""

    drift: float
    cycle_period_1: float
    cycle_strength_1: float
    cycle_period_2: float
    cycle_strength_2: float

    @classmethod
    def from_seed(cls, seed: int) -> TrendShape:
        """Draw the drift and both cycle shapes from the symbol seed."""
        return cls(
            drift=(seeded_random(seed + 1) - 0.5) * 0.005,
            cycle_period_1=seeded_random(seed + 2) * 40 + 20,
            cycle_strength_1=seeded_random(seed + 3) * 0.01,
            cycle_period_2=seeded_random(seed + 4) * 20 + 10,
            cycle_strength_2=seeded_random(seed + 5) * 0.005,
        )

    def base_trend(self, index: int) -> float:
        """Drift plus the two superimposed cycles for one bar."""
        trend = self.drift
        trend += math.sin(index * 2 * math.pi / self.cycle_period_1) * self.cycle_strength_1
        trend += math.sin(index * 2 * math.pi / self.cycle_period_2) * self.cycle_strength_2
        return trend


def clustered_volatility(base_volatility: float, seed: int, index: int) -> float:
    """Base volatility jittered by up to 25% in either direction."""
    return base_volatility * (1 + (seeded_random(seed + index) - 0.5) * 0.5)


def generate_series(
    identifier: str,
    *,
    today: date | None = None,
    noise: NoiseSource | None = None,
) -> list[PriceBar]:
    """Synthesize a 90-day daily series ending at ``today`` for a symbol.

    Raises InvalidInputError when ``identifier`` is empty or not a string.
    """
    profile = resolve_profile(identifier)
    seed = symbol_seed(profile.symbol)
    shape = TrendShape.from_seed(seed)
    source = noise if noise is not None else random.Random()
    end = today or date.today()

    bars: list[PriceBar] = []
    last_close = profile.base_price
    momentum = 0.0
    for index in range(SERIES_LENGTH):
        daily_trend = shape.base_trend(index)
        daily_trend += momentum * 0.1
        volatility = clustered_volatility(profile.volatility, seed, index)
        if source.random() < SHOCK_PROBABILITY:
            daily_trend += (source.random() - 0.5) * SHOCK_MAGNITUDE

        bar = _synthesize_bar(
            end - timedelta(days=SERIES_LENGTH - 1 - index),
            last_close,
            volatility,
            daily_trend,
            profile,
            source,
        )
        change = (bar.close - last_close) / last_close
        momentum = momentum * 0.8 + change * 0.2
        bars.append(bar)
        last_close = bar.close
    return bars


def _synthesize_bar(
    day: date,
    last_close: float,
    volatility: float,
    trend: float,
    profile: SymbolProfile,
    source: NoiseSource,
) -> PriceBar:
    open_price = last_close * (1 + (source.random() - 0.5) * 0.005)
    random_factor = (source.random() - 0.5) * 2
    close = open_price + trend * open_price + random_factor * volatility * open_price
    high = max(open_price, close) + source.random() * volatility * open_price * 0.6
    low = min(open_price, close) - source.random() * volatility * open_price * 0.6
    volume = math.floor(
        profile.base_volume * (0.75 + source.random() * 0.5) * (1 + abs(trend) * 10)
    )

    final_open = _price(open_price)
    final_close = _price(close)
    return PriceBar(
        timestamp=day,
        open=final_open,
        high=max(_price(high), final_open, final_close),
        low=min(_price(low), final_open, final_close),
        close=final_close,
        volume=volume,
    )


def next_tick(last_bar: PriceBar, *, noise: NoiseSource | None = None) -> PriceBar:
    """Return ``last_bar`` moved by one small intraday tick.

    The result replaces the last bar of a series; it keeps the same
    timestamp and open.
    """
    source = noise if noise is not None else random.Random()
    new_close = last_bar.close * (1 + (source.random() - 0.5) * 2 * TICK_VOLATILITY)
    new_close = _price(new_close)
    return replace(
        last_bar,
        high=round(max(last_bar.high, new_close), 2),
        low=round(min(last_bar.low, new_close), 2),
        close=new_close,
        volume=last_bar.volume + math.floor(source.random() * 1000),
    )


def _price(value: float) -> float:
    return max(MIN_PRICE, round(value, 2))


class SyntheticDataProvider:
    """Serve freshly generated bars in the provider frame shape."""

    def __init__(self, today: date | None = None, noise: NoiseSource | None = None) -> None:
        self.today = today
        self.noise = noise

    def get_bars(self, symbol: str, today: date | None = None) -> pd.DataFrame:
        end = today or self.today
        return bars_to_frame(generate_series(symbol, today=end, noise=self.noise))
