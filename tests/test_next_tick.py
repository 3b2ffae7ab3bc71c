from __future__ import annotations

import random
from datetime import date

import pytest

from stocksim.data.synthetic import next_tick
from stocksim.domain.models import PriceBar

BAR = PriceBar(
    timestamp=date(2026, 3, 31),
    open=100.0,
    high=101.5,
    low=99.2,
    close=100.4,
    volume=1_000_000,
)


class _FixedNoise:
    def __init__(self, *values: float) -> None:
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)


def test_tick_keeps_date_and_open() -> None:
    updated = next_tick(BAR)

    assert updated.timestamp == BAR.timestamp
    assert updated.open == BAR.open


def test_tick_widens_range_to_include_new_close() -> None:
    rng = random.Random(3)
    bar = BAR
    for _ in range(200):
        updated = next_tick(bar, noise=rng)
        assert updated.high >= max(bar.high, updated.close)
        assert updated.low <= min(bar.low, updated.close)
        assert updated.volume >= bar.volume
        bar = updated


def test_tick_move_is_bounded_by_tick_volatility() -> None:
    up = next_tick(BAR, noise=_FixedNoise(0.999999, 0.0))
    down = next_tick(BAR, noise=_FixedNoise(0.0, 0.0))

    assert up.close == pytest.approx(100.45)
    assert down.close == pytest.approx(100.35)
    assert up.volume == BAR.volume


def test_tick_new_high_moves_high() -> None:
    bar = PriceBar(date(2026, 3, 31), 100.0, 100.0, 99.0, 100.0, 10)

    updated = next_tick(bar, noise=_FixedNoise(0.999999, 0.5))

    assert updated.close == pytest.approx(100.05)
    assert updated.high == updated.close
    assert updated.low == 99.0
    assert updated.volume == 10 + 500


def test_tick_does_not_mutate_input() -> None:
    snapshot = PriceBar(**vars(BAR))

    next_tick(BAR)

    assert BAR == snapshot
