from __future__ import annotations

from datetime import date

import stocksim


def test_top_level_operations_compose() -> None:
    bars = stocksim.generate_series("TESTCO", today=date(2026, 3, 31))
    live = [*bars[:-1], stocksim.next_tick(bars[-1])]

    assert len(live) == 90
    assert len(stocksim.sma(live, 20)) == 90
    assert stocksim.rsi(live) is not None
    assert isinstance(stocksim.macd(live), stocksim.MacdResult)
    assert issubclass(stocksim.InvalidInputError, stocksim.StockSimError)
