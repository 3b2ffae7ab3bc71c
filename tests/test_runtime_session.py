from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from datetime import date

import pytest

from stocksim.config import Settings
from stocksim.errors import InvalidInputError
from stocksim.logging.logger import HumanLogger
from stocksim.runtime import SymbolSession

TODAY = date(2026, 3, 31)


class _RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


@pytest.fixture()
def recorded() -> Iterator[_RecordingHandler]:
    handler = _RecordingHandler()
    logger = logging.getLogger("stocksim")
    logger.addHandler(handler)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)


def _session(**overrides: object) -> SymbolSession:
    settings = Settings(log_level="DEBUG").with_overrides(**overrides)
    return SymbolSession(settings, logger=HumanLogger("DEBUG"), noise=random.Random(4))


def test_load_generates_series_for_upper_cased_symbol(recorded: _RecordingHandler) -> None:
    session = _session()

    bars = session.load("infy", today=TODAY)

    assert session.symbol == "INFY"
    assert len(bars) == 90
    assert session.bars == bars
    assert any(message.startswith("series | INFY | 90 bars") for message in recorded.messages)
    assert "profile static" in recorded.messages[-1]


def test_loading_new_symbol_discards_previous_series() -> None:
    session = _session()
    first = session.load("TCS", today=TODAY)

    second = session.load("TESTCO", today=TODAY)

    assert session.symbol == "TESTCO"
    assert session.bars == second
    assert session.bars != first


def test_invalid_symbol_raises_before_touching_state() -> None:
    session = _session()
    bars = session.load("TCS", today=TODAY)

    with pytest.raises(InvalidInputError):
        session.load("  ")

    assert session.symbol == "TCS"
    assert session.bars == bars


def test_indicators_follow_configured_periods(recorded: _RecordingHandler) -> None:
    session = _session(sma_periods=(5,), rsi_period=7)
    session.load("ITC", today=TODAY)

    snapshot = session.indicators()

    assert list(snapshot.sma) == [5]
    assert snapshot.sma[5][:4] == [None] * 4
    assert snapshot.rsi is not None
    assert snapshot.macd is not None
    assert recorded.messages[-1].startswith("indicators | ITC | rsi ")


def test_chart_frame_uses_caller_visible_overlays() -> None:
    session = _session()
    session.load("ITC", today=TODAY)

    default_frame = session.chart_frame()
    sma20_only = session.chart_frame(visible_sma_periods=[20])

    assert {"sma_20", "sma_50"} <= set(default_frame.columns)
    assert "sma_50" not in sma20_only.columns


def test_operations_before_load_raise() -> None:
    session = _session()

    with pytest.raises(ValueError, match="load"):
        session.indicators()
    with pytest.raises(ValueError, match="load"):
        session.go_live()


def test_go_live_then_stop_keeps_ticked_bars(recorded: _RecordingHandler) -> None:
    session = _session(live_interval_seconds=60.0)
    session.load("SBIN", today=TODAY)

    feed = session.go_live(alert_price=1.0)
    feed.step()
    feed.step()
    live_bars = session.bars
    session.stop_live()

    assert session.is_live is False
    assert session.bars == live_bars
    assert len(session.bars) == 90
    assert any(message.startswith("live | SBIN | started") for message in recorded.messages)
    assert "live | SBIN | stopped | 2 ticks" in recorded.messages


def test_load_stops_running_feed() -> None:
    session = _session(live_interval_seconds=60.0)
    session.load("SBIN", today=TODAY)
    feed = session.go_live()

    session.load("TCS", today=TODAY)

    assert feed.running is False
    assert session.is_live is False
    assert session.alert is None
