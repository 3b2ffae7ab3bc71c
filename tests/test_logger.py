from __future__ import annotations

import logging
from datetime import date

from stocksim.domain.models import IndicatorSnapshot, MacdResult, PriceBar
from stocksim.logging.logger import HumanLogger


class _RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def _with_handler() -> tuple[HumanLogger, _RecordingHandler]:
    logger = HumanLogger("DEBUG")
    handler = _RecordingHandler()
    logging.getLogger("stocksim").addHandler(handler)
    return logger, handler


def test_line_types() -> None:
    logger, handler = _with_handler()
    bar = PriceBar(date(2026, 3, 31), 100.0, 1012.5, 99.0, 1001.25, 12_345)
    try:
        logger.tick("TCS", bar)
        logger.alert("TCS", 1000.0, 1001.25)
        logger.indicators("TCS", IndicatorSnapshot())
        logger.indicators("TCS", IndicatorSnapshot(rsi=55.5, macd=MacdResult(1.0, 0.5, 0.5)))
        logger.error("boom")
    finally:
        logging.getLogger("stocksim").removeHandler(handler)

    messages = [record.getMessage() for record in handler.records]
    assert messages[0] == "tick | TCS | close 1,001.25 | high 1,012.50 | low 99.00 | vol 12,345"
    assert handler.records[0].levelno == logging.DEBUG
    assert messages[1] == "alert | TCS | crossed 1,000.00 | close 1,001.25"
    assert messages[2] == "indicators | TCS | rsi n/a | macd n/a"
    assert messages[3] == "indicators | TCS | rsi 55.50 | macd +1.000 signal +0.500 hist +0.500"
    assert messages[4] == "error | boom"
    assert handler.records[4].levelno == logging.ERROR


def test_logger_does_not_duplicate_handlers() -> None:
    HumanLogger()
    count = len(logging.getLogger("stocksim").handlers)

    HumanLogger("WARNING")

    assert len(logging.getLogger("stocksim").handlers) == count
