"""Concise human-readable logger for generation and live updates."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from stocksim.domain.models import IndicatorSnapshot, PriceBar


class HumanLogger:
    """Console logger with fixed line types."""

    def __init__(self, level: str = "INFO") -> None:
        self._logger = logging.getLogger("stocksim")
        self._logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self._logger.propagate = False
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s | %(message)s", "%Y-%m-%d %H:%M:%S")
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    def series_generated(self, symbol: str, bars: Sequence[PriceBar], known: bool) -> None:
        if not bars:
            return None
        first, last = bars[0], bars[-1]
        change = (last.close - first.open) / first.open if first.open else 0.0
        self._logger.info(
            "series | %s | %s bars | %s..%s | profile %s | close %s | change %s",
            symbol,
            len(bars),
            first.timestamp.isoformat(),
            last.timestamp.isoformat(),
            "static" if known else "derived",
            self._format_price(last.close),
            f"{change * 100:+.2f}%",
        )

    def indicators(self, symbol: str, snapshot: IndicatorSnapshot) -> None:
        parts = [f"indicators | {symbol}"]
        parts.append(f"rsi {self._format_optional(snapshot.rsi)}")
        if snapshot.macd is None:
            parts.append("macd n/a")
        else:
            parts.append(
                f"macd {snapshot.macd.macd:+.3f} signal {snapshot.macd.signal:+.3f} "
                f"hist {snapshot.macd.histogram:+.3f}"
            )
        self._logger.info(" | ".join(parts))

    def live_started(self, symbol: str, interval_seconds: float) -> None:
        self._logger.info("live | %s | started | every %ss", symbol, f"{interval_seconds:g}")

    def live_stopped(self, symbol: str, ticks: int) -> None:
        self._logger.info("live | %s | stopped | %s ticks", symbol, ticks)

    def tick(self, symbol: str, bar: PriceBar) -> None:
        self._logger.debug(
            "tick | %s | close %s | high %s | low %s | vol %s",
            symbol,
            self._format_price(bar.close),
            self._format_price(bar.high),
            self._format_price(bar.low),
            f"{bar.volume:,}",
        )

    def alert(self, symbol: str, target: float, close: float) -> None:
        self._logger.warning(
            "alert | %s | crossed %s | close %s",
            symbol,
            self._format_price(target),
            self._format_price(close),
        )

    def error(self, message: str) -> None:
        self._logger.error("error | %s", message)

    @staticmethod
    def _format_price(value: float) -> str:
        return f"{value:,.2f}"

    @staticmethod
    def _format_optional(value: float | None, precision: int = 2) -> str:
        if value is None:
            return "n/a"
        return f"{value:.{max(0, precision)}f}"
