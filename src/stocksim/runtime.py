"""Session wiring: one symbol's series, its indicators and live updates."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date

import pandas as pd

from stocksim.config import Settings
from stocksim.data.profiles import resolve_profile
from stocksim.data.synthetic import NoiseSource, generate_series
from stocksim.domain.models import IndicatorSnapshot, PriceBar
from stocksim.indicators.snapshot import compute_indicators, indicator_frame
from stocksim.live.alerts import PriceAlert
from stocksim.live.feed import LiveFeed
from stocksim.logging.logger import HumanLogger


class SymbolSession:
    """Holds the series for the symbol currently on screen.

    Loading a new symbol stops any live feed and discards the previous
    series. Indicator results are recomputed from the current bars on
    every call.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        logger: HumanLogger | None = None,
        noise: NoiseSource | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.logger = logger or HumanLogger(level=self.settings.log_level)
        self.noise = noise
        self.symbol: str | None = None
        self.alert: PriceAlert | None = None
        self._bars: list[PriceBar] = []
        self._feed: LiveFeed | None = None

    @property
    def bars(self) -> list[PriceBar]:
        if self._feed is not None:
            return self._feed.bars
        return list(self._bars)

    @property
    def is_live(self) -> bool:
        return self._feed is not None and self._feed.running

    def load(self, identifier: str, today: date | None = None) -> list[PriceBar]:
        """Generate a fresh series for ``identifier`` and make it current."""
        profile = resolve_profile(identifier)
        self.stop_live()
        self.symbol = None
        self.alert = None
        self._bars = []
        bars = generate_series(profile.symbol, today=today, noise=self.noise)
        self.symbol = profile.symbol
        self._bars = bars
        self.logger.series_generated(profile.symbol, bars, profile.known)
        return list(bars)

    def indicators(self) -> IndicatorSnapshot:
        bars = self._require_bars()
        snapshot = compute_indicators(
            bars,
            sma_periods=self.settings.sma_periods,
            rsi_period=self.settings.rsi_period,
            macd_periods=self.settings.macd_periods(),
        )
        self.logger.indicators(self.symbol or "", snapshot)
        return snapshot

    def chart_frame(self, visible_sma_periods: Iterable[int] | None = None) -> pd.DataFrame:
        """Bars plus the SMA overlays the caller wants shown."""
        bars = self._require_bars()
        periods = self.settings.sma_periods if visible_sma_periods is None else visible_sma_periods
        return indicator_frame(bars, periods)

    def go_live(
        self,
        alert_price: float | None = None,
        on_tick: Callable[[PriceBar], None] | None = None,
        on_alert: Callable[[PriceAlert, PriceBar], None] | None = None,
    ) -> LiveFeed:
        bars = self._require_bars()
        self.stop_live()
        self.alert = PriceAlert(alert_price) if alert_price is not None else None
        self._feed = LiveFeed(
            bars,
            symbol=self.symbol or "",
            interval_seconds=self.settings.live_interval_seconds,
            alert=self.alert,
            on_tick=on_tick,
            on_alert=on_alert,
            noise=self.noise,
            logger=self.logger,
        )
        self._feed.start()
        return self._feed

    def stop_live(self) -> None:
        feed = self._feed
        if feed is None:
            return
        feed.stop()
        self._bars = feed.bars
        self._feed = None

    def _require_bars(self) -> list[PriceBar]:
        bars = self.bars
        if not bars:
            raise ValueError("no series loaded; call load() first")
        return bars
