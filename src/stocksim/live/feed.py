"""Cancellable periodic live-tick loop over a caller-owned series."""

from __future__ import annotations

import random
import threading
from collections.abc import Callable, Sequence

from stocksim.data.synthetic import NoiseSource, next_tick
from stocksim.domain.models import PriceBar
from stocksim.live.alerts import PriceAlert
from stocksim.logging.logger import HumanLogger


class LiveFeed:
    """Replace the last bar of a series with a fresh tick on every interval.

    The feed works on its own copy of the bars. Each tick swaps in a new
    list, so readers of ``bars`` always see a complete series.
    """

    def __init__(
        self,
        bars: Sequence[PriceBar],
        *,
        symbol: str = "",
        interval_seconds: float = 1.5,
        alert: PriceAlert | None = None,
        on_tick: Callable[[PriceBar], None] | None = None,
        on_alert: Callable[[PriceAlert, PriceBar], None] | None = None,
        noise: NoiseSource | None = None,
        logger: HumanLogger | None = None,
    ) -> None:
        if not bars:
            raise ValueError("live feed requires at least one bar")
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.symbol = symbol
        self.interval_seconds = interval_seconds
        self.alert = alert
        self.on_tick = on_tick
        self.on_alert = on_alert
        self.noise = noise if noise is not None else random.Random()
        self.logger = logger
        self.ticks = 0
        self.last_error: Exception | None = None
        self._bars = list(bars)
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def bars(self) -> list[PriceBar]:
        return list(self._bars)

    @property
    def last_bar(self) -> PriceBar:
        return self._bars[-1]

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def step(self) -> PriceBar:
        """Apply one tick to the in-progress bar and return it."""
        previous = self._bars[-1]
        updated = next_tick(previous, noise=self.noise)
        self._bars = [*self._bars[:-1], updated]
        self.ticks += 1
        if self.logger is not None:
            self.logger.tick(self.symbol, updated)
        if self.alert is not None and self.alert.check(previous.close, updated.close):
            if self.logger is not None:
                self.logger.alert(self.symbol, self.alert.target, updated.close)
            if self.on_alert is not None:
                self.on_alert(self.alert, updated)
        if self.on_tick is not None:
            self.on_tick(updated)
        return updated

    def start(self) -> None:
        if self.running:
            return
        self._stop_event.clear()
        self.last_error = None
        self._thread = threading.Thread(
            target=self._run,
            name=f"live-feed-{self.symbol or 'series'}",
            daemon=True,
        )
        self._thread.start()
        if self.logger is not None:
            self.logger.live_started(self.symbol, self.interval_seconds)

    def stop(self, timeout: float | None = None) -> None:
        """Stop scheduling ticks; a tick already in progress completes."""
        was_running = self._thread is not None
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None
        if was_running and self.logger is not None:
            self.logger.live_stopped(self.symbol, self.ticks)

    def _run(self) -> None:
        try:
            while not self._stop_event.wait(self.interval_seconds):
                self.step()
        except Exception as exc:
            self.last_error = exc
            self._stop_event.set()
            if self.logger is not None:
                self.logger.error(f"live feed {self.symbol or 'series'} stopped: {exc}")

    def __enter__(self) -> LiveFeed:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
