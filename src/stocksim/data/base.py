"""Bar-frame provider contract for synthesized series."""

from __future__ import annotations

from datetime import date
from typing import Protocol

import pandas as pd


class MarketDataProvider(Protocol):
    """Anything that can synthesize a daily OHLCV frame for a symbol.

    Frames carry ``open``, ``high``, ``low``, ``close`` and ``volume``
    columns on a ``DatetimeIndex`` whose last entry is ``today``.
    """

    def get_bars(self, symbol: str, today: date | None = None) -> pd.DataFrame:
        """Return a fresh series for ``symbol``; nothing is cached between calls."""
