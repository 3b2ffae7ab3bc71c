"""One-shot price alerts checked on every live tick."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PriceAlert:
    """Fires once, the first time the close crosses ``target``."""

    target: float
    triggered: bool = False

    def __post_init__(self) -> None:
        if self.target <= 0:
            raise ValueError("alert target must be positive")

    def check(self, previous_close: float, new_close: float) -> bool:
        if self.triggered:
            return False
        rising = previous_close < self.target <= new_close
        falling = previous_close > self.target >= new_close
        if rising or falling:
            self.triggered = True
            return True
        return False

    def reset(self) -> None:
        self.triggered = False
