"""Environment runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from stocksim.errors import ConfigError

DEFAULT_SMA_PERIODS = (20, 50)


def parse_optional_positive_int(value: str | None, *, field_name: str) -> int | None:
    """Parse optional positive integer values from env strings."""
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    try:
        parsed = int(text)
    except ValueError as exc:
        raise ConfigError(f"{field_name} must be an integer, got {text!r}") from exc
    if parsed <= 0:
        raise ConfigError(f"{field_name} must be positive")
    return parsed


def parse_positive_float(value: str | None, default: float, *, field_name: str) -> float:
    """Parse a positive float from an env string."""
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value.strip())
    except ValueError as exc:
        raise ConfigError(f"{field_name} must be a number, got {value.strip()!r}") from exc
    if parsed <= 0:
        raise ConfigError(f"{field_name} must be positive")
    return parsed


def parse_periods(
    value: str | None,
    default: tuple[int, ...] = DEFAULT_SMA_PERIODS,
) -> tuple[int, ...]:
    """Parse comma-separated periods, dropping duplicates while preserving order."""
    if not value:
        return tuple(default)
    periods: list[int] = []
    for item in value.split(","):
        parsed = parse_optional_positive_int(item, field_name="sma_periods")
        if parsed is None or parsed in periods:
            continue
        periods.append(parsed)
    return tuple(periods) or tuple(default)


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    log_level: str = "INFO"
    live_interval_seconds: float = 1.5
    sma_periods: tuple[int, ...] = DEFAULT_SMA_PERIODS
    rsi_period: int = 14
    macd_short: int = 12
    macd_long: int = 26
    macd_signal: int = 9

    @classmethod
    def from_env(cls) -> Self:
        """Create settings from environment variables."""
        load_dotenv()
        raw = cls(
            log_level=str(os.getenv("LOG_LEVEL", "INFO")).strip().upper(),
            live_interval_seconds=parse_positive_float(
                os.getenv("LIVE_INTERVAL_SECONDS"),
                1.5,
                field_name="live_interval_seconds",
            ),
            sma_periods=parse_periods(os.getenv("SMA_PERIODS")),
            rsi_period=_env_int("RSI_PERIOD", 14),
            macd_short=_env_int("MACD_SHORT", 12),
            macd_long=_env_int("MACD_LONG", 26),
            macd_signal=_env_int("MACD_SIGNAL", 9),
        )
        return raw.validate()

    def with_overrides(self, **kwargs: object) -> Self:
        """Return a new settings object with updated values."""
        updated = replace(self, **kwargs)
        return updated.validate()

    def macd_periods(self) -> tuple[int, int, int]:
        return (self.macd_short, self.macd_long, self.macd_signal)

    def validate(self) -> Self:
        """Validate settings fields."""
        if self.live_interval_seconds <= 0:
            raise ConfigError("live_interval_seconds must be positive")
        if not self.sma_periods:
            raise ConfigError("sma_periods must not be empty")
        if any(period <= 0 for period in self.sma_periods):
            raise ConfigError("sma_periods must be positive")
        if self.rsi_period <= 0:
            raise ConfigError("rsi_period must be positive")
        if min(self.macd_periods()) <= 0:
            raise ConfigError("macd periods must be positive")
        if self.macd_short >= self.macd_long:
            raise ConfigError("macd_short must be less than macd_long")
        return self


def _env_int(name: str, default: int) -> int:
    parsed = parse_optional_positive_int(os.getenv(name), field_name=name.lower())
    return default if parsed is None else parsed
