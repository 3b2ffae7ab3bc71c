"""Live tick simulation."""

from .alerts import PriceAlert
from .feed import LiveFeed

__all__ = ["LiveFeed", "PriceAlert"]
