"""Custom exceptions for clearer error handling across the package."""


class StockSimError(Exception):
    """Base exception for all package-specific errors."""


class InvalidInputError(StockSimError):
    """Raised when a symbol identifier is empty or not a string."""


class ConfigError(StockSimError, ValueError):
    """Raised when environment configuration is invalid."""
