"""Price feed implementations."""

from .base import PriceFeed
from .mock import MockPriceFeed
from .static import StaticPriceFeed

__all__ = [
    "PriceFeed",
    "MockPriceFeed",
    "StaticPriceFeed",
]
