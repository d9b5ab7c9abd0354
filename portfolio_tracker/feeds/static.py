"""Price feed backed by a fixed mapping."""

from decimal import Decimal
from typing import Iterable, Mapping

from ..loaders import parse_price_feed
from .base import PriceFeed


class StaticPriceFeed(PriceFeed):
    """Serves the same prices on every call."""

    def __init__(self, prices: Mapping[str, object]) -> None:
        self.prices = parse_price_feed(prices)

    def quotes(self, symbols: Iterable[str]) -> dict[str, Decimal]:
        return {
            symbol: self.prices[symbol]
            for symbol in symbols
            if symbol in self.prices
        }
