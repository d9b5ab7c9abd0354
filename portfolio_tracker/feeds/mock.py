"""Mock price feed producing a bounded random walk."""

import logging
import random
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Iterable, Mapping, Optional

from ..config import TrackerConfig
from ..loaders import parse_price_feed
from .base import PriceFeed

if TYPE_CHECKING:
    from ..portfolio import Portfolio

logger = logging.getLogger(__name__)


class MockPriceFeed(PriceFeed):
    """Simulated market: every tick moves each price by a random fraction.

    Moves are drawn uniformly from ``[-MAX_PRICE_MOVE, +MAX_PRICE_MOVE]``,
    quantized to ``PRICE_QUANTUM`` and never drop below zero. Passing a
    ``seed`` makes the walk reproducible.
    """

    def __init__(
        self,
        prices: Mapping[str, object],
        config: Optional[TrackerConfig] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config or TrackerConfig()
        self.prices = parse_price_feed(prices)
        self._rng = random.Random(seed)

    @classmethod
    def from_portfolio(
        cls,
        portfolio: "Portfolio",
        config: Optional[TrackerConfig] = None,
        seed: Optional[int] = None,
    ) -> "MockPriceFeed":
        """Start the walk from the portfolio's current prices."""
        # First occurrence wins for duplicated symbols
        prices: dict[str, Decimal] = {}
        for asset in portfolio.assets:
            prices.setdefault(asset.symbol, asset.price)
        return cls(prices, config=config, seed=seed)

    def tick(self) -> dict[str, Decimal]:
        """Advance every price one step and return the new prices."""
        max_move = float(self.config.MAX_PRICE_MOVE)
        for symbol, price in self.prices.items():
            move = Decimal(str(self._rng.uniform(-max_move, max_move)))
            new_price = (price * (1 + move)).quantize(
                self.config.PRICE_QUANTUM, rounding=ROUND_HALF_UP
            )
            self.prices[symbol] = max(new_price, Decimal("0"))

        logger.debug("Mock feed ticked %d prices", len(self.prices))
        return dict(self.prices)

    def quotes(self, symbols: Iterable[str]) -> dict[str, Decimal]:
        return {
            symbol: self.prices[symbol]
            for symbol in symbols
            if symbol in self.prices
        }
