"""Abstract base class for price feeds."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Iterable


class PriceFeed(ABC):
    """Abstract base class for sources of symbol prices."""

    @abstractmethod
    def quotes(self, symbols: Iterable[str]) -> dict[str, Decimal]:
        """Return current prices for the requested symbols.

        Args:
            symbols: Symbols to quote.

        Returns:
            Dictionary mapping symbols to prices. Symbols the feed does not
            know are left out rather than raising.
        """
        pass
