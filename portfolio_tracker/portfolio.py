import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Mapping, Optional

from .collection import RankedCollection
from .config import AssetKind
from .models import Asset, to_decimal

if TYPE_CHECKING:
    from .feeds import PriceFeed

logger = logging.getLogger(__name__)


class Portfolio(RankedCollection[Asset]):
    """A named, owned portfolio of assets kept in insertion order."""

    def __init__(self, name: str, owner: str) -> None:
        super().__init__()
        self.name = name
        self.owner = owner

    def _key(self, item: Asset) -> str:
        return item.symbol

    def _magnitude(self, item: Asset) -> Decimal:
        return item.value

    def _category(self, item: Asset) -> AssetKind:
        return item.kind

    @property
    def assets(self) -> tuple[Asset, ...]:
        return tuple(self._items)

    def add_asset(self, asset: Asset) -> None:
        self._append(asset)

    def total_value(self) -> Decimal:
        return self._total()

    def filter_by_kind(self, kind: AssetKind | str) -> list[Asset]:
        return self._filter(AssetKind(kind))

    def top_assets(self, n: int) -> list[Asset]:
        return self._top(n)

    def find_by_symbol(self, symbol: str) -> Optional[Asset]:
        return self._find(symbol)

    def symbols(self) -> list[str]:
        return self.keys()

    def update_all(self, price_feed: Mapping[str, Decimal]) -> None:
        """Apply new prices to every asset whose symbol appears in the feed.

        Symbols in the feed that the portfolio does not hold are ignored.
        Every matching price is validated before any asset changes.

        Args:
            price_feed: Mapping of symbol to new price, e.g.
                ``{"AAPL": 200, "GOOG": 2800}``.

        Raises:
            ValueError: If a price for a held symbol is invalid. No asset
                is updated in that case.
        """
        held = set(self.symbols())
        prices = {
            symbol: to_decimal(price, f"price for {symbol}")
            for symbol, price in price_feed.items()
            if symbol in held
        }

        updated = 0
        for asset in self._items:
            if asset.symbol in prices:
                asset.update_price(prices[asset.symbol])
                updated += 1

        logger.debug(
            "Updated %d assets in %s from feed of %d quotes",
            updated, self.name, len(price_feed)
        )

    def refresh(self, feed: "PriceFeed") -> dict[str, Decimal]:
        """Pull quotes for the held symbols from ``feed`` and apply them.

        Returns:
            The quotes that were applied.
        """
        quotes = feed.quotes(self.symbols())
        self.update_all(quotes)
        return quotes

    def __repr__(self) -> str:
        return (
            f"Portfolio(name={self.name!r}, owner={self.owner!r}, "
            f"assets={self.symbols()}, "
            f"total_value={self.total_value()})"
        )
