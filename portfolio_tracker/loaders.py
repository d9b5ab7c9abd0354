"""Loaders for importing price feeds from local sources."""

import json
from decimal import Decimal
from pathlib import Path
from typing import Mapping

from .models import to_decimal


def parse_price_feed(raw: Mapping[str, object]) -> dict[str, Decimal]:
    """Validate a symbol-to-price mapping and convert prices to Decimal.

    Args:
        raw: Mapping such as ``{"AAPL": 200, "GOOG": "2800.50"}``.

    Returns:
        Dictionary mapping symbols to Decimal prices, in input order.

    Raises:
        ValueError: If a symbol is not a string or a price is not a
            finite, non-negative number.
    """
    prices: dict[str, Decimal] = {}
    for symbol, price in raw.items():
        if not isinstance(symbol, str):
            raise ValueError(f"Symbol must be a string, got {symbol!r}")
        prices[symbol] = to_decimal(price, f"price for {symbol}")
    return prices


def load_price_feed(path: str | Path) -> dict[str, Decimal]:
    """Load a price feed from a JSON file.

    The file must hold a single object mapping symbols to prices, e.g.
    ``{"AAPL": 200, "GOOG": 2800}``. Fractional prices are read as Decimal
    so no binary rounding creeps in.

    Args:
        path: Path to the JSON file.

    Returns:
        Dictionary mapping symbols to Decimal prices.

    Raises:
        ValueError: If the document is not a JSON object or holds an
            invalid price.
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f, parse_float=Decimal)

    if not isinstance(raw, dict):
        raise ValueError(
            f"Price feed in {path} must be a JSON object, got {type(raw).__name__}"
        )

    return parse_price_feed(raw)
