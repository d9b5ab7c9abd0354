"""Configuration constants for the portfolio tracker."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

# Numeric inputs must stay below 10 ** (MAX_INPUT_EXPONENT + 1)
MAX_INPUT_EXPONENT = 15


class AssetKind(Enum):
    """Kinds of tradable instruments a portfolio can hold."""

    STOCK = "Stock"
    BOND = "Bond"


class AccountType(Enum):
    """Kinds of bank accounts."""

    CHECKING = "Checking"
    SAVINGS = "Savings"


@dataclass(frozen=True)
class TrackerConfig:
    """Defaults shared by the CLI and the mock price feed."""

    DEFAULT_TOP_N: int = 2
    PRICE_QUANTUM: Decimal = Decimal("0.01")
    MAX_PRICE_MOVE: Decimal = Decimal("0.05")
