"""
Portfolio Tracker - Track asset holdings and bank accounts with live price updates.

Exports:
    Asset: Dataclass representing a holding of a stock or bond
    AssetKind: Enum of asset kinds (Stock, Bond)
    BankAccount: Dataclass representing a bank account
    AccountType: Enum of account types (Checking, Savings)
    Portfolio: Ordered collection of assets with totals, filters and ranking
    Bank: Ordered collection of bank accounts with the same queries
    PriceFeed: Abstract base class for price sources
    MockPriceFeed: Random-walk price source for demos and tests
    StaticPriceFeed: Fixed-mapping price source
"""

from .config import AccountType, AssetKind, TrackerConfig
from .models import Asset, BankAccount
from .portfolio import Portfolio
from .bank import Bank
from .feeds import MockPriceFeed, PriceFeed, StaticPriceFeed

__all__ = [
    "Asset",
    "AssetKind",
    "BankAccount",
    "AccountType",
    "TrackerConfig",
    "Portfolio",
    "Bank",
    "PriceFeed",
    "MockPriceFeed",
    "StaticPriceFeed",
]
