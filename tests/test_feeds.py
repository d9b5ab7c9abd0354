"""Tests for price feeds, loaders and configuration."""

import json
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from portfolio_tracker.config import AccountType, AssetKind, TrackerConfig
from portfolio_tracker.feeds import MockPriceFeed, StaticPriceFeed
from portfolio_tracker.loaders import load_price_feed, parse_price_feed
from portfolio_tracker.models import Asset
from portfolio_tracker.portfolio import Portfolio


@pytest.fixture
def portfolio():
    portfolio = Portfolio("Growth Portfolio", "Christian")
    portfolio.add_asset(Asset("AAPL", AssetKind.STOCK, 10, Decimal("190")))
    portfolio.add_asset(Asset("GOOG", AssetKind.STOCK, 5, Decimal("2700")))
    portfolio.add_asset(Asset("US10Y", AssetKind.BOND, 20, Decimal("100")))
    return portfolio


class TestTrackerConfig:
    """Tests for TrackerConfig and enums."""

    def test_default_values(self):
        config = TrackerConfig()
        assert config.DEFAULT_TOP_N == 2
        assert config.PRICE_QUANTUM == Decimal("0.01")
        assert config.MAX_PRICE_MOVE == Decimal("0.05")

    def test_frozen(self):
        config = TrackerConfig()
        with pytest.raises(FrozenInstanceError):
            config.DEFAULT_TOP_N = 5

    def test_enum_values(self):
        assert AssetKind.STOCK.value == "Stock"
        assert AssetKind.BOND.value == "Bond"
        assert AccountType.CHECKING.value == "Checking"
        assert AccountType.SAVINGS.value == "Savings"


class TestParsePriceFeed:
    def test_converts_to_decimal(self):
        prices = parse_price_feed({"AAPL": 200, "GOOG": "2800.50", "MSFT": 0.1})
        assert prices == {
            "AAPL": Decimal("200"),
            "GOOG": Decimal("2800.50"),
            "MSFT": Decimal("0.1"),
        }

    def test_rejects_negative_price(self):
        with pytest.raises(ValueError, match="price for AAPL"):
            parse_price_feed({"AAPL": -1})

    def test_rejects_non_string_symbol(self):
        with pytest.raises(ValueError, match="Symbol must be a string"):
            parse_price_feed({42: 100})


class TestLoadPriceFeed:
    def test_load(self, tmp_path):
        path = tmp_path / "feed.json"
        path.write_text(json.dumps({"AAPL": 200.10, "GOOG": 2800}))

        prices = load_price_feed(path)
        assert prices == {"AAPL": Decimal("200.10"), "GOOG": Decimal("2800")}

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "feed.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ValueError, match="JSON object"):
            load_price_feed(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_price_feed(tmp_path / "missing.json")


class TestStaticPriceFeed:
    def test_quotes_only_known_symbols(self):
        feed = StaticPriceFeed({"AAPL": 200, "GOOG": 2800})
        assert feed.quotes(["AAPL", "US10Y"]) == {"AAPL": Decimal("200")}

    def test_refresh_portfolio(self, portfolio):
        feed = StaticPriceFeed({"AAPL": 200, "GOOG": 2800, "TSLA": 250})

        applied = portfolio.refresh(feed)

        assert applied == {"AAPL": Decimal("200"), "GOOG": Decimal("2800")}
        assert portfolio.total_value() == Decimal("18000")
        assert portfolio.find_by_symbol("US10Y").price == Decimal("100")


class TestMockPriceFeed:
    def test_from_portfolio_starts_at_current_prices(self, portfolio):
        feed = MockPriceFeed.from_portfolio(portfolio)
        assert feed.quotes(portfolio.symbols()) == {
            "AAPL": Decimal("190"),
            "GOOG": Decimal("2700"),
            "US10Y": Decimal("100"),
        }

    def test_tick_is_bounded(self):
        feed = MockPriceFeed({"AAPL": Decimal("100")}, seed=1)
        for _ in range(50):
            before = feed.prices["AAPL"]
            after = feed.tick()["AAPL"]
            assert after >= 0
            assert abs(after - before) <= before * Decimal("0.05") + Decimal("0.01")
            assert after == after.quantize(Decimal("0.01"))

    def test_seed_is_reproducible(self):
        first = MockPriceFeed({"AAPL": 190, "GOOG": 2700}, seed=42)
        second = MockPriceFeed({"AAPL": 190, "GOOG": 2700}, seed=42)
        assert [first.tick() for _ in range(5)] == [second.tick() for _ in range(5)]

    def test_zero_move_config(self):
        config = TrackerConfig(MAX_PRICE_MOVE=Decimal("0"))
        feed = MockPriceFeed({"AAPL": 190}, config=config, seed=3)
        assert feed.tick() == {"AAPL": Decimal("190.00")}

    def test_refresh_moves_only_quoted_assets(self, portfolio):
        feed = MockPriceFeed({"AAPL": 190}, seed=7)
        feed.tick()

        portfolio.refresh(feed)

        assert portfolio.find_by_symbol("AAPL").price == feed.prices["AAPL"]
        assert portfolio.find_by_symbol("GOOG").price == Decimal("2700")
        assert portfolio.find_by_symbol("US10Y").price == Decimal("100")
