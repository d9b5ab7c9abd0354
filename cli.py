#!/usr/bin/env python3
import logging
from decimal import Decimal

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table
from rich.text import Text

from portfolio_tracker import (
    AccountType,
    Asset,
    AssetKind,
    Bank,
    BankAccount,
    MockPriceFeed,
    Portfolio,
    PriceFeed,
    StaticPriceFeed,
    TrackerConfig,
)
from portfolio_tracker.loaders import load_price_feed

logger = logging.getLogger(__name__)
console = Console()

CONFIG = TrackerConfig()

# Each entry: (kind, quantity, opening price)
SAMPLE_ASSETS: dict[str, tuple[AssetKind, int, Decimal]] = {
    "AAPL": (AssetKind.STOCK, 10, Decimal("190")),
    "GOOG": (AssetKind.STOCK, 5, Decimal("2700")),
    "US10Y": (AssetKind.BOND, 20, Decimal("100")),
}

# Each entry: (owner, opening balance, type)
SAMPLE_ACCOUNTS: dict[str, tuple[str, Decimal, AccountType]] = {
    "CHK-001": ("Christian", Decimal("2500"), AccountType.CHECKING),
    "SAV-001": ("Christian", Decimal("12000"), AccountType.SAVINGS),
    "CHK-002": ("Dezha", Decimal("800"), AccountType.CHECKING),
}

KIND_STYLES: dict[AssetKind, str] = {
    AssetKind.STOCK: "cyan",
    AssetKind.BOND: "magenta",
}


def build_sample_portfolio() -> Portfolio:
    portfolio = Portfolio("Growth Portfolio", "Christian")
    for sym, (kind, qty, price) in SAMPLE_ASSETS.items():
        portfolio.add_asset(Asset(symbol=sym, kind=kind, quantity=qty, price=price))
    return portfolio


def build_sample_bank() -> Bank:
    bank = Bank("Neighborhood Bank")
    for number, (owner, balance, account_type) in SAMPLE_ACCOUNTS.items():
        bank.add_account(
            BankAccount(
                account_number=number,
                owner=owner,
                balance=balance,
                account_type=account_type,
            )
        )
    return bank


def _change_text(old: Decimal, new: Decimal) -> Text:
    """Signed percentage change, green up, red down."""
    if old == 0:
        return Text("—", style="dim")
    change = (new - old) / old
    style = "green" if change > 0 else "red" if change < 0 else "dim"
    return Text(f"{float(change):+.2%}", style=style)


def holdings_table(
    portfolio: Portfolio,
    title: str,
    previous: dict[str, Decimal] | None = None,
) -> Table:
    """Build a Rich table of holdings, with price change if ``previous`` is given."""
    t = Table(title=title, box=box.ROUNDED, title_style="bold white")
    t.add_column("Symbol", style="bold")
    t.add_column("Kind")
    t.add_column("Qty", justify="right")
    t.add_column("Price", justify="right")
    t.add_column("Value", justify="right")
    if previous is not None:
        t.add_column("Change", justify="right")

    for asset in portfolio.assets:
        row = [
            asset.symbol,
            Text(asset.kind.value, style=KIND_STYLES[asset.kind]),
            str(asset.quantity),
            f"${asset.price:,.2f}",
            f"${asset.value:,.2f}",
        ]
        if previous is not None:
            row.append(_change_text(previous.get(asset.symbol, asset.price), asset.price))
        t.add_row(*row)

    t.add_section()
    t.add_row(
        "", "", "", "Total", f"[bold]${portfolio.total_value():,.2f}[/bold]",
        *([""] if previous is not None else []),
    )
    return t


def ranking_table(assets: list[Asset], title: str) -> Table:
    t = Table(title=title, box=box.ROUNDED, title_style="bold white")
    t.add_column("#", justify="right", style="dim")
    t.add_column("Symbol", style="bold")
    t.add_column("Value", justify="right", style="yellow")
    for rank, asset in enumerate(assets, start=1):
        t.add_row(str(rank), asset.symbol, f"${asset.value:,.2f}")
    return t


def kind_breakdown_table(portfolio: Portfolio) -> Table:
    """Value per asset kind, with share of the total."""
    t = Table(title="By kind", box=box.ROUNDED, title_style="bold white")
    t.add_column("Kind")
    t.add_column("Symbols")
    t.add_column("Value", justify="right")
    t.add_column("Share", justify="right", style="yellow")

    total = portfolio.total_value()
    for kind in AssetKind:
        assets = portfolio.filter_by_kind(kind)
        value = sum((a.value for a in assets), start=Decimal("0"))
        share = f"{float(value / total):.1%}" if total else "—"
        t.add_row(
            Text(kind.value, style=KIND_STYLES[kind]),
            ", ".join(a.symbol for a in assets) or "[dim]none[/dim]",
            f"${value:,.2f}",
            share,
        )
    return t


def accounts_table(bank: Bank, top_n: int) -> Table:
    t = Table(title=bank.name, box=box.ROUNDED, title_style="bold white")
    t.add_column("Account", style="bold")
    t.add_column("Owner")
    t.add_column("Type")
    t.add_column("Balance", justify="right")

    top = {a.account_number for a in bank.top_accounts(top_n)}
    for account in bank.accounts:
        style = "yellow" if account.account_number in top else ""
        t.add_row(
            account.account_number,
            account.owner,
            account.account_type.value,
            Text(f"${account.balance:,.2f}", style=style),
        )

    t.add_section()
    t.add_row("", "", "Total", f"[bold]${bank.total_assets():,.2f}[/bold]")
    return t


def _prompt_feed(portfolio: Portfolio) -> PriceFeed:
    """Ask for a JSON price file; fall back to the mock feed."""
    path = Prompt.ask("  Price feed JSON file [dim](blank for mock feed)[/dim]", default="")
    if not path:
        return MockPriceFeed.from_portfolio(portfolio, config=CONFIG)

    try:
        return StaticPriceFeed(load_price_feed(path))
    except (OSError, ValueError) as e:
        logger.warning("Failed to load price feed from %s: %s", path, e)
        console.print(f"  [red]Could not load {path}:[/red] {e}")
        console.print("  [dim]Using mock feed instead.[/dim]")
        return MockPriceFeed.from_portfolio(portfolio, config=CONFIG)


def _prompt_top_n(portfolio: Portfolio) -> int:
    return IntPrompt.ask(
        "  How many top assets to show",
        default=min(CONFIG.DEFAULT_TOP_N, len(portfolio)),
    )


def run_cli_loop(portfolio: Portfolio, bank: Bank) -> None:
    console.print(holdings_table(portfolio, f"{portfolio.name} — {portfolio.owner}"))
    console.print(kind_breakdown_table(portfolio))
    console.print()
    console.print(accounts_table(bank, CONFIG.DEFAULT_TOP_N))

    console.print()
    feed = _prompt_feed(portfolio)
    top_n = _prompt_top_n(portfolio)

    while True:
        previous = {a.symbol: a.price for a in portfolio.assets}
        if isinstance(feed, MockPriceFeed):
            feed.tick()
        quotes = portfolio.refresh(feed)

        console.print()
        console.print(
            f"  [dim]Applied {len(quotes)} quotes: "
            + ", ".join(f"{sym} ${price:,.2f}" for sym, price in quotes.items())
            + "[/dim]"
        )
        console.print(holdings_table(portfolio, "After price update", previous))
        console.print(ranking_table(portfolio.top_assets(top_n), f"Top {top_n} assets"))

        console.print()
        if not Confirm.ask("  Apply another price update?", default=True):
            break


def main() -> None:
    """Entry point for the CLI application."""
    console.print()
    console.print(
        Panel("[bold]Portfolio Tracker[/bold] · holdings & price feeds", box=box.DOUBLE)
    )
    console.print()

    run_cli_loop(build_sample_portfolio(), build_sample_bank())


if __name__ == "__main__":
    main()
