from decimal import Decimal
from typing import Optional

from .collection import RankedCollection
from .config import AccountType
from .models import BankAccount


class Bank(RankedCollection[BankAccount]):
    """A named registry of bank accounts kept in insertion order.

    Account numbers are expected to be unique but this is not enforced;
    ``get_account`` returns the first match.
    """

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name

    def _key(self, item: BankAccount) -> str:
        return item.account_number

    def _magnitude(self, item: BankAccount) -> Decimal:
        return item.balance

    def _category(self, item: BankAccount) -> AccountType:
        return item.account_type

    @property
    def accounts(self) -> tuple[BankAccount, ...]:
        return tuple(self._items)

    def add_account(self, account: BankAccount) -> None:
        self._append(account)

    def get_account(self, account_number: str) -> Optional[BankAccount]:
        return self._find(account_number)

    def total_assets(self) -> Decimal:
        return self._total()

    def filter_by_type(self, account_type: AccountType | str) -> list[BankAccount]:
        return self._filter(AccountType(account_type))

    def top_accounts(self, n: int) -> list[BankAccount]:
        return self._top(n)

    def account_numbers(self) -> list[str]:
        return self.keys()

    def __repr__(self) -> str:
        return (
            f"Bank(name={self.name!r}, accounts={self.account_numbers()}, "
            f"total_assets={self.total_assets()})"
        )
