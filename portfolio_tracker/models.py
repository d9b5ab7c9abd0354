"""Data models for the portfolio tracker."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .config import MAX_INPUT_EXPONENT, AccountType, AssetKind


def to_decimal(value: object, name: str, *, positive: bool = False) -> Decimal:
    """Coerce a numeric input to a finite, non-negative Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``.

    Args:
        value: int, float, str or Decimal to convert.
        name: Field name used in error messages.
        positive: Also reject zero.

    Raises:
        ValueError: If the value is not a number, not finite, negative,
            too large, or zero when ``positive`` is set.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise ValueError(f"{name} must be a number, got {value!r}")

    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"{name} must be a number, got {value!r}") from None

    if not number.is_finite():
        raise ValueError(f"{name} must be finite, got {value!r}")
    if number < 0:
        raise ValueError(f"{name} must be non-negative, got {value!r}")
    if number and number.adjusted() > MAX_INPUT_EXPONENT:
        raise ValueError(
            f"{name} must be below 1e{MAX_INPUT_EXPONENT + 1}, got {value!r}"
        )
    if positive and number == 0:
        raise ValueError(f"{name} must be positive, got {value!r}")
    return number


@dataclass
class Asset:
    """A holding of a tradable instrument.

    ``symbol``, ``kind`` and ``quantity`` are fixed once set; assigning them
    again raises ``AttributeError``. ``price`` may change, and every new
    price is validated whether it comes through ``update_price`` or direct
    assignment.
    """

    _FIXED_FIELDS = ("symbol", "kind", "quantity")

    symbol: str
    kind: AssetKind
    quantity: Decimal
    price: Decimal

    def __setattr__(self, name: str, value: object) -> None:
        if name in self._FIXED_FIELDS and name in self.__dict__:
            raise AttributeError(f"Asset.{name} cannot be changed after construction")
        if name == "kind":
            value = AssetKind(value)
        elif name in ("quantity", "price"):
            value = to_decimal(value, name)
        super().__setattr__(name, value)

    @property
    def value(self) -> Decimal:
        return self.quantity * self.price

    def update_price(self, new_price: Decimal) -> None:
        self.price = new_price


@dataclass
class BankAccount:
    """A bank account holding a balance."""

    account_number: str
    owner: str
    balance: Decimal
    account_type: AccountType

    def __post_init__(self) -> None:
        self.account_type = AccountType(self.account_type)
        self.balance = to_decimal(self.balance, "balance")

    @property
    def value(self) -> Decimal:
        return self.balance

    def get_balance(self) -> Decimal:
        return self.balance

    def deposit(self, amount: Decimal) -> None:
        self.balance += to_decimal(amount, "amount", positive=True)

    def withdraw(self, amount: Decimal) -> None:
        amount = self._checked_withdrawal(amount)
        self.balance -= amount

    def transfer_funds(self, target: "BankAccount", amount: Decimal) -> None:
        """Move ``amount`` from this account into ``target``.

        Raises:
            ValueError: If the target is not an account, or the amount is
                invalid or exceeds the balance. Neither account is
                modified in that case.
        """
        if not isinstance(target, BankAccount):
            raise ValueError(f"Transfer target must be a BankAccount, got {target!r}")
        amount = self._checked_withdrawal(amount)
        self.balance -= amount
        target.balance += amount

    def _checked_withdrawal(self, amount: Decimal) -> Decimal:
        amount = to_decimal(amount, "amount", positive=True)
        if amount > self.balance:
            raise ValueError(
                f"Insufficient funds in {self.account_number}: "
                f"balance {self.balance}, requested {amount}"
            )
        return amount
