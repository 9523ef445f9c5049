"""
Customer account model.

An account is identified by the pair (card number, PIN). The
key is a NamedTuple, so it hashes and compares like the plain
tuple (card, pin) and can be used directly as a dict key.

Balances are plain floats. Ledger lines render them with two
decimals; the stored value keeps full precision.
"""

from dataclasses import dataclass
from typing import NamedTuple

from atm_ledger.models.enums import TransactionType


class AccountKey(NamedTuple):
    card: int
    pin: int


@dataclass
class Account:
    owner_name: str
    balance: float

    def __repr__(self) -> str:
        return f"<Account {self.owner_name!r} balance={self.balance:.2f}>"


def format_entry(
    transaction_type: TransactionType, amount: float, new_balance: float
) -> str:
    """
    Build one ledger line.

    Format: "<Type> - Amount: $X.XX, Updated Balance: $Y.YY"
    with exactly two decimals and no thousands separators.
    """
    return (
        f"{transaction_type.label} - Amount: ${amount:.2f}, "
        f"Updated Balance: ${new_balance:.2f}"
    )
