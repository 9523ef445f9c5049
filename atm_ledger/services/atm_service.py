"""
ATM service — accounts, cash movements and ledger export.

The service owns two in-memory tables keyed by AccountKey:
1. accounts: owner name and current balance
2. transactions: the ordered ledger lines for that account

Both tables always hold the same keys. Every operation
validates fully before touching either table, so a failed
call leaves them exactly as they were.
"""

import logging
import math
from pathlib import Path

from atm_ledger.errors import (
    AccountNotFound,
    AlreadyRegistered,
    InsufficientFunds,
    InvalidAccountDetails,
    InvalidAmount,
    LedgerIOError,
    UnsafeLedgerPath,
)
from atm_ledger.logging_config import mask_card
from atm_ledger.models.account import Account, AccountKey, format_entry
from atm_ledger.models.enums import TransactionType

logger = logging.getLogger(__name__)


def _finite_float(value) -> float | None:
    """Convert an int or float to a finite float, or return None."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except OverflowError:
        return None
    return result if math.isfinite(result) else None


def validate_amount(amount) -> float:
    """
    Return amount as a float if it is a usable cash amount.

    The check is sign-and-magnitude: the value must be finite,
    must not carry a negative sign bit, and must not be zero.
    This rejects -0.0, which compares equal to 0.0 but is
    negative.
    """
    value = _finite_float(amount)
    if value is None:
        raise InvalidAmount(f"Amount must be a finite number, got {amount!r}")
    if math.copysign(1.0, value) < 0:
        raise InvalidAmount(f"Amount must be positive, got {value}")
    if value == 0:
        raise InvalidAmount("Amount must be greater than zero")
    return value


class AtmService:
    """
    All account and ledger operations pass through this service.

    Ledger files are only ever written inside ledger_dir. The
    caller creates one instance and passes it to whoever needs
    it; there is no module-level state.
    """

    def __init__(self, ledger_dir: str | Path = "."):
        self.ledger_dir = Path(ledger_dir)
        self._accounts: dict[AccountKey, Account] = {}
        self._transactions: dict[AccountKey, list[str]] = {}

    def _get_account(self, card: int, pin: int) -> tuple[AccountKey, Account]:
        key = AccountKey(card, pin)
        account = self._accounts.get(key)
        if account is None:
            raise AccountNotFound(f"No account for card {mask_card(card)}")
        return key, account

    def register_account(
        self, card: int, pin: int, owner_name: str, initial_balance: float
    ) -> Account:
        """
        Register a new account with an empty ledger.

        Raises AlreadyRegistered if the card and PIN are taken.
        The existing account and its ledger are left untouched.
        Any finite initial balance is accepted, including zero
        and negative values.
        """
        for field, value in (("card", card), ("pin", pin)):
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise InvalidAccountDetails(
                    f"{field} must be a non-negative integer"
                )

        if not isinstance(owner_name, str) or not owner_name.strip():
            raise InvalidAccountDetails("owner_name must not be empty")

        balance = _finite_float(initial_balance)
        if balance is None:
            raise InvalidAmount(
                f"Initial balance must be a finite number, got {initial_balance!r}"
            )

        key = AccountKey(card, pin)
        if key in self._accounts:
            logger.warning(
                "Rejected re-registration of card %s", mask_card(card)
            )
            raise AlreadyRegistered(
                f"Account for card {mask_card(card)} already exists"
            )

        account = Account(owner_name=owner_name, balance=balance)
        self._accounts[key] = account
        self._transactions[key] = []

        logger.info("Registered account for card %s", mask_card(card))
        return account

    def withdraw_cash(self, card: int, pin: int, amount: float) -> float:
        """
        Withdraw cash and return the updated balance.

        Fails with InvalidAmount for non-positive or non-finite
        amounts and InsufficientFunds when amount exceeds the
        balance. Withdrawing the full balance is allowed.
        """
        key, account = self._get_account(card, pin)

        try:
            value = validate_amount(amount)
        except InvalidAmount:
            logger.warning(
                "Rejected withdrawal of %r from card %s", amount, mask_card(card)
            )
            raise

        if value > account.balance:
            logger.warning(
                "Insufficient funds on card %s for withdrawal", mask_card(card)
            )
            raise InsufficientFunds(
                f"Insufficient balance: available={account.balance:.2f}, "
                f"requested={value:.2f}"
            )

        new_balance = account.balance - value
        entry = format_entry(TransactionType.WITHDRAWAL, value, new_balance)

        account.balance = new_balance
        self._transactions[key].append(entry)

        logger.info("Withdrawal on card %s: %s", mask_card(card), entry)
        return new_balance

    def deposit_cash(self, card: int, pin: int, amount: float) -> float:
        """
        Deposit cash and return the updated balance.

        The floating-point sum is stored as computed. A sum that
        would overflow to infinity is refused with InvalidAmount
        instead of being stored.
        """
        key, account = self._get_account(card, pin)

        try:
            value = validate_amount(amount)
        except InvalidAmount:
            logger.warning(
                "Rejected deposit of %r to card %s", amount, mask_card(card)
            )
            raise

        new_balance = account.balance + value
        if not math.isfinite(new_balance):
            logger.warning("Deposit on card %s would overflow", mask_card(card))
            raise InvalidAmount(
                "Deposit would overflow the account balance"
            )

        entry = format_entry(TransactionType.DEPOSIT, value, new_balance)

        account.balance = new_balance
        self._transactions[key].append(entry)

        logger.info("Deposit on card %s: %s", mask_card(card), entry)
        return new_balance

    def check_balance(self, card: int, pin: int) -> float:
        """Return the current balance."""
        _, account = self._get_account(card, pin)
        return account.balance

    def get_accounts(self) -> dict[AccountKey, Account]:
        """
        Return the live account table.

        Changes made through this mapping skip all validation.
        It exists for inspection and test setup.
        """
        return self._accounts

    def get_transactions(self) -> dict[AccountKey, list[str]]:
        """Return the live transaction table. Same caveats as get_accounts."""
        return self._transactions

    def resolve_ledger_path(self, path: str | Path) -> Path:
        """
        Resolve path inside the ledger directory.

        Relative paths are taken relative to ledger_dir. Absolute
        paths are allowed only when they land inside it. Anything
        that resolves elsewhere, including through '..' or a
        symlink, raises UnsafeLedgerPath. So does a path the OS
        cannot represent, such as one with a NUL byte.
        """
        base = self.ledger_dir.resolve()
        try:
            candidate = Path(path)
            if not candidate.is_absolute():
                candidate = base / candidate
            resolved = candidate.resolve()
        except (ValueError, OSError) as e:
            raise UnsafeLedgerPath(f"Ledger path {path!r} is not usable: {e}") from e

        if resolved == base or not resolved.is_relative_to(base):
            raise UnsafeLedgerPath(
                f"Ledger path '{path}' is outside the ledger directory"
            )
        return resolved

    def print_ledger(self, path: str | Path, card: int, pin: int) -> Path:
        """
        Write the account's ledger to path, one entry per line.

        The file is overwritten, not appended to. Returns the
        resolved path that was written.
        """
        key, _ = self._get_account(card, pin)

        try:
            target = self.resolve_ledger_path(path)
        except UnsafeLedgerPath:
            logger.warning(
                "Refused ledger path %r for card %s", str(path), mask_card(card)
            )
            raise

        entries = self._transactions[key]
        try:
            self.ledger_dir.mkdir(parents=True, exist_ok=True)
            with open(target, "w", encoding="utf-8", newline="\n") as f:
                for entry in entries:
                    f.write(entry + "\n")
        except OSError as e:
            logger.error("Could not write ledger to %s: %s", target, e)
            raise LedgerIOError(f"Could not write ledger to '{path}': {e}") from e

        logger.info(
            "Printed %d ledger entries for card %s", len(entries), mask_card(card)
        )
        return target
