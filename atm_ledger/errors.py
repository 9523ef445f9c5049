"""
Error taxonomy for the ATM ledger.

Every failure the service reports is an AtmError carrying an
ErrorKind, so callers can either catch the specific subclass or
branch on the kind. A failed call never changes stored state.
"""

import enum


class ErrorKind(str, enum.Enum):
    """Discriminator shared by every AtmError."""
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    IO_ERROR = "IO_ERROR"


class AtmError(Exception):
    """Base class for all ATM ledger failures."""
    kind: ErrorKind


class AlreadyRegistered(AtmError):
    """An account already exists for this card and PIN."""
    kind = ErrorKind.ALREADY_REGISTERED


class AccountNotFound(AtmError):
    """No account is registered for this card and PIN."""
    kind = ErrorKind.ACCOUNT_NOT_FOUND


class InvalidAmount(AtmError):
    """
    The amount is not usable as cash.

    Raised for zero, negative zero, negative, infinite and NaN
    amounts, and for deposits whose result would overflow.
    """
    kind = ErrorKind.INVALID_AMOUNT


class InsufficientFunds(AtmError):
    """The withdrawal is larger than the current balance."""
    kind = ErrorKind.INSUFFICIENT_FUNDS


class InvalidAccountDetails(AtmError):
    """Card number, PIN or owner name failed validation."""
    kind = ErrorKind.INVALID_ACCOUNT


class LedgerIOError(AtmError):
    """The ledger file could not be written."""
    kind = ErrorKind.IO_ERROR


class UnsafeLedgerPath(LedgerIOError):
    """The ledger path resolves outside the ledger directory."""
