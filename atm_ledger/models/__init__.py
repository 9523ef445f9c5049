"""
Domain models package.

The account and transaction tables live in memory inside
AtmService; these are the types stored in them.
"""

from atm_ledger.models.enums import TransactionType
from atm_ledger.models.account import AccountKey, Account, format_entry

__all__ = [
    "TransactionType",
    "AccountKey",
    "Account",
    "format_entry",
]
