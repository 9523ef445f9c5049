"""
Shared enumerations for the domain models.
"""

import enum


class TransactionType(str, enum.Enum):
    """Kind of balance-changing operation recorded in the ledger."""
    WITHDRAWAL = "WITHDRAWAL"
    DEPOSIT = "DEPOSIT"

    @property
    def label(self) -> str:
        """Human-readable name used at the start of a ledger line."""
        return self.value.capitalize()
