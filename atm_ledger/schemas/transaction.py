"""
Pydantic schemas for cash operations.

The amount is not range-checked here. AtmService owns the
amount rules (negative zero included), so every caller gets
the same InvalidAmount error.
"""

from pydantic import BaseModel

from atm_ledger.models.enums import TransactionType
from atm_ledger.schemas.account import AccountCredentials


class CashRequest(AccountCredentials):
    amount: float


class TransactionResponse(BaseModel):
    card: int
    transaction_type: TransactionType
    amount: float
    balance: float
    entry: str
