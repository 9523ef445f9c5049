"""
Pydantic schemas for ledger export.
"""

from pydantic import BaseModel, Field

from atm_ledger.schemas.account import AccountCredentials


class PrintLedgerRequest(AccountCredentials):
    """
    Request to write an account's ledger to a file.

    path is resolved inside the configured ledger directory.
    """
    path: str = Field(min_length=1, max_length=255)


class PrintLedgerResponse(BaseModel):
    path: str
    entries: int
