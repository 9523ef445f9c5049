"""
Pydantic schemas for account registration and balance queries.

The card number and PIN always travel in the request body,
never in the URL.
"""

from pydantic import BaseModel, Field


class AccountCredentials(BaseModel):
    card: int = Field(ge=0)
    pin: int = Field(ge=0)


class AccountRegister(AccountCredentials):
    """Request to register a new account."""
    owner_name: str = Field(min_length=1, max_length=100)
    initial_balance: float = Field(allow_inf_nan=False)


class AccountResponse(BaseModel):
    card: int
    owner_name: str
    balance: float


class BalanceResponse(BaseModel):
    card: int
    balance: float
